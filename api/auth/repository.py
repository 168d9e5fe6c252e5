"""
Credential persistence (raw SQL).
"""

from __future__ import annotations

from core import db


class DuplicateUsername(RuntimeError):
    pass


async def create_user(*, username: str, password_hash: str) -> dict:
    # UNIQUE(username) decides the race; no row back means the name was taken.
    row = await db.fetch_one(
        """
        INSERT INTO users (username, password)
        VALUES ($1, $2)
        ON CONFLICT (username) DO NOTHING
        RETURNING user_id, username
        """,
        username,
        password_hash,
    )
    if row is None:
        raise DuplicateUsername(f"Username already exists: {username}")
    return row


async def get_user_by_username(username: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT user_id, username, password
        FROM users
        WHERE username = $1
        """,
        username,
    )
