"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI opens it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Every driver failure (including "pool not initialized") surfaces as
`StoreError`, so callers only handle one persistence error type.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None


class StoreError(RuntimeError):
    pass


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url(raw_url: str) -> str:
    url = (raw_url or "").strip()
    if not url:
        raise StoreError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool(raw_url: str) -> None:
    global _pool
    if _pool is not None:
        return None
    # A malformed DSN surfaces as ValueError; a connect timeout as asyncio.TimeoutError.
    try:
        _pool = await asyncpg.create_pool(
            dsn=database_url(raw_url),
            min_size=1,
            max_size=5,
            command_timeout=30,
        )
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, ValueError, asyncio.TimeoutError) as exc:
        raise StoreError(f"Could not connect to database: {exc}") from exc
    logger.info("db_pool_opened")


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise StoreError("DB pool is not initialized.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await pool().fetchrow(sql, *args)
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as exc:
        raise StoreError(str(exc)) from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool().fetch(sql, *args)
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as exc:
        raise StoreError(str(exc)) from exc
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    try:
        await pool().execute(sql, *args)
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as exc:
        raise StoreError(str(exc)) from exc
