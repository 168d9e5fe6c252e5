"""
Auth security helpers: password hashing and access tokens.

Tokens are stateless HS256 JWTs. The only freshness control is `exp`; there
is no revocation list.
"""

from __future__ import annotations

import functools
import time
from typing import Any

import bcrypt
import jwt

from core.settings import Settings


class AuthSecurityError(RuntimeError):
    pass


class InvalidSignature(AuthSecurityError):
    pass


class TokenExpired(AuthSecurityError):
    pass


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str, *, rounds: int = 12) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    # Older bcrypt releases truncate silently past 72 bytes; newer ones raise.
    if len(password) > 72:
        raise AuthSecurityError("Password is too long.")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


@functools.lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    # Checked against when the username is unknown, so both login failures cost the same.
    return bcrypt.hashpw(b"not-a-real-password", bcrypt.gensalt()).decode("utf-8")


def verify_against_dummy(plain_password: str) -> bool:
    return verify_password(plain_password, dummy_password_hash())


def issue_token(settings: Settings, *, user_id: int, username: str) -> str:
    issued_at = now_epoch_s()
    payload = {
        "user_id": int(user_id),
        "username": username,
        "iat": issued_at,
        "exp": issued_at + settings.token_ttl_s,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(settings: Settings, token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise InvalidSignature("Token is empty.")

    try:
        payload = jwt.decode(
            raw,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "iat"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpired("Token has expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidSignature("Invalid token.") from exc

    if "user_id" not in payload or "username" not in payload:
        raise InvalidSignature("Token is missing identity claims.")

    return {
        "user_id": payload["user_id"],
        "username": payload["username"],
        "iat": payload["iat"],
        "exp": payload["exp"],
    }
