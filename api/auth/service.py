"""
Auth business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status
from fastapi.concurrency import run_in_threadpool

from core import db
from core.settings import Settings

from . import repository, schemas, security

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


async def signup(payload: schemas.SignupRequest, *, settings: Settings) -> schemas.TokenResponse:
    try:
        password_hash = await run_in_threadpool(
            security.hash_password,
            payload.password,
            rounds=settings.bcrypt_rounds,
        )
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    try:
        user_row = await repository.create_user(
            username=payload.username,
            password_hash=password_hash,
        )
    except repository.DuplicateUsername as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already exists",
        ) from exc
    except db.StoreError as exc:
        logger.exception("signup_failed username=%s", payload.username)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user",
        ) from exc

    logger.info("user_created user_id=%s", user_row["user_id"])
    token = security.issue_token(
        settings,
        user_id=int(user_row["user_id"]),
        username=str(user_row["username"]),
    )
    return schemas.TokenResponse(message="User created successfully", token=token)


async def login(payload: schemas.LoginRequest, *, settings: Settings) -> schemas.TokenResponse:
    try:
        user_row = await repository.get_user_by_username(payload.username)
    except db.StoreError as exc:
        logger.exception("login_lookup_failed username=%s", payload.username)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        ) from exc

    if user_row is None:
        await run_in_threadpool(security.verify_against_dummy, payload.password)
        logger.info("login_rejected reason=unknown_user")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
        )

    password_ok = await run_in_threadpool(
        security.verify_password,
        payload.password,
        str(user_row.get("password") or ""),
    )
    if not password_ok:
        logger.info("login_rejected reason=bad_password user_id=%s", user_row["user_id"])
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
        )

    token = security.issue_token(
        settings,
        user_id=int(user_row["user_id"]),
        username=str(user_row["username"]),
    )
    return schemas.TokenResponse(message="Login successful", token=token)
