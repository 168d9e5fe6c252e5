"""
Auth dependencies for protected FastAPI routes.

401 when no token can be read from the header, 403 when the token does not
verify (bad signature and expiry are not told apart).
"""

from __future__ import annotations

import logging

from fastapi import Depends, Header, HTTPException, status

from core.settings import Settings, get_settings

from . import security

logger = logging.getLogger(__name__)


def _extract_bearer_token(authorization: str | None) -> str:
    parts = (authorization or "").split()
    if len(parts) < 2:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization must be: Bearer <token>.",
        )
    return parts[1]


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


async def get_current_user(
    access_token: str = Depends(get_bearer_token),
    settings: Settings = Depends(get_settings),
) -> dict:
    try:
        return security.verify_token(settings, access_token)
    except security.AuthSecurityError as exc:
        logger.info("token_rejected reason=%s", type(exc).__name__)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token.",
        ) from exc
