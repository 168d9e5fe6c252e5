"""
Signup/login endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.settings import Settings, get_settings

from . import schemas, service

router = APIRouter()


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    request: schemas.SignupRequest,
    settings: Settings = Depends(get_settings),
) -> schemas.TokenResponse:
    return await service.signup(request, settings=settings)


@router.post("/login")
async def login(
    request: schemas.LoginRequest,
    settings: Settings = Depends(get_settings),
) -> schemas.TokenResponse:
    return await service.login(request, settings=settings)
