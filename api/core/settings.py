"""
Process-wide configuration.

Built once at startup from the environment and passed explicitly to the
pieces that need it (token signing, DB pool). Routes read it through
`get_settings`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from fastapi import Request

DEFAULT_JWT_SECRET = "dev-change-this-secret"


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    database_url: str = ""
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    token_ttl_s: int = 3600
    bcrypt_rounds: int = 12
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    init_schema: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.environ.get("DATABASE_URL", "").strip(),
            jwt_secret=_env_str("JWT_SECRET", DEFAULT_JWT_SECRET),
            jwt_algorithm=_env_str("JWT_ALG", "HS256"),
            token_ttl_s=_env_int("TOKEN_TTL_S", 3600),
            bcrypt_rounds=_env_int("BCRYPT_ROUNDS", 12),
            host=_env_str("HOST", "0.0.0.0"),
            port=_env_int("PORT", 3000),
            cors_origins=_env_list("CORS_ORIGINS", ["*"]),
            log_level=_env_str("LOG_LEVEL", "INFO").upper(),
            init_schema=_env_bool("DB_INIT_SCHEMA", True),
        )

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
