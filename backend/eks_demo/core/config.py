from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger("eks_demo.core.config")

DEFAULT_PORT = 3000
DEFAULT_ENV = "development"

# Load .env.local first, then .env; variables already in the environment win
# (useful for CI/CD and for the orchestrator's injected env).
try:
    from dotenv import load_dotenv

    _PROJECT_ROOT = Path(__file__).resolve().parents[3]
    _ENV_LOCAL = _PROJECT_ROOT / ".env.local"
    _ENV_FILE = _PROJECT_ROOT / ".env"

    if _ENV_LOCAL.exists():
        load_dotenv(_ENV_LOCAL, override=False)
        log.info("[config] Loaded .env.local from %s", _ENV_LOCAL)
    if _ENV_FILE.exists():
        load_dotenv(_ENV_FILE, override=False)
        log.info("[config] Loaded .env from %s", _ENV_FILE)
except OSError as e:
    log.warning("[config] Failed to load .env files explicitly: %s", e)


class Settings(BaseSettings):
    """Process configuration, resolved once at startup."""

    PORT: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    HOST: str = "0.0.0.0"
    APP_ENV: str = Field(
        default=DEFAULT_ENV,
        validation_alias=AliasChoices("NODE_ENV", "APP_ENV", "ENV", "PYTHON_ENV"),
    )
    LOG_LEVEL: str = "INFO"
    SENTRY_DSN: str | None = None

    model_config = SettingsConfigDict(extra="ignore", frozen=True)

    @field_validator("PORT", mode="before")
    @classmethod
    def _blank_port_uses_default(cls, value):
        # PORT="" behaves like an unset PORT
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_PORT
        return value

    @field_validator("APP_ENV", mode="before")
    @classmethod
    def _blank_env_uses_default(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_ENV
        return value

    @property
    def log_level(self) -> int:
        level = logging.getLevelName(self.LOG_LEVEL.strip().upper())
        return level if isinstance(level, int) else logging.INFO


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings", "DEFAULT_PORT", "DEFAULT_ENV"]
