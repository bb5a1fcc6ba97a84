# backend/meeting_records/core/settings.py
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # ------------------------------------------------------------------
    # Database (dev/test default; override in .env or env var)
    # ------------------------------------------------------------------
    DATABASE_URL: str = "sqlite:///./dev.db"
    CREATE_TABLES_ON_STARTUP: bool = True

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # ------------------------------------------------------------------
    # Caller identity is asserted upstream (auth gateway) in this header.
    # API_KEY, when set, is a shared secret clients send as X-API-Key.
    # ------------------------------------------------------------------
    USER_ID_HEADER: str = "X-User-Id"
    API_KEY: str | None = None


# Instantiate once for the whole app
settings = Settings()


def get_settings() -> Settings:
    """Convenience accessor for code expecting a callable."""
    return settings
