"""
Application configuration using pydantic-settings.

Loads settings from environment variables (and optional .env file) with sensible defaults.

Fields loaded (env var names in parentheses):
- app_env (APP_ENV)
- log_level (LOG_LEVEL)
- database_url (DATABASE_URL or DB_URL)
- sqlalchemy_echo (SQLALCHEMY_ECHO)
- auto_create_tables (AUTO_CREATE_TABLES)
- host / port (HOST / PORT)
- allow_origins (ALLOW_ORIGINS, comma-separated)
- public_dir (PUBLIC_DIR)

Usage:
    from storefront.core.config import get_settings
    settings = get_settings()
    print(settings.database_url)
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment / logging
    app_env: str = Field(default="development", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database URL (accept DATABASE_URL or DB_URL)
    database_url: str = Field(
        default="sqlite:///./storefront.db",
        validation_alias=AliasChoices("DATABASE_URL", "DB_URL"),
    )
    sqlalchemy_echo: bool = Field(default=False, alias="SQLALCHEMY_ECHO")

    # Create missing tables when the storage client starts
    auto_create_tables: bool = Field(default=True, alias="AUTO_CREATE_TABLES")

    # Listener
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT", ge=1, le=65535)

    # CORS origins, comma-separated; "*" allows all
    allow_origins: str = Field(default="*", alias="ALLOW_ORIGINS")

    # Directory holding the static landing page (mounted at "/" when present)
    public_dir: str = Field(default="public", alias="PUBLIC_DIR")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def cors_origins(self) -> List[str]:
        raw = (self.allow_origins or "").strip()
        if not raw or raw == "*":
            return ["*"]
        return [o.strip() for o in raw.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return a cached Settings instance.
    """
    return Settings()  # type: ignore[call-arg]


__all__ = ["Settings", "get_settings"]
