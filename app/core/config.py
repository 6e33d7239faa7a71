"""Configuration module for the billing API."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from dotenv import load_dotenv

from app.core.exceptions import ConfigurationError

load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Runtime configuration with validation."""

    APP_NAME: str
    APP_VERSION: str
    ENV: str
    DEBUG: bool
    DATABASE_URL: str
    DB_CONNECTIVITY_REQUIRED: bool
    DB_POOL_SIZE: int
    DB_MAX_OVERFLOW: int
    API_HOST: str
    API_PORT: int
    API_PREFIX: str
    LOG_LEVEL: str
    LOG_FILE: str

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"


def _build_config(env: str | None = None) -> Config:
    resolved_env = (env or os.getenv("ENV", "development")).strip().lower()
    debug = _as_bool(os.getenv("DEBUG"), default=False)

    config = Config(
        APP_NAME=os.getenv("APP_NAME", "billing-api"),
        APP_VERSION=os.getenv("APP_VERSION", "1.0.0"),
        ENV=resolved_env,
        DEBUG=debug if resolved_env != "production" else False,
        DATABASE_URL=os.getenv("DATABASE_URL", "sqlite:///./biztime.db"),
        DB_CONNECTIVITY_REQUIRED=_as_bool(
            os.getenv("DB_CONNECTIVITY_REQUIRED"),
            default=(resolved_env == "production"),
        ),
        DB_POOL_SIZE=int(os.getenv("DB_POOL_SIZE", "10")),
        DB_MAX_OVERFLOW=int(os.getenv("DB_MAX_OVERFLOW", "20")),
        API_HOST=os.getenv("API_HOST", "0.0.0.0"),
        API_PORT=int(os.getenv("API_PORT", "8000")),
        API_PREFIX=os.getenv("API_PREFIX", ""),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        LOG_FILE=os.getenv("LOG_FILE", ""),
    )
    _validate_config(config)
    return config


def _validate_database_url(database_url: str) -> None:
    parsed = urlparse(database_url)
    if parsed.scheme not in {"sqlite", "sqlite+pysqlite", "postgresql", "postgresql+psycopg", "postgresql+psycopg2"}:
        raise ConfigurationError(
            "DATABASE_URL must use sqlite:// or postgresql:// style URL."
        )
    if parsed.scheme.startswith("postgresql") and not parsed.hostname:
        raise ConfigurationError("PostgreSQL DATABASE_URL is missing hostname.")


def _validate_config(config: Config) -> None:
    _validate_database_url(config.DATABASE_URL)

    if config.DB_POOL_SIZE < 1:
        raise ConfigurationError("DB_POOL_SIZE must be >= 1.")
    if config.DB_MAX_OVERFLOW < 0:
        raise ConfigurationError("DB_MAX_OVERFLOW must be >= 0.")
    if not 0 < config.API_PORT < 65536:
        raise ConfigurationError("API_PORT must be between 1 and 65535.")
    if config.API_PREFIX and (not config.API_PREFIX.startswith("/") or config.API_PREFIX.endswith("/")):
        raise ConfigurationError("API_PREFIX must start with '/' and must not end with '/'.")
    if config.LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ConfigurationError("LOG_LEVEL must be one of DEBUG/INFO/WARNING/ERROR/CRITICAL.")
    if config.is_production and "change_me" in config.DATABASE_URL.lower():
        raise ConfigurationError("Production DATABASE_URL uses placeholder credentials.")


@lru_cache(maxsize=8)
def get_config(env: str | None = None) -> Config:
    """Get validated configuration for the requested environment."""
    return _build_config(env)
