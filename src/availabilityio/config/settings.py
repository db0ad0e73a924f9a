# src/availabilityio/config/settings.py
# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""Availabilityio Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated application configuration for the add-on. This module
    centralizes environment parsing and validation. Only the bootstrap and the
    dependency providers read it; use cases receive `Settings` via DI.

Design:
    - Pydantic v2 BaseSettings; unrelated keys in `.env` are ignored.
    - Frozen model: settings are loaded once at startup and never mutated.
    - Explicit field declarations with constrained types and ranges.
    - Singleton accessor `get_settings()` with LRU cache.
    - Safe, structured logging (no secrets).
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed application configuration for Availabilityio."""

    # ---------------------------
    # Core environment
    # ---------------------------
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
        validation_alias="ENVIRONMENT",
    )

    # ---------------------------
    # Serving
    # ---------------------------
    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to.",
        validation_alias="HOST",
    )
    port: int = Field(
        default=7874,
        ge=1,
        le=65535,
        description="TCP port the HTTP server listens on.",
        validation_alias="PORT",
    )
    cors_allow_origins_raw: str | None = Field(
        default=None,
        description="Raw env for allowed CORS origins (comma-separated). Unset means '*'.",
        validation_alias="ALLOWED_ORIGINS",
    )

    # ---------------------------
    # TMDB
    # ---------------------------
    tmdb_api_key: SecretStr | None = Field(
        default=None,
        description="TMDB v3 API key. Blank values are treated as unset.",
        validation_alias="TMDB_API_KEY",
    )
    tmdb_base_url: str = Field(
        default="https://api.themoviedb.org/3",
        description="Base URL for the TMDB v3 API.",
        validation_alias="TMDB_BASE_URL",
    )
    tmdb_web_url: str = Field(
        default="https://www.themoviedb.org",
        description="Public TMDB site used for landing and movie page links.",
        validation_alias="TMDB_WEB_URL",
    )
    tmdb_timeout_s: float = Field(
        default=8.0,
        ge=0.1,
        le=60.0,
        description="Per-request timeout in seconds for TMDB HTTP calls.",
        validation_alias="TMDB_TIMEOUT_S",
    )
    tmdb_preferred_region: str = Field(
        default="US",
        min_length=2,
        max_length=2,
        description="ISO 3166-1 region whose release dates win when present.",
        validation_alias="TMDB_PREFERRED_REGION",
    )

    # ---------------------------
    # Service identity / logging
    # ---------------------------
    service_version: str | None = Field(
        default=None,
        description="Service version used for logging.",
        validation_alias="SERVICE_VERSION",
    )
    log_level: str | None = Field(
        default=None,
        description="Override log level (e.g., 'DEBUG', 'INFO'). If not set, INFO is used.",
        validation_alias="LOG_LEVEL",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    @field_validator("tmdb_api_key", mode="after")
    @classmethod
    def _blank_key_is_unset(cls, value: SecretStr | None) -> SecretStr | None:
        """Collapse empty or whitespace-only keys to ``None``."""
        if value is None or not value.get_secret_value().strip():
            return None
        return SecretStr(value.get_secret_value().strip())

    @field_validator("tmdb_preferred_region", mode="after")
    @classmethod
    def _upper_region(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("tmdb_base_url", "tmdb_web_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def tmdb_configured(self) -> bool:
        """Return True when a TMDB credential is available."""
        return self.tmdb_api_key is not None

    @property
    def cors_allow_origins(self) -> list[str]:
        """Return parsed CORS origins; an unset or blank value allows all origins."""
        raw = (self.cors_allow_origins_raw or "").strip()
        entries = [e.strip() for e in raw.split(",") if e.strip()]
        return entries or ["*"]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated application settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.exception("Invalid application configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc

    logger.info(
        "Settings initialized",
        extra={
            "extra": {
                "environment": settings.environment.value,
                "port": settings.port,
                "tmdb_configured": settings.tmdb_configured,
                "tmdb_base_url": settings.tmdb_base_url,
                "tmdb_timeout_s": settings.tmdb_timeout_s,
                "tmdb_preferred_region": settings.tmdb_preferred_region,
                "cors_has_wildcard": "*" in settings.cors_allow_origins,
            }
        },
    )
    return settings
