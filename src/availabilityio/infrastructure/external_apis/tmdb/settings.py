# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""TMDB transport client settings.

Purpose:
    Provide Pydantic-based configuration for the TMDB HTTP client: base URL,
    API key and per-request timeout.

Layer:
    infrastructure

Notes:
    - Values are sourced from environment variables prefixed with ``TMDB_``
      when instantiated bare; the application builds it from ``Settings``.
    - This module does not depend on FastAPI or application-layer concepts.
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class TmdbSettings(BaseSettings):
    """Configuration for the TMDB v3 HTTP client.

    Environment variables (with ``model_config.env_prefix``):

    * ``TMDB_BASE_URL``
    * ``TMDB_API_KEY``
    * ``TMDB_TIMEOUT_S``
    """

    base_url: str = Field(
        "https://api.themoviedb.org/3",
        description="Base URL for the TMDB v3 API.",
    )
    api_key: SecretStr = Field(
        SecretStr(""),
        description="TMDB v3 API key, sent as the ``api_key`` query parameter.",
    )
    timeout_s: float = Field(
        8.0,
        gt=0,
        description="Per-request timeout in seconds for the transport client.",
    )

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_prefix="TMDB_",
        extra="ignore",
    )
