# src/availabilityio/dependencies/streams.py
# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""Dependency wiring for the stream lookup (settings, gateway, use case).

Overview:
    Provides FastAPI dependency providers consumed by the add-on router.

Design:
    * Settings come from ``app.state.settings`` (set once by ``create_app``)
      and fall back to the cached global singleton.
    * The TMDB client reuses the shared ``httpx.AsyncClient`` created by the
      lifespan; when the lifespan has not run (bare ``TestClient(app)``), a
      request-scoped client is created and closed after the response.
    * Tests override :func:`get_streams_use_case` to inject fakes.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated

import httpx
from fastapi import Depends, Request
from pydantic import SecretStr

from availabilityio.adapters.gateways.tmdb_gateway import TmdbGateway
from availabilityio.application.use_cases.streams.get_availability_streams import (
    GetAvailabilityStreams,
)
from availabilityio.config.settings import Settings, get_settings
from availabilityio.infrastructure.external_apis.tmdb.client import TmdbClient
from availabilityio.infrastructure.external_apis.tmdb.settings import TmdbSettings


def get_app_settings(request: Request) -> Settings:
    """Return the settings bound to the running application."""
    settings = getattr(request.app.state, "settings", None)
    return settings if isinstance(settings, Settings) else get_settings()


def build_tmdb_settings(settings: Settings) -> TmdbSettings:
    """Project application settings onto the TMDB transport settings."""
    key = settings.tmdb_api_key.get_secret_value() if settings.tmdb_api_key else ""
    return TmdbSettings(
        base_url=settings.tmdb_base_url,
        api_key=SecretStr(key),
        timeout_s=settings.tmdb_timeout_s,
    )


async def get_http_client(request: Request) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Yield the shared HTTP client, or a request-scoped one outside the lifespan."""
    shared = getattr(request.app.state, "http_client", None)
    if isinstance(shared, httpx.AsyncClient) and not shared.is_closed:
        yield shared
        return

    client = httpx.AsyncClient()
    try:
        yield client
    finally:
        await client.aclose()


def get_streams_use_case(
    settings: Annotated[Settings, Depends(get_app_settings)],
    http: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> GetAvailabilityStreams:
    """Construct the stream lookup use case for one request."""
    client = TmdbClient(build_tmdb_settings(settings), http=http)
    return GetAvailabilityStreams(gateway=TmdbGateway(client), settings=settings)
