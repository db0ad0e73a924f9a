# src/availabilityio/dependencies/core/bootstrap.py
# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""Core bootstrap for shared infrastructure (settings, HTTP client).

This module owns the lifecycle of shared infrastructure used by the FastAPI
app. The single public surface is :func:`bootstrap`, an async context manager
that yields a simple state object with the resolved Settings and shared HTTP
client.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from fastapi import FastAPI

from availabilityio.config.settings import Settings, get_settings
from availabilityio.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


@dataclass
class BootstrapState:
    """State yielded by the bootstrap context manager."""

    settings: Settings
    http_client: httpx.AsyncClient


@asynccontextmanager
async def bootstrap(app: FastAPI) -> AsyncGenerator[BootstrapState, None]:
    """Initialize and teardown shared infrastructure.

    Responsibilities:
        * Resolve settings (the app's own settings win over the global singleton).
        * Create a shared HTTPX AsyncClient bounded by the TMDB timeout.
        * Close the client on exit, even on error.

    Args:
        app: FastAPI application instance.

    Yields:
        BootstrapState: Resolved settings and shared HTTP client.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    logger.info("bootstrap.start")

    http_client = httpx.AsyncClient(timeout=settings.tmdb_timeout_s)
    state = BootstrapState(settings=settings, http_client=http_client)

    if not settings.tmdb_configured:
        logger.warning("bootstrap.tmdb_api_key_missing")
    manifest_url = f"http://localhost:{settings.port}/manifest.json"
    logger.info("Addon running on %s", manifest_url, extra={"extra": {"port": settings.port}})

    try:
        yield state
    finally:
        try:
            await http_client.aclose()
        except Exception:
            logger.exception("bootstrap.http_client_close_failed")
        logger.info("bootstrap.stop")
