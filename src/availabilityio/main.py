# src/availabilityio/main.py
# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""
Application Entry (Adapters Bootstrap)

Synopsis:
    FastAPI bootstrap that wires middleware, exception handlers, and routers.
    Provides an application factory (`create_app`) and a uvicorn runner (`run`).

Design:
    • Bootstrap only (no business logic): routers + middleware + error handlers.
    • Settings are resolved once and bound to ``app.state.settings``.
    • Lifespan creates the shared HTTP client and tears it down safely.
    • CORS is open by default so browser-based catalog hosts can call the add-on.
    • Root JSON logging configured at import time, then re-levelled from settings.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import Response as StarletteResponse

from availabilityio import __version__
from availabilityio.adapters.routers.addon_router import router as addon_router
from availabilityio.adapters.routers.health_router import router as health_router
from availabilityio.adapters.routers.metrics_router import router as metrics_router
from availabilityio.config.settings import Settings, get_settings
from availabilityio.dependencies.core.bootstrap import bootstrap
from availabilityio.infrastructure.http.errors import (
    handle_http_exception,
    handle_unhandled_exception,
    handle_validation_error,
)
from availabilityio.infrastructure.logging.logger import (
    configure_root_logging,
    get_json_logger,
)
from availabilityio.infrastructure.middleware.access_log import AccessLogMiddleware
from availabilityio.infrastructure.middleware.request_id import RequestIdMiddleware

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
configure_root_logging()
logger = get_json_logger(__name__)


# -----------------------------------------------------------------------------
# Lifespan
# -----------------------------------------------------------------------------
@asynccontextmanager
async def runtime_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize and teardown shared infrastructure via the core bootstrap.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control back to FastAPI to serve requests.
    """
    async with bootstrap(app) as state:
        app.state.settings = state.settings
        app.state.http_client = state.http_client
        yield
    app.state.http_client = None


# -----------------------------------------------------------------------------
# Middleware & CORS
# -----------------------------------------------------------------------------
def _attach_middlewares(app: FastAPI, settings: Settings) -> None:
    """Attach core middleware.

    Starlette runs the last-added middleware first, so the effective order is:

        1. RequestIdMiddleware (correlation IDs)
        2. CORSMiddleware
        3. AccessLogMiddleware (structured access logs)

    Args:
        app: FastAPI application.
        settings: Runtime settings containing CORS config.
    """
    app.add_middleware(AccessLogMiddleware)

    allow_origins = settings.cors_allow_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials="*" not in allow_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_middleware(RequestIdMiddleware)


def _patch_exception_handlers(app: FastAPI) -> None:
    """Replace default exception handlers with structured equivalents.

    Args:
        app: FastAPI application.
    """

    async def _http_error_handler(request: Request, exc: Exception) -> StarletteResponse:
        if not isinstance(exc, StarletteHTTPException):
            raise exc
        return await handle_http_exception(request, exc)

    async def _validation_error_handler(request: Request, exc: Exception) -> StarletteResponse:
        if not isinstance(exc, RequestValidationError):
            raise exc
        return await handle_validation_error(request, exc)

    async def _unhandled_error_handler(request: Request, exc: Exception) -> StarletteResponse:
        return await handle_unhandled_exception(request, exc)

    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


# -----------------------------------------------------------------------------
# App factory
# -----------------------------------------------------------------------------
def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Explicit settings; defaults to the cached global settings.

    Returns:
        FastAPI: Fully configured application instance.
    """
    settings = settings or get_settings()
    configure_root_logging(settings.log_level)
    service_version = settings.service_version or __version__

    app = FastAPI(
        title="Availabilityio Digital Release Streams",
        version=service_version,
        description="Stremio add-on reporting TMDB digital release availability.",
        lifespan=runtime_lifespan,
    )
    app.state.settings = settings
    app.state.http_client = None

    _patch_exception_handlers(app)
    _attach_middlewares(app, settings)

    app.include_router(addon_router)
    app.include_router(health_router)
    app.include_router(metrics_router)

    logger.info(
        "service_startup",
        extra={
            "extra": {
                "service": "availabilityio",
                "env": settings.environment.value,
                "version": service_version,
                "status": "starting",
            }
        },
    )
    return app


def run(
    settings: Settings | None = None,
    *,
    host: str | None = None,
    port: int | None = None,
) -> None:
    """Serve the application with uvicorn.

    Args:
        settings: Explicit settings; defaults to the cached global settings.
        host: Bind address override.
        port: Port override.
    """
    import uvicorn

    settings = settings or get_settings()
    uvicorn.run(
        create_app(settings),
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )


if __name__ == "__main__":  # pragma: no cover
    run()
