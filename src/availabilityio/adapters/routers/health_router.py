# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""Health endpoint (Adapters Layer).

Liveness only: the add-on has no backing stores, so readiness equals
liveness. Reports whether the TMDB credential is configured without
exposing it.
"""

from __future__ import annotations

from typing import Annotated, Literal

from fastapi import APIRouter, Depends

from availabilityio import __version__
from availabilityio.adapters.schemas.http.base import BaseHTTPSchema
from availabilityio.config.settings import Settings
from availabilityio.dependencies.streams import get_app_settings

router = APIRouter(tags=["Health"])


class HealthResponse(BaseHTTPSchema):
    """Liveness payload."""

    status: Literal["ok"] = "ok"
    version: str
    tmdb_configured: bool


@router.get("/healthz", response_model=HealthResponse, summary="Liveness probe")
async def healthz(settings: Annotated[Settings, Depends(get_app_settings)]) -> HealthResponse:
    return HealthResponse(
        version=settings.service_version or __version__,
        tmdb_configured=settings.tmdb_configured,
    )
