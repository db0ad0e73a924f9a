# src/availabilityio/adapters/routers/metrics_router.py
# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""Prometheus scrape endpoint (`/metrics`).

Exposes the text-format Prometheus endpoint. TMDB and stream-outcome metrics
are created eagerly on scrape so their series exist from the first request.

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from availabilityio.infrastructure.observability.metrics_tmdb import (
    get_stream_outcomes_total,
    get_tmdb_errors_total,
    get_tmdb_http_status_total,
    get_tmdb_latency_seconds,
)

router = APIRouter()


@router.get("/metrics", include_in_schema=False)
async def metrics_probe() -> Response:
    """Expose Prometheus metrics."""
    get_tmdb_latency_seconds()
    get_tmdb_errors_total()
    get_tmdb_http_status_total()
    get_stream_outcomes_total()
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
