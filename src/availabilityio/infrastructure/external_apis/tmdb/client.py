# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""TMDB Transport Client: instrumented, async, single-shot.

This transport is framework-agnostic and provides:

* Async HTTP (httpx) with a bounded per-request timeout.
* Deterministic mapping of statuses and transport failures to TMDB domain errors.
* Request-id propagation (``X-Request-ID``) for log correlation.
* Prometheus metrics for latency, status distribution and errors.

Endpoints:
    * find_by_imdb_id: ``/find/{imdb_id}?external_source=imdb_id``
    * movie_release_dates: ``/movie/{movie_id}/release_dates``

Notes:
    * Calls are never retried; one failure surfaces immediately to the caller.
    * Caller-facing exceptions are always TMDB domain exceptions.
    * The API key is attached as a query parameter and never logged.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any, Final
from urllib.parse import quote

import httpx

from availabilityio.domain.exceptions.tmdb import (
    TmdbError,
    TmdbMappingError,
    TmdbNotFound,
    TmdbUnavailable,
)
from availabilityio.infrastructure.external_apis.tmdb.settings import TmdbSettings
from availabilityio.infrastructure.logging.logger import get_json_logger, get_request_id
from availabilityio.infrastructure.observability.metrics_tmdb import (
    get_tmdb_errors_total,
    get_tmdb_http_status_total,
    get_tmdb_latency_seconds,
)

logger = get_json_logger(__name__)

_DEFAULT_HEADERS: Final[dict[str, str]] = {
    "Accept": "application/json",
    "User-Agent": "availabilityio-tmdb-client/1.0",
}


class TmdbClient:
    """Instrumented transport client for the TMDB v3 API."""

    def __init__(
        self,
        settings: TmdbSettings,
        *,
        http: httpx.AsyncClient | None = None,
        timeout_s: float | None = None,
    ) -> None:
        """Initialize the transport client.

        Args:
            settings: Provider settings loaded from environment or DI.
            http: Optional shared ``httpx.AsyncClient``. If omitted, a client
                is created and owned by this instance.
            timeout_s: Optional per-request timeout override in seconds.
        """
        self._settings = settings
        self._base_url = str(settings.base_url).rstrip("/")
        self._timeout = float(timeout_s if timeout_s is not None else settings.timeout_s)

        self._owns_client = http is None
        self._client = http or httpx.AsyncClient(
            timeout=self._timeout,
            headers=_DEFAULT_HEADERS.copy(),
        )

        self._latency = get_tmdb_latency_seconds()
        self._errors = get_tmdb_errors_total()
        self._status_total = get_tmdb_http_status_total()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    async def find_by_imdb_id(self, imdb_id: str) -> Mapping[str, Any]:
        """Look up TMDB records by IMDb id (``/find/{imdb_id}``)."""
        path = f"/find/{quote(imdb_id, safe='')}"
        return await self._get_json(
            path,
            params={"external_source": "imdb_id"},
            endpoint="find",
        )

    async def movie_release_dates(self, movie_id: int) -> Mapping[str, Any]:
        """Fetch region-tagged release dates for a TMDB movie."""
        path = f"/movie/{int(movie_id)}/release_dates"
        return await self._get_json(path, params={}, endpoint="release_dates")

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    async def _get_json(
        self,
        path: str,
        *,
        params: Mapping[str, str],
        endpoint: str,
    ) -> Mapping[str, Any]:
        """Perform a GET request and return a parsed JSON mapping.

        Args:
            path: Path relative to the TMDB base URL.
            params: Query parameters other than the API key.
            endpoint: Logical endpoint name for metrics (e.g., "find").

        Raises:
            TmdbNotFound: On 404.
            TmdbUnavailable: On other non-success statuses or transport failures.
            TmdbMappingError: On non-JSON or non-object payloads.
        """
        url = f"{self._base_url}{path}"
        query: dict[str, str] = {"api_key": self._settings.api_key.get_secret_value()}
        query.update(params)

        headers: dict[str, str] = {}
        request_id = get_request_id()
        if request_id:
            headers["X-Request-ID"] = request_id

        start = time.perf_counter()
        error_reason: str | None = None
        try:
            response = await self._perform_request(
                url=url, params=query, headers=headers, endpoint=endpoint, path=path
            )
            return self._handle_response(response=response, endpoint=endpoint, path=path)
        except TmdbError as exc:
            error_reason = type(exc).__name__
            raise
        finally:
            elapsed = time.perf_counter() - start
            outcome = "error" if error_reason else "success"
            self._latency.labels(endpoint=endpoint, outcome=outcome).observe(elapsed)
            if error_reason:
                self._errors.labels(endpoint=endpoint, reason=error_reason).inc()
            logger.debug(
                "tmdb.request",
                extra={
                    "extra": {
                        "endpoint": endpoint,
                        "path": path,
                        "outcome": outcome,
                        "elapsed_ms": round(elapsed * 1000.0, 2),
                    }
                },
            )

    async def _perform_request(
        self,
        *,
        url: str,
        params: Mapping[str, str],
        headers: Mapping[str, str],
        endpoint: str,
        path: str,
    ) -> httpx.Response:
        """Execute a single HTTP GET and map transport errors."""
        try:
            return await self._client.get(
                url,
                params=params,
                headers=headers,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            raise TmdbUnavailable(
                "TMDB request timed out.",
                details={"endpoint": endpoint, "path": path, "timeout_s": self._timeout},
            ) from exc
        except httpx.RequestError as exc:
            raise TmdbUnavailable(
                "TMDB transport failure.",
                details={"endpoint": endpoint, "path": path, "error": type(exc).__name__},
            ) from exc

    def _handle_response(
        self,
        *,
        response: httpx.Response,
        endpoint: str,
        path: str,
    ) -> Mapping[str, Any]:
        """Map an HTTP response into a JSON object or domain error."""
        status = response.status_code
        self._status_total.labels(endpoint=endpoint, status=str(status)).inc()

        if status == 404:
            raise TmdbNotFound(
                "TMDB resource not found.",
                details={"endpoint": endpoint, "path": path, "status": 404},
            )

        if not response.is_success:
            raise TmdbUnavailable(
                f"TMDB request failed: {status}",
                details={"endpoint": endpoint, "path": path, "status": status},
            )

        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise TmdbMappingError(
                "TMDB response was not valid JSON.",
                details={"endpoint": endpoint, "path": path},
            ) from exc

        if not isinstance(payload, Mapping):
            raise TmdbMappingError(
                "TMDB JSON response must be an object.",
                details={"endpoint": endpoint, "path": path, "type": type(payload).__name__},
            )

        return payload
