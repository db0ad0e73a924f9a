# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""TMDB and stream-lookup metrics.

Purpose:
    Provide Prometheus metrics for TMDB external API calls and for the
    outcome of each stream lookup:
      * Latency histograms.
      * Error counters by reason.
      * HTTP status distribution.
      * Stream outcomes by availability status.

Design:
    - Functions return lazily created singleton metric instances so importing
      this module never registers collectors twice.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

_tmdb_latency_seconds: Histogram | None = None
_tmdb_errors_total: Counter | None = None
_tmdb_http_status_total: Counter | None = None
_stream_outcomes_total: Counter | None = None


def get_tmdb_latency_seconds() -> Histogram:
    """Return (and lazily create) the TMDB call latency histogram."""
    global _tmdb_latency_seconds
    if _tmdb_latency_seconds is None:
        _tmdb_latency_seconds = Histogram(
            "tmdb_request_latency_seconds",
            "Latency of TMDB API calls in seconds.",
            ["endpoint", "outcome"],
        )
    return _tmdb_latency_seconds


def get_tmdb_errors_total() -> Counter:
    """Return (and lazily create) the TMDB error counter."""
    global _tmdb_errors_total
    if _tmdb_errors_total is None:
        _tmdb_errors_total = Counter(
            "tmdb_errors_total",
            "Total number of TMDB client errors.",
            ["endpoint", "reason"],
        )
    return _tmdb_errors_total


def get_tmdb_http_status_total() -> Counter:
    """Return (and lazily create) the TMDB HTTP status counter."""
    global _tmdb_http_status_total
    if _tmdb_http_status_total is None:
        _tmdb_http_status_total = Counter(
            "tmdb_http_status_total",
            "TMDB HTTP responses by status code.",
            ["endpoint", "status"],
        )
    return _tmdb_http_status_total


def get_stream_outcomes_total() -> Counter:
    """Return (and lazily create) the stream lookup outcome counter."""
    global _stream_outcomes_total
    if _stream_outcomes_total is None:
        _stream_outcomes_total = Counter(
            "stream_lookup_outcomes_total",
            "Stream lookups by availability outcome.",
            ["outcome"],
        )
    return _stream_outcomes_total
