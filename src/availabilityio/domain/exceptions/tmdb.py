# src/availabilityio/domain/exceptions/tmdb.py
# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""
TMDB domain exceptions.

Purpose:
    Provide TMDB-specific error types for lookup and mapping failures.

Layer:
    domain

Notes:
    - The transport client translates httpx errors and non-success statuses
      into these types; httpx exceptions never cross that boundary.
"""

from __future__ import annotations

from .base import DomainError


class TmdbError(DomainError):
    """Base class for TMDB-related errors."""

    code = "TMDB_ERROR"


class TmdbNotFound(TmdbError):
    """Raised when TMDB answers 404 for a resource."""

    code = "TMDB_NOT_FOUND"


class TmdbUnavailable(TmdbError):
    """Raised on non-success statuses other than 404 and on transport failures."""

    code = "TMDB_UNAVAILABLE"


class TmdbMappingError(TmdbError):
    """Raised when a TMDB payload cannot be mapped into domain values safely."""

    code = "TMDB_MAPPING_ERROR"
