# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""TMDB transport package."""

from __future__ import annotations

from .client import TmdbClient
from .settings import TmdbSettings

__all__ = ["TmdbClient", "TmdbSettings"]
