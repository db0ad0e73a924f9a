# src/availabilityio/domain/enums/release_type.py
# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""
TMDB release type codes.

Purpose:
    Name the integer codes TMDB attaches to each regional release event.

Layer:
    domain
"""

from __future__ import annotations

from enum import IntEnum


class ReleaseType(IntEnum):
    """Release event types as published by TMDB ``release_dates``."""

    PREMIERE = 1
    THEATRICAL_LIMITED = 2
    THEATRICAL = 3
    DIGITAL = 4
    PHYSICAL = 5
    TV = 6
