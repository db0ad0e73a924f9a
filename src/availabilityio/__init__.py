# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""Availabilityio: TMDB digital release streams for Stremio."""

__version__ = "1.0.0"
