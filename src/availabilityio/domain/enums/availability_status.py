# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""
Availability outcome enumeration.

Purpose:
    Enumerate every terminal outcome of a stream lookup. Values double as
    stable metric labels.

Layer:
    domain
"""

from __future__ import annotations

from enum import Enum


class AvailabilityStatus(str, Enum):
    """Terminal outcome of one stream lookup."""

    NOT_CONFIGURED = "not_configured"
    UNSUPPORTED_TYPE = "unsupported_type"
    UNSUPPORTED_ID = "unsupported_id"
    NO_MATCH = "no_match"
    NO_DIGITAL_DATE = "no_digital_date"
    UNPARSEABLE_DATE = "unparseable_date"
    RELEASED = "released"
    UPCOMING = "upcoming"
    ERROR = "error"
