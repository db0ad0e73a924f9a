# src/availabilityio/domain/services/digital_release.py
# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""
Digital release date selection.

Purpose:
    Pure functions that pick the earliest digital release date from a set of
    region-tagged release events and interpret raw provider date strings.

Layer:
    domain/services

Selection rules:
    1. Keep digital events with a non-empty date.
    2. If any of them belong to the preferred region, only those compete;
       otherwise every region competes.
    3. The earliest date wins. Dates that cannot be parsed sort after every
       parseable date and keep their original relative order.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime

from availabilityio.domain.entities.release_event import ReleaseEvent

__all__ = [
    "parse_release_datetime",
    "release_date_label",
    "select_digital_release_date",
]

_LATEST = datetime.max.replace(tzinfo=UTC)


def parse_release_datetime(raw: str) -> datetime | None:
    """Parse a provider date string into an aware UTC datetime.

    Accepts ISO-8601 dates and timestamps (``2024-05-01``,
    ``2024-05-01T00:00:00.000Z``). Naive values are taken as UTC.

    Returns:
        The parsed datetime, or ``None`` when ``raw`` is not a calendar date/time.
    """
    try:
        parsed = datetime.fromisoformat(raw.strip())
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=UTC)
        return parsed.astimezone(UTC)
    except (ValueError, OverflowError):
        return None


def release_date_label(raw: str) -> str:
    """Return the date part of a raw provider value (text before ``T``)."""
    head = raw.split("T", 1)[0]
    return head or raw


def _sort_key(raw: str) -> tuple[bool, datetime]:
    parsed = parse_release_datetime(raw)
    return (parsed is None, parsed or _LATEST)


def select_digital_release_date(
    events: Iterable[ReleaseEvent],
    *,
    preferred_region: str,
) -> str | None:
    """Select the earliest digital release date, preferring one region.

    Args:
        events: Release events for a single title, any region.
        preferred_region: Region code whose digital dates win when present.

    Returns:
        The raw date string of the chosen event, or ``None`` when no region
        has a dated digital release.
    """
    region = preferred_region.strip().upper()
    digital = [e for e in events if e.is_digital]
    preferred = [e for e in digital if e.region == region]
    candidates = [e.release_date for e in (preferred or digital) if e.release_date]
    if not candidates:
        return None
    return sorted(candidates, key=_sort_key)[0]
