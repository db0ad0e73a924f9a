# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""
Release Event Entity

Purpose:
    Immutable representation of one region-tagged release event (no I/O).

Layer: domain/entities
"""
from __future__ import annotations

from dataclasses import dataclass

from availabilityio.domain.enums.release_type import ReleaseType


@dataclass(frozen=True, slots=True)
class ReleaseEvent:
    """One TMDB release event.

    Args:
        region: ISO 3166-1 code of the region the event belongs to (upper-case).
        release_date: Raw provider date string, or ``None`` when missing/blank.
        release_type: Provider release type code; unknown codes are kept as-is.
    """

    region: str
    release_date: str | None
    release_type: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "region", self.region.strip().upper())
        if self.release_date is not None and not self.release_date.strip():
            object.__setattr__(self, "release_date", None)

    @property
    def is_digital(self) -> bool:
        """Return True when this event marks a dated digital release."""
        return self.release_type == ReleaseType.DIGITAL and self.release_date is not None
