from __future__ import annotations

from .availability_status import AvailabilityStatus
from .release_type import ReleaseType

__all__ = ["AvailabilityStatus", "ReleaseType"]
