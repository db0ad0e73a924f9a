from __future__ import annotations

from .digital_release import (
    parse_release_datetime,
    release_date_label,
    select_digital_release_date,
)

__all__ = [
    "parse_release_datetime",
    "release_date_label",
    "select_digital_release_date",
]
