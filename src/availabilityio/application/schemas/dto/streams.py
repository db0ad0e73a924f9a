# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""Stream lookup DTOs (Application Layer)."""

from __future__ import annotations

from pydantic import Field

from availabilityio.application.schemas.dto.base import BaseDTO
from availabilityio.domain.entities.stream import StreamEntry
from availabilityio.domain.enums.availability_status import AvailabilityStatus


class StreamEntryDTO(BaseDTO):
    """One display entry."""

    name: str
    title: str
    external_url: str | None = None

    @classmethod
    def from_entity(cls, entry: StreamEntry) -> StreamEntryDTO:
        return cls(name=entry.name, title=entry.title, external_url=entry.external_url)


class StreamsDTO(BaseDTO):
    """Result of one stream lookup.

    Attributes:
        status: Terminal outcome that produced ``items``.
        items: Display entries; empty only for unsupported requests.
        tmdb_id: Resolved provider id when resolution got that far.
        release_date: Raw chosen digital release date, when one was found.
    """

    status: AvailabilityStatus
    items: list[StreamEntryDTO] = Field(default_factory=list)
    tmdb_id: int | None = None
    release_date: str | None = None
