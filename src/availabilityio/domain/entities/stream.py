# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""
Stream request and display entry entities.

Purpose:
    Value objects exchanged with the catalog host: the incoming lookup
    request and the display entries returned for it.

Layer: domain/entities
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final

SUPPORTED_MEDIA_TYPE: Final[str] = "movie"
IMDB_ID_PREFIX: Final[str] = "tt"


@dataclass(frozen=True, slots=True)
class StreamRequest:
    """A stream lookup issued by the catalog host.

    Args:
        media_type: Host media type tag (e.g. ``"movie"``, ``"series"``).
        stream_id: Host identifier; may carry ``:season:episode`` suffixes.
    """

    media_type: str
    stream_id: str

    @property
    def imdb_id(self) -> str:
        """Return the identifier part before the first colon."""
        return self.stream_id.split(":", 1)[0]

    @property
    def is_supported_type(self) -> bool:
        return self.media_type == SUPPORTED_MEDIA_TYPE

    @property
    def has_imdb_id(self) -> bool:
        imdb_id = self.imdb_id
        return bool(imdb_id) and imdb_id.startswith(IMDB_ID_PREFIX)


@dataclass(frozen=True, slots=True)
class StreamEntry:
    """Display entry shown to the end user.

    Args:
        name: Short label shown as the stream name.
        title: Longer human-readable message.
        external_url: Optional link opened when the entry is selected.
    """

    name: str
    title: str
    external_url: str | None = None
