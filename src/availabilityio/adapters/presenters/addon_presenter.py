# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""Add-on presenters.

Purpose:
    Shape application DTOs into the Stremio wire contracts. No business
    decisions are made here.

Layer:
    adapters/presenters
"""

from __future__ import annotations

from typing import Final

from availabilityio import __version__
from availabilityio.adapters.schemas.http.addon import (
    ManifestSchema,
    StreamSchema,
    StreamsResponse,
)
from availabilityio.application.schemas.dto.streams import StreamsDTO
from availabilityio.domain.entities.stream import IMDB_ID_PREFIX, SUPPORTED_MEDIA_TYPE

ADDON_ID: Final[str] = "com.availabilityio.tmdb-digital-release"
ADDON_NAME: Final[str] = "Availabilityio Digital Release Streams"
ADDON_DESCRIPTION: Final[str] = (
    "Shows a stream card once the TMDB digital release date has passed."
)


class ManifestPresenter:
    """Builds the add-on manifest."""

    def present(self) -> ManifestSchema:
        return ManifestSchema(
            id=ADDON_ID,
            name=ADDON_NAME,
            version=__version__,
            description=ADDON_DESCRIPTION,
            catalogs=[],
            resources=["stream"],
            types=[SUPPORTED_MEDIA_TYPE],
            id_prefixes=[IMDB_ID_PREFIX],
        )


class StreamsPresenter:
    """Maps a :class:`StreamsDTO` onto the stream handler response."""

    def present(self, dto: StreamsDTO) -> StreamsResponse:
        return StreamsResponse(
            streams=[
                StreamSchema(
                    name=item.name,
                    title=item.title,
                    external_url=item.external_url,
                )
                for item in dto.items
            ]
        )
