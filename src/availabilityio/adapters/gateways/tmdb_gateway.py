# src/availabilityio/adapters/gateways/tmdb_gateway.py
# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""Adapter Gateway: TMDB → application metadata port.

This gateway sits on top of the TMDB transport client and maps raw JSON into
domain values.

Design principles:
    * Optional provider fields become explicit ``None`` / empty values.
    * Shapes that cannot be interpreted at all (e.g. ``results`` not a list)
      raise :class:`TmdbMappingError` instead of being guessed at.
    * No business rules here: date selection lives in ``domain.services``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from availabilityio.application.interfaces.metadata_gateway import MetadataGateway
from availabilityio.domain.entities.release_event import ReleaseEvent
from availabilityio.domain.exceptions.tmdb import TmdbMappingError
from availabilityio.infrastructure.external_apis.tmdb.client import TmdbClient


class TmdbGateway(MetadataGateway):
    """TMDB adapter implementing the metadata gateway port."""

    def __init__(self, client: TmdbClient) -> None:
        """Initialize the gateway.

        Args:
            client: TMDB transport client.
        """
        self._client = client

    async def find_movie_id(self, imdb_id: str) -> int | None:
        payload = await self._client.find_by_imdb_id(imdb_id)
        return self._first_movie_id(payload)

    async def fetch_release_events(self, movie_id: int) -> list[ReleaseEvent]:
        payload = await self._client.movie_release_dates(movie_id)
        return self._coerce_events(payload)

    # --------------------------------------------------------------------- #
    # Private helpers
    # --------------------------------------------------------------------- #

    @staticmethod
    def _first_movie_id(payload: Mapping[str, Any]) -> int | None:
        """Return the id of the first movie result, if it is a usable id.

        Missing or non-list ``movie_results``, an empty list, a non-object
        first element, and ids that are not positive integers all mean
        "no match".
        """
        results = payload.get("movie_results")
        if not isinstance(results, list) or not results:
            return None
        first = results[0]
        if not isinstance(first, Mapping):
            return None
        movie_id = first.get("id")
        if isinstance(movie_id, bool) or not isinstance(movie_id, int) or movie_id <= 0:
            return None
        return movie_id

    @staticmethod
    def _coerce_events(payload: Mapping[str, Any]) -> list[ReleaseEvent]:
        """Flatten ``results[].release_dates[]`` into release events.

        Raises:
            TmdbMappingError: If ``results`` or a nested ``release_dates`` is
                present but not a list, or holds non-object items.
        """
        results = payload.get("results")
        if results is None:
            return []
        if not isinstance(results, list):
            raise TmdbMappingError("bad_shape", details={"expected": "results:list"})

        events: list[ReleaseEvent] = []
        for result in results:
            if not isinstance(result, Mapping):
                raise TmdbMappingError("bad_shape", details={"expected": "results:list[object]"})
            region = result.get("iso_3166_1")
            region = region if isinstance(region, str) else ""

            dates = result.get("release_dates")
            if dates is None:
                continue
            if not isinstance(dates, list):
                raise TmdbMappingError(
                    "bad_shape", details={"expected": "release_dates:list", "region": region}
                )

            for item in dates:
                if not isinstance(item, Mapping):
                    raise TmdbMappingError(
                        "bad_shape",
                        details={"expected": "release_dates:list[object]", "region": region},
                    )
                raw_date = item.get("release_date")
                raw_type = item.get("type")
                events.append(
                    ReleaseEvent(
                        region=region,
                        release_date=raw_date if isinstance(raw_date, str) else None,
                        release_type=(
                            raw_type
                            if isinstance(raw_type, int) and not isinstance(raw_type, bool)
                            else 0
                        ),
                    )
                )
        return events
