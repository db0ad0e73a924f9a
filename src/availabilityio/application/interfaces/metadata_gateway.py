# Copyright (c)
# SPDX-License-Identifier: MIT
"""Application Port: movie metadata gateway.

This interface defines the provider-agnostic lookups the stream use case
needs, without binding to any HTTP client or provider payload shape.

Design:
    * Two capabilities, called strictly in sequence.
    * Absent results are ``None`` / empty lists, never sentinel values.
    * Failures surface as domain exceptions (see ``domain.exceptions.tmdb``).
"""

from __future__ import annotations

from typing import Protocol

from availabilityio.domain.entities.release_event import ReleaseEvent


class MetadataGateway(Protocol):
    """Protocol for resolving movie ids and their release events."""

    async def find_movie_id(self, imdb_id: str) -> int | None:
        """Resolve an IMDb id to the provider's movie id.

        Args:
            imdb_id: IMDb identifier (``tt`` prefixed).

        Returns:
            The provider movie id, or ``None`` when the provider has no match.
        """

    async def fetch_release_events(self, movie_id: int) -> list[ReleaseEvent]:
        """Fetch every region-tagged release event for a movie.

        Args:
            movie_id: Provider movie id.

        Returns:
            Release events in provider order; empty when none are published.
        """
