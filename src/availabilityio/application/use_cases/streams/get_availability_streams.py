# src/availabilityio/application/use_cases/streams/get_availability_streams.py
# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""
Use Case: Get Availability Streams

Purpose:
    Turn a catalog stream request into exactly one display entry describing
    the movie's digital release availability (or no entries for requests the
    add-on does not serve).

Flow:
    1. Configuration and request-shape checks (no network).
    2. IMDb id -> TMDB id.
    3. TMDB id -> earliest digital release date (preferred region first).
    4. Compare the date with the injected clock and pick a message.

    Steps 2-4 run inside a single boundary that converts any failure into the
    generic error entry; nothing raised there reaches the caller.

Layer: application/use_cases
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from availabilityio.application.interfaces.metadata_gateway import MetadataGateway
from availabilityio.application.schemas.dto.streams import StreamEntryDTO, StreamsDTO
from availabilityio.config.settings import Settings
from availabilityio.domain.entities.stream import StreamEntry, StreamRequest
from availabilityio.domain.enums.availability_status import AvailabilityStatus
from availabilityio.domain.services.digital_release import (
    parse_release_datetime,
    release_date_label,
    select_digital_release_date,
)
from availabilityio.infrastructure.logging.logger import get_json_logger
from availabilityio.infrastructure.observability.metrics_tmdb import get_stream_outcomes_total

logger = get_json_logger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class GetAvailabilityStreams:
    """Use case resolving the digital release availability of a movie.

    Args:
        gateway: Metadata gateway implementation.
        settings: Application settings (credential presence, links, region).
        clock: Returns the current aware datetime; defaults to UTC now.
    """

    def __init__(
        self,
        gateway: MetadataGateway,
        settings: Settings,
        clock: Clock | None = None,
    ) -> None:
        self._gateway = gateway
        self._settings = settings
        self._clock = clock or _utc_now
        self._outcomes = get_stream_outcomes_total()

    @property
    def landing_url(self) -> str:
        return self._settings.tmdb_web_url

    def movie_url(self, tmdb_id: int) -> str:
        return f"{self._settings.tmdb_web_url}/movie/{tmdb_id}"

    async def execute(self, request: StreamRequest) -> StreamsDTO:
        """Resolve the availability entry for ``request``.

        Args:
            request: Stream request from the catalog host.

        Returns:
            StreamsDTO: One entry, or none for unsupported type/id.
        """
        if not self._settings.tmdb_configured:
            result = self._single(
                AvailabilityStatus.NOT_CONFIGURED,
                StreamEntry(
                    name="Configuration error",
                    title="TMDB_API_KEY is not set",
                    external_url=self.landing_url,
                ),
            )
        elif not request.is_supported_type:
            result = StreamsDTO(status=AvailabilityStatus.UNSUPPORTED_TYPE)
        elif not request.has_imdb_id:
            result = StreamsDTO(status=AvailabilityStatus.UNSUPPORTED_ID)
        else:
            result = await self._resolve_safely(request.imdb_id)

        self._outcomes.labels(outcome=result.status.value).inc()
        logger.info(
            "streams.resolved",
            extra={
                "extra": {
                    "media_type": request.media_type,
                    "stream_id": request.stream_id,
                    "status": result.status.value,
                    "tmdb_id": result.tmdb_id,
                    "release_date": result.release_date,
                }
            },
        )
        return result

    async def _resolve_safely(self, imdb_id: str) -> StreamsDTO:
        """Run the networked resolution; any failure becomes the error entry."""
        try:
            return await self._resolve(imdb_id)
        except Exception as exc:
            logger.warning(
                "streams.lookup_failed",
                extra={
                    "extra": {
                        "imdb_id": imdb_id,
                        "error_type": type(exc).__name__,
                        "error": str(exc),
                    }
                },
            )
            return self._single(
                AvailabilityStatus.ERROR,
                StreamEntry(
                    name="TMDB error",
                    title="Failed to fetch release data",
                    external_url=self.landing_url,
                ),
            )

    async def _resolve(self, imdb_id: str) -> StreamsDTO:
        tmdb_id = await self._gateway.find_movie_id(imdb_id)
        if tmdb_id is None:
            return self._single(
                AvailabilityStatus.NO_MATCH,
                StreamEntry(
                    name="No TMDB match",
                    title=f"No TMDB match for {imdb_id}",
                    external_url=self.landing_url,
                ),
            )

        movie_url = self.movie_url(tmdb_id)
        events = await self._gateway.fetch_release_events(tmdb_id)
        planned = select_digital_release_date(
            events, preferred_region=self._settings.tmdb_preferred_region
        )
        if planned is None:
            return self._single(
                AvailabilityStatus.NO_DIGITAL_DATE,
                StreamEntry(
                    name="No digital date",
                    title="No digital release date found",
                    external_url=movie_url,
                ),
                tmdb_id=tmdb_id,
            )

        label = release_date_label(planned)
        released_at = parse_release_datetime(planned)
        if released_at is None:
            status = AvailabilityStatus.UNPARSEABLE_DATE
            entry = StreamEntry(
                name="Not yet available",
                title=f"Planned digital release: {label}",
                external_url=movie_url,
            )
        elif released_at <= self._clock():
            status = AvailabilityStatus.RELEASED
            entry = StreamEntry(
                name="Digital release",
                title=f"Released {label}",
                external_url=movie_url,
            )
        else:
            status = AvailabilityStatus.UPCOMING
            entry = StreamEntry(
                name="⏳ Not Available Yet",
                title=f"Digital release: {label} — Check back after that date!",
                external_url=movie_url,
            )
        return self._single(status, entry, tmdb_id=tmdb_id, release_date=planned)

    @staticmethod
    def _single(
        status: AvailabilityStatus,
        entry: StreamEntry,
        *,
        tmdb_id: int | None = None,
        release_date: str | None = None,
    ) -> StreamsDTO:
        return StreamsDTO(
            status=status,
            items=[StreamEntryDTO.from_entity(entry)],
            tmdb_id=tmdb_id,
            release_date=release_date,
        )
