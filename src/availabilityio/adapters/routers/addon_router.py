# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""
Add-on Router.

Summary:
    Stremio add-on protocol endpoints: the manifest and the stream handler.

Layer:
    adapters/routers

Contract:
    * ``GET /manifest.json`` returns the add-on manifest.
    * ``GET /stream/{type}/{id}.json`` returns ``{"streams": [...]}``; always
      200 for well-formed paths, including empty and error entries.
"""
from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, status

from availabilityio.adapters.presenters.addon_presenter import (
    ManifestPresenter,
    StreamsPresenter,
)
from availabilityio.application.use_cases.streams.get_availability_streams import (
    GetAvailabilityStreams,
)
from availabilityio.dependencies.streams import get_streams_use_case
from availabilityio.domain.entities.stream import StreamRequest

router = APIRouter(tags=["Add-on"])
manifest_presenter = ManifestPresenter()
streams_presenter = StreamsPresenter()


@router.get(
    "/manifest.json",
    status_code=status.HTTP_200_OK,
    summary="Add-on manifest",
)
async def get_manifest() -> dict[str, Any]:
    """Return the add-on manifest."""
    return manifest_presenter.present().model_dump_http()


@router.get(
    "/stream/{media_type}/{stream_id}.json",
    status_code=status.HTTP_200_OK,
    summary="Digital release availability for a title",
)
async def get_streams(
    media_type: str,
    stream_id: str,
    uc: Annotated[GetAvailabilityStreams, Depends(get_streams_use_case)],
) -> dict[str, Any]:
    """Return the availability display entry for ``stream_id``."""
    dto = await uc.execute(StreamRequest(media_type=media_type, stream_id=stream_id))
    return streams_presenter.present(dto).model_dump_http(exclude_none=True)
