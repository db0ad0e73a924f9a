# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""Availabilityio CLI: operational commands.

Commands:
    serve     Run the add-on HTTP server (uvicorn).
    lookup    Resolve one stream id against TMDB and print the entries as JSON.

Environment:
    TMDB_API_KEY        TMDB v3 API key.
    PORT                Listening port (default 7874).
    TMDB_BASE_URL       e.g., https://api.themoviedb.org/3
"""

from __future__ import annotations

import asyncio
import json

import typer

from availabilityio.adapters.gateways.tmdb_gateway import TmdbGateway
from availabilityio.adapters.presenters.addon_presenter import StreamsPresenter
from availabilityio.application.schemas.dto.streams import StreamsDTO
from availabilityio.application.use_cases.streams.get_availability_streams import (
    GetAvailabilityStreams,
)
from availabilityio.config.settings import Settings, get_settings
from availabilityio.dependencies.streams import build_tmdb_settings
from availabilityio.domain.entities.stream import SUPPORTED_MEDIA_TYPE, StreamRequest
from availabilityio.infrastructure.external_apis.tmdb.client import TmdbClient
from availabilityio.infrastructure.logging.logger import configure_root_logging, get_json_logger

configure_root_logging()
log = get_json_logger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)


async def _lookup(settings: Settings, request: StreamRequest) -> StreamsDTO:
    """Run the stream use case once with an owned TMDB client."""
    client = TmdbClient(build_tmdb_settings(settings))
    try:
        uc = GetAvailabilityStreams(gateway=TmdbGateway(client), settings=settings)
        return await uc.execute(request)
    finally:
        await client.aclose()


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (defaults to HOST or 0.0.0.0)."),
    port: int | None = typer.Option(None, help="Port (defaults to PORT or 7874)."),
) -> None:
    """Run the add-on HTTP server."""
    from availabilityio.main import run

    run(get_settings(), host=host, port=port)


@app.command("lookup")
def lookup(
    stream_id: str = typer.Argument(..., help="Stream id, e.g. tt0111161."),
    media_type: str = typer.Option(SUPPORTED_MEDIA_TYPE, "--type", help="Media type tag."),
) -> None:
    """Print the stream entries the add-on would return for STREAM_ID."""
    settings = get_settings()
    configure_root_logging(settings.log_level)
    dto = asyncio.run(_lookup(settings, StreamRequest(media_type=media_type, stream_id=stream_id)))
    body = StreamsPresenter().present(dto).model_dump_http(exclude_none=True)
    log.debug("cli.lookup", extra={"extra": {"status": dto.status.value}})
    typer.echo(json.dumps(body, ensure_ascii=False, indent=2))


if __name__ == "__main__":  # pragma: no cover
    app()
