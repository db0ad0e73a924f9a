# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""
Stremio add-on protocol schemas.

Purpose:
    Wire contracts for ``/manifest.json`` and ``/stream/{type}/{id}.json``.

Layer: adapters/schemas/http
"""
from __future__ import annotations

from pydantic import Field

from availabilityio.adapters.schemas.http.base import BaseHTTPSchema


class ManifestSchema(BaseHTTPSchema):
    """Add-on manifest advertised to the catalog host."""

    id: str = Field(..., examples=["com.availabilityio.tmdb-digital-release"])
    name: str
    version: str
    description: str
    catalogs: list[dict[str, str]] = Field(default_factory=list)
    resources: list[str]
    types: list[str]
    id_prefixes: list[str] = Field(..., alias="idPrefixes")


class StreamSchema(BaseHTTPSchema):
    """One stream (display entry) as the catalog host expects it."""

    name: str
    title: str
    external_url: str | None = Field(default=None, alias="externalUrl")


class StreamsResponse(BaseHTTPSchema):
    """Stream handler response body."""

    streams: list[StreamSchema] = Field(default_factory=list)
