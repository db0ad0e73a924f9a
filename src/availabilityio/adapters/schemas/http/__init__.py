from __future__ import annotations

from .addon import ManifestSchema, StreamSchema, StreamsResponse
from .base import BaseHTTPSchema

__all__ = ["BaseHTTPSchema", "ManifestSchema", "StreamSchema", "StreamsResponse"]
