from __future__ import annotations

from .release_event import ReleaseEvent
from .stream import IMDB_ID_PREFIX, SUPPORTED_MEDIA_TYPE, StreamEntry, StreamRequest

__all__ = [
    "IMDB_ID_PREFIX",
    "SUPPORTED_MEDIA_TYPE",
    "ReleaseEvent",
    "StreamEntry",
    "StreamRequest",
]
