from __future__ import annotations

from .base import DomainError
from .tmdb import TmdbError, TmdbMappingError, TmdbNotFound, TmdbUnavailable

__all__ = [
    "DomainError",
    "TmdbError",
    "TmdbMappingError",
    "TmdbNotFound",
    "TmdbUnavailable",
]
