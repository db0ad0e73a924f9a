# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, datetime
from typing import Any

import pytest
from fastapi.testclient import TestClient

from availabilityio.config.settings import Settings, get_settings
from availabilityio.domain.entities.release_event import ReleaseEvent
from availabilityio.main import create_app

TMDB_BASE_URL = "https://api.themoviedb.org/3"
TMDB_WEB_URL = "https://www.themoviedb.org"
TEST_API_KEY = "test-tmdb-key"

_SETTINGS_ENV = (
    "ENVIRONMENT",
    "HOST",
    "PORT",
    "ALLOWED_ORIGINS",
    "TMDB_API_KEY",
    "TMDB_BASE_URL",
    "TMDB_WEB_URL",
    "TMDB_TIMEOUT_S",
    "TMDB_PREFERRED_REGION",
    "SERVICE_VERSION",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep host environment variables out of Settings and reset the singleton."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build Settings without reading any ``.env`` file.

    Keyword arguments use the environment variable names (e.g. ``TMDB_API_KEY``).
    """

    def _make(**overrides: Any) -> Settings:
        values: dict[str, Any] = {"ENVIRONMENT": "test", "TMDB_API_KEY": TEST_API_KEY}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings: Callable[..., Settings]) -> Settings:
    return make_settings()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


class FakeGateway:
    """In-memory metadata gateway recording calls."""

    def __init__(
        self,
        *,
        movie_id: int | None = 278,
        events: list[ReleaseEvent] | None = None,
        find_error: Exception | None = None,
        events_error: Exception | None = None,
    ) -> None:
        self.movie_id = movie_id
        self.events = events or []
        self.find_error = find_error
        self.events_error = events_error
        self.find_calls: list[str] = []
        self.events_calls: list[int] = []

    async def find_movie_id(self, imdb_id: str) -> int | None:
        self.find_calls.append(imdb_id)
        if self.find_error is not None:
            raise self.find_error
        return self.movie_id

    async def fetch_release_events(self, movie_id: int) -> list[ReleaseEvent]:
        self.events_calls.append(movie_id)
        if self.events_error is not None:
            raise self.events_error
        return list(self.events)


@pytest.fixture
def fake_gateway_cls() -> type[FakeGateway]:
    return FakeGateway


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """TestClient bound to an app built from test settings (lifespan running)."""
    with TestClient(create_app(settings)) as tc:
        yield tc
