from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from availabilityio.adapters.gateways.tmdb_gateway import TmdbGateway
from availabilityio.domain.entities.release_event import ReleaseEvent
from availabilityio.domain.exceptions.tmdb import TmdbMappingError


class _StubClient:
    def __init__(
        self,
        find: Mapping[str, Any] | None = None,
        release_dates: Mapping[str, Any] | None = None,
    ) -> None:
        self.find = find or {}
        self.release_dates = release_dates or {}
        self.calls: list[tuple[str, Any]] = []

    async def find_by_imdb_id(self, imdb_id: str) -> Mapping[str, Any]:
        self.calls.append(("find", imdb_id))
        return self.find

    async def movie_release_dates(self, movie_id: int) -> Mapping[str, Any]:
        self.calls.append(("release_dates", movie_id))
        return self.release_dates


def _gateway(**kwargs: Any) -> tuple[TmdbGateway, _StubClient]:
    stub = _StubClient(**kwargs)
    return TmdbGateway(stub), stub  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_find_movie_id_uses_first_movie_result() -> None:
    gw, stub = _gateway(find={"movie_results": [{"id": 278}, {"id": 999}], "tv_results": []})
    assert await gw.find_movie_id("tt0111161") == 278
    assert stub.calls == [("find", "tt0111161")]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"movie_results": []},
        {"movie_results": None},
        {"movie_results": {"id": 1}},
        {"movie_results": ["278"]},
        {"movie_results": [{"title": "no id"}]},
        {"movie_results": [{"id": "278"}]},
        {"movie_results": [{"id": 0}]},
        {"movie_results": [{"id": -5}]},
        {"movie_results": [{"id": True}]},
    ],
)
async def test_find_movie_id_treats_unusable_results_as_no_match(payload: dict[str, Any]) -> None:
    gw, _ = _gateway(find=payload)
    assert await gw.find_movie_id("tt1") is None


@pytest.mark.asyncio
async def test_fetch_release_events_flattens_regions() -> None:
    gw, stub = _gateway(
        release_dates={
            "id": 278,
            "results": [
                {
                    "iso_3166_1": "US",
                    "release_dates": [
                        {"type": 3, "release_date": "1994-09-23T00:00:00.000Z"},
                        {"type": 4, "release_date": "1995-03-01T00:00:00.000Z"},
                    ],
                },
                {"iso_3166_1": "gb", "release_dates": [{"type": 4, "release_date": ""}]},
            ],
        }
    )

    events = await gw.fetch_release_events(278)

    assert stub.calls == [("release_dates", 278)]
    assert events == [
        ReleaseEvent(region="US", release_date="1994-09-23T00:00:00.000Z", release_type=3),
        ReleaseEvent(region="US", release_date="1995-03-01T00:00:00.000Z", release_type=4),
        ReleaseEvent(region="GB", release_date=None, release_type=4),
    ]


@pytest.mark.asyncio
async def test_fetch_release_events_tolerates_missing_optional_fields() -> None:
    gw, _ = _gateway(
        release_dates={
            "results": [
                {"release_dates": [{"release_date": "2020-01-01"}]},
                {"iso_3166_1": "FR"},
                {"iso_3166_1": 7, "release_dates": [{"type": "4", "release_date": 20200101}]},
            ]
        }
    )

    events = await gw.fetch_release_events(1)

    assert events == [
        ReleaseEvent(region="", release_date="2020-01-01", release_type=0),
        ReleaseEvent(region="", release_date=None, release_type=0),
    ]
    assert not any(e.is_digital for e in events)


@pytest.mark.asyncio
async def test_fetch_release_events_without_results_is_empty() -> None:
    gw, _ = _gateway(release_dates={"id": 1})
    assert await gw.fetch_release_events(1) == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"results": "nope"},
        {"results": [1, 2]},
        {"results": [{"iso_3166_1": "US", "release_dates": {"type": 4}}]},
        {"results": [{"iso_3166_1": "US", "release_dates": ["2020-01-01"]}]},
    ],
)
async def test_fetch_release_events_rejects_malformed_shapes(payload: dict[str, Any]) -> None:
    gw, _ = _gateway(release_dates=payload)
    with pytest.raises(TmdbMappingError):
        await gw.fetch_release_events(1)
