from __future__ import annotations

from collections.abc import Callable

import httpx
import respx
from fastapi.testclient import TestClient

from availabilityio.application.use_cases.streams.get_availability_streams import (
    GetAvailabilityStreams,
)
from availabilityio.config.settings import Settings
from availabilityio.dependencies.streams import get_streams_use_case
from availabilityio.domain.entities.release_event import ReleaseEvent
from availabilityio.main import create_app

TMDB_BASE_URL = "https://api.themoviedb.org/3"
TMDB_WEB_URL = "https://www.themoviedb.org"
TEST_API_KEY = "test-tmdb-key"


def _release_dates(*entries: tuple[str, int, str]) -> dict:
    by_region: dict[str, list[dict]] = {}
    for region, kind, date in entries:
        by_region.setdefault(region, []).append({"type": kind, "release_date": date})
    return {
        "id": 278,
        "results": [{"iso_3166_1": r, "release_dates": d} for r, d in by_region.items()],
    }


def test_manifest(client: TestClient) -> None:
    r = client.get("/manifest.json")

    assert r.status_code == 200
    body = r.json()
    assert body["id"] == "com.availabilityio.tmdb-digital-release"
    assert body["resources"] == ["stream"]
    assert body["types"] == ["movie"]
    assert body["idPrefixes"] == ["tt"]
    assert body["catalogs"] == []
    assert body["version"]


def test_released_movie_end_to_end(client: TestClient) -> None:
    with respx.mock(base_url=TMDB_BASE_URL, assert_all_called=False) as tmdb:
        find = tmdb.get("/find/tt0111161").mock(
            return_value=httpx.Response(200, json={"movie_results": [{"id": 278}]})
        )
        dates = tmdb.get("/movie/278/release_dates").mock(
            return_value=httpx.Response(
                200,
                json=_release_dates(
                    ("US", 3, "1994-09-23T00:00:00.000Z"),
                    ("US", 4, "2000-01-01T00:00:00.000Z"),
                    ("GB", 4, "1999-01-01T00:00:00.000Z"),
                ),
            )
        )

        r = client.get("/stream/movie/tt0111161.json", headers={"X-Request-ID": "rid-1"})

    assert r.status_code == 200
    assert r.json() == {
        "streams": [
            {
                "name": "Digital release",
                "title": "Released 2000-01-01",
                "externalUrl": f"{TMDB_WEB_URL}/movie/278",
            }
        ]
    }
    assert find.calls.last.request.url.params["api_key"] == TEST_API_KEY
    assert find.calls.last.request.url.params["external_source"] == "imdb_id"
    assert find.calls.last.request.headers["X-Request-ID"] == "rid-1"
    assert dates.called
    assert r.headers["X-Request-ID"] == "rid-1"


def test_upcoming_movie_end_to_end(client: TestClient) -> None:
    with respx.mock(base_url=TMDB_BASE_URL, assert_all_called=False) as tmdb:
        tmdb.get("/find/tt9999999").mock(
            return_value=httpx.Response(200, json={"movie_results": [{"id": 278}]})
        )
        tmdb.get("/movie/278/release_dates").mock(
            return_value=httpx.Response(200, json=_release_dates(("FR", 4, "2999-01-01")))
        )

        r = client.get("/stream/movie/tt9999999:1:2.json")

    stream = r.json()["streams"][0]
    assert stream["name"] == "⏳ Not Available Yet"
    assert stream["title"] == "Digital release: 2999-01-01 — Check back after that date!"


def test_upstream_failure_becomes_error_entry(client: TestClient) -> None:
    with respx.mock(base_url=TMDB_BASE_URL, assert_all_called=False) as tmdb:
        tmdb.get("/find/tt0111161").mock(
            return_value=httpx.Response(200, json={"movie_results": [{"id": 278}]})
        )
        tmdb.get("/movie/278/release_dates").mock(return_value=httpx.Response(503))

        r = client.get("/stream/movie/tt0111161.json")

    assert r.status_code == 200
    assert r.json()["streams"] == [
        {"name": "TMDB error", "title": "Failed to fetch release data", "externalUrl": TMDB_WEB_URL}
    ]


def test_unsupported_requests_return_empty_streams(client: TestClient) -> None:
    with respx.mock(base_url=TMDB_BASE_URL, assert_all_called=False) as tmdb:
        r1 = client.get("/stream/series/tt0944947:1:1.json")
        r2 = client.get("/stream/movie/kitsu:1.json")
        assert not tmdb.calls

    assert r1.json() == {"streams": []}
    assert r2.json() == {"streams": []}


def test_missing_key_reports_configuration_error(make_settings: Callable[..., Settings]) -> None:
    app = create_app(make_settings(TMDB_API_KEY=""))
    with TestClient(app) as tc:
        r = tc.get("/stream/series/tt1.json")
        health = tc.get("/healthz")

    assert r.json()["streams"] == [
        {
            "name": "Configuration error",
            "title": "TMDB_API_KEY is not set",
            "externalUrl": TMDB_WEB_URL,
        }
    ]
    assert health.json()["tmdb_configured"] is False


def test_use_case_dependency_can_be_overridden(
    settings: Settings, fake_gateway_cls: type
) -> None:
    app = create_app(settings)
    gateway = fake_gateway_cls(
        events=[ReleaseEvent(region="US", release_date="2001-02-03", release_type=4)]
    )
    app.dependency_overrides[get_streams_use_case] = lambda: GetAvailabilityStreams(
        gateway=gateway, settings=settings
    )

    r = TestClient(app).get("/stream/movie/tt0111161.json")

    assert r.json()["streams"][0]["title"] == "Released 2001-02-03"
    assert gateway.find_calls == ["tt0111161"]


def test_healthz_and_metrics(client: TestClient) -> None:
    health = client.get("/healthz")
    assert health.status_code == 200
    assert health.json()["status"] == "ok"
    assert health.json()["tmdb_configured"] is True
    assert TEST_API_KEY not in health.text

    client.get("/stream/series/tt1.json")
    metrics = client.get("/metrics")
    assert metrics.status_code == 200
    assert "stream_lookup_outcomes_total" in metrics.text


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    r = client.get("/nope", headers={"X-Request-ID": "rid-404"})

    assert r.status_code == 404
    err = r.json()["error"]
    assert err["code"] == "NOT_FOUND"
    assert err["http_status"] == 404
    assert err["trace_id"] == "rid-404"


def test_cors_preflight_allows_any_origin(client: TestClient) -> None:
    r = client.options(
        "/manifest.json",
        headers={"Origin": "https://app.strem.io", "Access-Control-Request-Method": "GET"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"
