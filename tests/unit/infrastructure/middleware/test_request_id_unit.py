# Copyright (c) Availabilityio.
# SPDX-License-Identifier: MIT
"""Unit tests for RequestIdMiddleware behavior and header rules."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from availabilityio.infrastructure.logging.logger import get_request_id
from availabilityio.infrastructure.middleware.request_id import (
    _REQUEST_ID_HEADER,
    _SAFE_RE,
    RequestIdMiddleware,
)


def _app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestIdMiddleware)

    @app.get("/id")
    def get_id(request: Request):
        return {"rid": getattr(request.state, "request_id", None), "ctx": get_request_id()}

    return app


def test_middleware_generates_id_and_sets_state_context_and_header() -> None:
    client = TestClient(_app())
    r = client.get("/id")

    assert r.status_code == 200
    rid = r.json()["rid"]
    assert r.headers.get(_REQUEST_ID_HEADER) == rid
    assert r.json()["ctx"] == rid
    assert _SAFE_RE.match(rid)


def test_middleware_uses_valid_incoming_and_rejects_invalid() -> None:
    client = TestClient(_app())

    valid = "abc-123_456:@Z"
    r1 = client.get("/id", headers={_REQUEST_ID_HEADER: valid})
    assert r1.json()["rid"] == valid
    assert r1.headers.get(_REQUEST_ID_HEADER) == valid

    invalid = "bad id with space"
    r2 = client.get("/id", headers={_REQUEST_ID_HEADER: invalid})
    gen = r2.headers.get(_REQUEST_ID_HEADER)
    assert gen and gen != invalid
    assert _SAFE_RE.match(gen)
