"""请求级别上下文注入的单元测试."""

from __future__ import annotations

import re

import pytest

from select_toggle import create_app
from select_toggle.settings import Settings
from select_toggle.utils.logging.context_vars import request_id_var


@pytest.mark.unit
def test_request_id_is_propagated_and_reset(registry) -> None:
    app = create_app(settings=Settings.load(), registry=registry)

    @app.get("/_test/request-id")
    def _test_request_id():  # type: ignore[no-untyped-def]
        return {"request_id": request_id_var.get()}

    client = app.test_client()

    response = client.get("/_test/request-id", headers={"X-Request-ID": "req_test_123"})
    assert response.status_code == 200
    assert response.get_json() == {"request_id": "req_test_123"}
    assert response.headers.get("X-Request-ID") == "req_test_123"

    # teardown_request 应 reset contextvars
    assert request_id_var.get() is None


@pytest.mark.unit
@pytest.mark.parametrize("header", [None, "bad id with spaces", "x" * 200])
def test_request_id_is_generated_when_header_missing_or_invalid(registry, header) -> None:
    app = create_app(settings=Settings.load(), registry=registry)
    client = app.test_client()

    headers = {"X-Request-ID": header} if header is not None else {}
    response = client.get("/nova-vendor/select-toggle/assets", headers=headers)

    assert re.fullmatch(r"req_[0-9a-f]{32}", response.headers["X-Request-ID"])


@pytest.mark.unit
def test_unknown_route_returns_error_envelope(registry) -> None:
    app = create_app(settings=Settings.load(), registry=registry)

    response = app.test_client().get("/does-not-exist")

    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["context"]["request_id"].startswith("req_")
