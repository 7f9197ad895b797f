import pytest

from select_toggle import create_app
from select_toggle.settings import Settings


@pytest.mark.unit
def test_select_toggle_swagger_json_renders(client) -> None:
    response = client.get("/nova-vendor/select-toggle/swagger.json")
    assert response.status_code == 200
    payload = response.get_json()
    assert isinstance(payload, dict)
    assert payload.get("swagger") == "2.0"
    assert "/options" in payload.get("paths", {})


@pytest.mark.unit
def test_select_toggle_openapi_json_renders(client) -> None:
    response = client.get("/nova-vendor/select-toggle/openapi.json")
    assert response.status_code == 200
    payload = response.get_json()
    assert "/assets" in payload.get("paths", {})


@pytest.mark.unit
def test_select_toggle_docs_can_be_disabled(monkeypatch, registry) -> None:
    monkeypatch.setenv("SELECT_TOGGLE_DOCS_ENABLED", "false")

    app = create_app(settings=Settings.load(), registry=registry)
    client = app.test_client()

    assert client.get("/nova-vendor/select-toggle/docs").status_code == 404
    assert client.get("/nova-vendor/select-toggle/openapi.json").status_code == 200


@pytest.mark.unit
def test_select_toggle_route_prefix_is_configurable(monkeypatch, registry) -> None:
    monkeypatch.setenv("SELECT_TOGGLE_ROUTE_PREFIX", "/admin/select-toggle/")

    app = create_app(settings=Settings.load(), registry=registry)
    client = app.test_client()

    response = client.get(
        "/admin/select-toggle/options",
        query_string={"resourceName": "users", "fieldAttribute": "role", "targetValue": "admin"},
    )
    assert response.status_code == 200
    assert response.get_json() == {"options": [{"value": "full", "label": "Full Access"}]}
    assert client.get("/nova-vendor/select-toggle/options").status_code == 404
