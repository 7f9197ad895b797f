# tests/unit/routes/test_select_toggle_assets_contract.py
"""Select Toggle assets contract tests."""

import pytest
from flask import render_template_string


@pytest.mark.unit
def test_select_toggle_assets_lists_script_and_style(client) -> None:
    response = client.get("/nova-vendor/select-toggle/assets")

    assert response.status_code == 200
    assert response.get_json() == {
        "assets": [
            {
                "name": "select-toggle-field",
                "kind": "script",
                "url": "/nova-vendor/select-toggle/static/js/field.js",
            },
            {
                "name": "select-toggle-field",
                "kind": "style",
                "url": "/nova-vendor/select-toggle/static/css/field.css",
            },
        ],
    }


@pytest.mark.unit
@pytest.mark.parametrize("path", ["js/field.js", "css/field.css"])
def test_select_toggle_static_files_are_served(client, path) -> None:
    response = client.get(f"/nova-vendor/select-toggle/static/{path}")

    assert response.status_code == 200
    assert response.data
    response.close()


@pytest.mark.unit
def test_select_toggle_assets_are_injected_into_templates(app) -> None:
    with app.test_request_context("/"):
        rendered = render_template_string("{% for asset in select_toggle_assets %}{{ asset.url }};{% endfor %}")

    assert rendered == "/nova-vendor/select-toggle/static/js/field.js;/nova-vendor/select-toggle/static/css/field.css;"
