"""WSGI 入口环境默认值测试."""

import importlib
import sys
from logging.handlers import RotatingFileHandler

import pytest


@pytest.fixture
def wsgi_module(monkeypatch, tmp_path):
    monkeypatch.delenv("FLASK_ENV", raising=False)
    monkeypatch.setenv("FLASK_APP", "wsgi")
    monkeypatch.delenv("FLASK_DEBUG", raising=False)
    monkeypatch.setenv("SECRET_KEY", "prod-secret-key")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "select_toggle.log"))
    sys.modules.pop("wsgi", None)

    module = importlib.import_module("wsgi")
    yield module

    for handler in [h for h in module.application.logger.handlers if isinstance(h, RotatingFileHandler)]:
        module.application.logger.removeHandler(handler)
        handler.close()
    sys.modules.pop("wsgi", None)


@pytest.mark.unit
def test_wsgi_defaults_to_production(wsgi_module) -> None:
    config = wsgi_module.application.config

    assert config["ENV"] == "production"
    assert config["DEBUG"] is False
    assert config["SELECT_TOGGLE_DOCS_ENABLED"] is False


@pytest.mark.unit
def test_wsgi_serves_demo_role_options(wsgi_module) -> None:
    client = wsgi_module.application.test_client()

    response = client.get(
        "/nova-vendor/select-toggle/options",
        query_string={"resourceName": "users", "fieldAttribute": "role", "targetAttribute": "type", "targetValue": "staff"},
    )

    assert response.status_code == 200
    assert response.get_json() == {"options": [{"value": "basic", "label": "Basic Access"}]}
