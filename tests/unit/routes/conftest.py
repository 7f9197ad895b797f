# tests/unit/routes/conftest.py
"""路由契约测试专用 fixtures.

提供挂载了演示资源的 app 与 test_client。
"""

import pytest

from select_toggle import create_app
from select_toggle.settings import Settings


@pytest.fixture(scope="function")
def app(monkeypatch, registry):
    """创建测试应用实例."""
    monkeypatch.setenv("FLASK_ENV", "testing")

    settings = Settings.load()
    app = create_app(settings=settings, registry=registry)
    app.config["TESTING"] = True
    return app


@pytest.fixture(scope="function")
def client(app):
    """创建测试客户端."""
    return app.test_client()
