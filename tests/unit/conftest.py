# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供环境隔离与演示资源相关的通用 fixtures。
"""

from __future__ import annotations

import pytest

from select_toggle.fields import Field, FieldComponent, SelectToggle
from select_toggle.resources import Resource, ResourceRegistry

PERMISSION_OPTIONS = {
    "staff": {"edit": "Editor", "view": "Viewer"},
    "guest": {},
}


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    目标:
    - 避免开发者本机环境变量影响测试稳定性
    - 默认路由前缀与文档开关保持一致
    """
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    monkeypatch.delenv("SELECT_TOGGLE_ROUTE_PREFIX", raising=False)
    monkeypatch.delenv("SELECT_TOGGLE_DOCS_ENABLED", raising=False)
    monkeypatch.delenv("ENABLE_DEBUG_LOG", raising=False)


class UserResource(Resource):
    uri_key = "users"

    def fields(self, request=None):
        return [
            Field("email", required=True),
            Field("type", component=FieldComponent.SELECT),
            SelectToggle("role").target("type").options(
                lambda value, attribute: {"full": "Full Access"} if value == "admin" else {"basic": "Basic Access"},
            ),
            SelectToggle("permission").target("type").options(
                lambda value, attribute: PERMISSION_OPTIONS.get(value, {}),
            ),
            SelectToggle("unconfigured").target("type"),
            SelectToggle("broken").target("type").options(lambda value, attribute: 42),
        ]


@pytest.fixture
def user_resource_class():
    return UserResource


@pytest.fixture
def registry():
    return ResourceRegistry([UserResource])
