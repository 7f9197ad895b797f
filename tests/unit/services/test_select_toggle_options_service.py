"""切换选项服务单元测试."""

from unittest.mock import Mock

import pytest

from select_toggle.errors import (
    SelectToggleConfigurationError,
    SelectToggleFieldNotFoundError,
    UnknownResourceError,
)
from select_toggle.fields import SelectToggle
from select_toggle.resources import ResourceRegistry
from select_toggle.services.select_toggle.select_toggle_options_service import SelectToggleOptionsService


@pytest.mark.unit
def test_get_options_returns_normalized_options(registry) -> None:
    service = SelectToggleOptionsService(registry)

    options = service.get_options("users", "role", "type", "admin")

    assert options == [{"value": "full", "label": "Full Access"}]


@pytest.mark.unit
def test_get_options_without_target_value_skips_registry() -> None:
    registry = Mock(spec=ResourceRegistry)
    service = SelectToggleOptionsService(registry)

    assert service.get_options("users", "role", "type", None) == []
    registry.resource_instance_for_key.assert_not_called()


@pytest.mark.unit
def test_get_options_passes_request_to_resource_fields(registry, user_resource_class, monkeypatch) -> None:
    seen = []
    original = user_resource_class.fields

    def _fields(self, request=None):
        seen.append(request)
        return original(self, request)

    monkeypatch.setattr(user_resource_class, "fields", _fields)
    marker = object()

    SelectToggleOptionsService(registry).get_options("users", "role", "type", "admin", request=marker)

    assert seen == [marker]


@pytest.mark.unit
def test_get_options_passes_target_arguments_to_callback(registry, user_resource_class, monkeypatch) -> None:
    callback = Mock(return_value={"x": "X"})
    monkeypatch.setattr(
        user_resource_class,
        "fields",
        lambda self, request=None: [SelectToggle("role").target("type").options(callback)],
    )

    options = SelectToggleOptionsService(registry).get_options("users", "role", "type", "admin")

    assert options == [{"value": "x", "label": "X"}]
    callback.assert_called_once_with("admin", "type")


@pytest.mark.unit
def test_get_options_unknown_field_raises_not_found(registry) -> None:
    service = SelectToggleOptionsService(registry)

    with pytest.raises(SelectToggleFieldNotFoundError) as exc:
        service.get_options("users", "missing", "type", "admin")

    assert exc.value.status_code == 404
    assert exc.value.extra == {"resource_name": "users", "field_attribute": "missing"}


@pytest.mark.unit
def test_get_options_unknown_resource_raises(registry) -> None:
    with pytest.raises(UnknownResourceError) as exc:
        SelectToggleOptionsService(registry).get_options("ghosts", "role", "type", "admin")

    assert exc.value.resource_name == "ghosts"
    assert exc.value.status_code == 500


@pytest.mark.unit
def test_get_options_misconfigured_callback_raises(registry) -> None:
    with pytest.raises(SelectToggleConfigurationError):
        SelectToggleOptionsService(registry).get_options("users", "broken", "type", "admin")
