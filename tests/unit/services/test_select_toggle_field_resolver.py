"""切换字段定位单元测试."""

import pytest

from select_toggle.fields import Field, SelectToggle
from select_toggle.services.select_toggle.field_resolver import resolve_field


@pytest.mark.unit
def test_resolve_field_returns_first_matching_field() -> None:
    first = SelectToggle("role")
    second = SelectToggle("role")

    assert resolve_field([Field("email"), first, second], "role") is first


@pytest.mark.unit
def test_resolve_field_is_case_sensitive() -> None:
    assert resolve_field([SelectToggle("role")], "Role") is None


@pytest.mark.unit
def test_resolve_field_returns_none_when_nothing_matches() -> None:
    assert resolve_field([], "role") is None
    assert resolve_field([Field("email")], "role") is None


@pytest.mark.unit
def test_resolve_field_ignores_fields_that_cannot_compute_options() -> None:
    assert resolve_field([Field("role")], "role") is None


@pytest.mark.unit
def test_resolve_field_accepts_any_iterable() -> None:
    field = SelectToggle("role")

    assert resolve_field(iter([field]), "role") is field
