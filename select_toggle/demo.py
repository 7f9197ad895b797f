"""演示用资源注册表, 供 ``app.py`` 与 ``wsgi.py`` 共用.

``users`` 资源的账户类型 ``type`` 决定 ``role`` 的可选权限.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from select_toggle.fields import Field, FieldComponent, SelectToggle
from select_toggle.resources import Resource, ResourceRegistry

if TYPE_CHECKING:
    from flask import Request


def role_options(target_value: object, _target_attribute: str | None) -> dict[str, str]:
    if target_value == "admin":
        return {"full": "Full Access"}
    return {"basic": "Basic Access"}


class UserResource(Resource):
    """演示资源."""

    uri_key = "users"

    def fields(self, request: Request | None = None) -> list[Field]:
        return [
            Field("email", required=True),
            Field("type", component=FieldComponent.SELECT, required=True),
            SelectToggle("role").target("type").options(role_options),
        ]


def build_registry() -> ResourceRegistry:
    """构造演示用资源注册表."""
    return ResourceRegistry([UserResource])


__all__ = ["UserResource", "build_registry", "role_options"]
