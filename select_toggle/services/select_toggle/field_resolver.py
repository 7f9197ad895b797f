"""在资源字段列表中定位切换字段."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from select_toggle.fields import Field, SelectToggle


def resolve_field(fields: Iterable[Field], attribute: str) -> SelectToggle | None:
    """返回声明顺序中第一个 attribute 完全匹配的字段.

    匹配到的字段不支持 ``call_options`` 时同样返回 None; 本函数从不抛出异常,
    由调用方决定"找不到"是否为错误.

    Args:
        fields: 资源在当前请求下的字段列表.
        attribute: 切换字段的属性名(区分大小写).

    Returns:
        匹配的切换字段,找不到时为 None.

    """
    match = next((field for field in fields if getattr(field, "attribute", None) == attribute), None)
    if match is None or not callable(getattr(match, "call_options", None)):
        return None
    return match  # type: ignore[return-value]


__all__ = ["resolve_field"]
