"""Select Toggle 选项相关类型."""

from __future__ import annotations

from typing import Any, Protocol, TypedDict


class OptionPayload(TypedDict):
    """下拉选项的规范形状."""

    value: Any
    label: Any


class OptionsCallback(Protocol):
    """选项回调协议.

    回调接收目标字段的当前取值与目标字段名,返回映射(value -> label)
    或已经规范化的选项列表.
    """

    def __call__(self, target_value: Any, target_attribute: str | None, /) -> object:
        """根据目标取值生成选项."""
        ...
