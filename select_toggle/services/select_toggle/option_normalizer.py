"""选项回调返回值的规范化.

回调可以返回映射(value -> label)、已经规范化的选项列表,或者可转换为上述结构的对象
(例如提供 ``to_dict()`` / ``to_list()`` 的集合类型). 这里统一输出
``[{"value": ..., "label": ...}, ...]``,顺序与回调输出一致.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from select_toggle.errors import SelectToggleConfigurationError
from select_toggle.types import OptionPayload

_CONVERTER_METHODS: tuple[str, ...] = ("to_dict", "to_list")


def _convert(results: object) -> object:
    """调用结果自带的转换方法,优先 to_dict."""
    if isinstance(results, (Mapping, list, tuple)):
        return results
    for method_name in _CONVERTER_METHODS:
        converter = getattr(results, method_name, None)
        if callable(converter):
            return converter()
    return results


def _is_canonical(results: list[Any] | tuple[Any, ...]) -> bool:
    """首个元素同时带有非空 value 与 label 时视为已规范化."""
    if not results:
        return False
    first = results[0]
    if not isinstance(first, Mapping):
        return False
    return first.get("value") is not None and first.get("label") is not None


def normalize_options(
    results: object,
    *,
    attribute: str,
    target_attribute: str | None,
    target_value: object,
) -> list[OptionPayload]:
    """将回调返回值规范化为选项列表.

    Args:
        results: 选项回调的原始返回值.
        attribute: 切换字段的属性名,用于错误定位.
        target_attribute: 目标字段的属性名,用于错误定位.
        target_value: 目标字段的取值,用于错误定位.

    Returns:
        按回调输出顺序排列的选项列表. 已规范化的 list 原样返回.

    Raises:
        SelectToggleConfigurationError: 返回值既不是映射也不是有序序列时抛出.

    """
    converted = _convert(results)

    if isinstance(converted, Mapping):
        return [{"value": key, "label": label} for key, label in converted.items()]

    if not isinstance(converted, (list, tuple)):
        raise SelectToggleConfigurationError(attribute, target_attribute, target_value)

    if _is_canonical(converted):
        return cast("list[OptionPayload]", converted if isinstance(converted, list) else list(converted))

    # 普通序列按位置下标作为 value
    return [{"value": index, "label": label} for index, label in enumerate(converted)]


__all__ = ["normalize_options"]
