"""Select Toggle 字段.

选项不随字段静态声明,而是由目标字段的当前取值经回调动态计算.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from select_toggle.fields.base import Field, FieldComponent
from select_toggle.services.select_toggle.option_normalizer import normalize_options
from select_toggle.types import OptionPayload, OptionsCallback

TARGET_ATTRIBUTE_META_KEY = "targetAttribute"


@dataclass
class SelectToggle(Field):
    """选项依赖同表单另一字段取值的下拉字段.

    Example:
        >>> SelectToggle("role").target("type").options(
        ...     lambda value, attribute: {"full": "Full Access"} if value == "admin" else {"basic": "Basic Access"},
        ... )

    """

    component: FieldComponent = FieldComponent.SELECT_TOGGLE
    options_callback: OptionsCallback | None = None

    def options(self, callback: OptionsCallback) -> Self:
        """注册选项回调,回调签名为 ``callback(target_value, target_attribute)``.

        Raises:
            TypeError: 传入的对象不可调用时抛出.

        """
        if not callable(callback):
            msg = f"Select Toggle [{self.attribute}] 的选项回调必须可调用, 实际为 {type(callback).__name__}"
            raise TypeError(msg)
        self.options_callback = callback
        return self

    def target(self, attribute: str) -> Self:
        """声明驱动本字段选项的目标字段."""
        return self.with_meta(**{TARGET_ATTRIBUTE_META_KEY: attribute})

    @property
    def target_attribute(self) -> str | None:
        return self.meta.get(TARGET_ATTRIBUTE_META_KEY)

    def call_options(self, target_attribute: str | None, target_value: Any) -> list[OptionPayload]:
        """使用目标字段名与取值调用选项回调并规范化结果.

        未配置回调或回调不可调用时返回空列表.

        Raises:
            SelectToggleConfigurationError: 回调返回值无法规范化为选项列表时抛出.

        """
        callback = self.options_callback
        if callback is None or not callable(callback):
            return []

        results = callback(target_value, target_attribute)
        return normalize_options(
            results,
            attribute=self.attribute,
            target_attribute=target_attribute,
            target_value=target_value,
        )
