"""基础的资源字段描述模型.

字段由资源在每次请求时按需构造,同时被服务层(选项解析)与前端组件(序列化后的元数据)共享.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Self


class FieldComponent(str, Enum):
    """表单控件类型,取值即前端组件名."""

    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    SWITCH = "switch"
    SELECT_TOGGLE = "select-toggle-field"


@dataclass
class Field:
    """单个字段的元数据.

    Attributes:
        attribute: 字段在资源内的唯一属性名.
        name: 展示名称,缺省时使用属性名.
        component: 前端控件类型.
        required: 是否必填.
        help_text: 帮助文案.
        meta: 额外的组件元数据,序列化时平铺到顶层.

    """

    attribute: str
    name: str | None = None
    component: FieldComponent = FieldComponent.TEXT
    required: bool = False
    help_text: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.attribute:
            raise ValueError("字段 attribute 不能为空")
        if self.name is None:
            self.name = self.attribute.replace("_", " ").title()

    def with_meta(self, **meta: Any) -> Self:
        """合并组件元数据并返回字段本身,便于链式配置."""
        self.meta.update(meta)
        return self

    def json_serialize(self) -> dict[str, Any]:
        """输出前端组件需要的字段描述."""
        payload: dict[str, Any] = {
            "component": self.component.value,
            "attribute": self.attribute,
            "name": self.name,
            "required": self.required,
        }
        if self.help_text:
            payload["helpText"] = self.help_text
        payload.update(self.meta)
        return payload
