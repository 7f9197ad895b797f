"""字段定义包."""

from select_toggle.fields.base import Field, FieldComponent
from select_toggle.fields.select_toggle import SelectToggle

__all__ = [
    "Field",
    "FieldComponent",
    "SelectToggle",
]
