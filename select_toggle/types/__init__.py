"""共享类型定义."""

from select_toggle.types.options import OptionPayload, OptionsCallback
from select_toggle.types.structures import (
    ContextDict,
    ContextValue,
    JsonDict,
    JsonValue,
    LoggerExtra,
    RouteSafetyOptions,
    ScalarValue,
    StructlogEventDict,
)

__all__ = [
    "ContextDict",
    "ContextValue",
    "JsonDict",
    "JsonValue",
    "LoggerExtra",
    "OptionPayload",
    "OptionsCallback",
    "RouteSafetyOptions",
    "ScalarValue",
    "StructlogEventDict",
]
