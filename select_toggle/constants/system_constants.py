"""Select Toggle - 常量定义模块

统一管理错误分类、严重度与对外文案.
"""

from enum import Enum


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    BUSINESS = "business"
    CONFIGURATION = "configuration"
    SYSTEM = "system"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorMessages:
    """错误消息常量."""

    # 通用错误
    INTERNAL_ERROR = "服务器内部错误"
    VALIDATION_ERROR = "数据验证失败"
    RESOURCE_NOT_FOUND = "资源不存在"
    INVALID_REQUEST = "无效的请求"

    # Select Toggle
    UNKNOWN_RESOURCE = "未注册的资源: {resource}"
    SELECT_TOGGLE_FIELD_NOT_FOUND = "资源 [{resource}] 中不存在可切换字段 [{attribute}]"
    SELECT_TOGGLE_MISCONFIGURED = "Select Toggle [{attribute}] 针对目标 [{target_attribute}] 取值 [{target_value}] 生成选项失败"
    SELECT_TOGGLE_OPTIONS_FAILED = "获取切换选项失败"


__all__ = [
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
]
