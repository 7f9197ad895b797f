"""常量模块。

集中管理插件使用的系统常量，包括错误消息、HTTP 相关常量等。

主要常量：
- ErrorMessages: 错误消息常量
- HttpStatus: HTTP 状态码常量
- HttpHeaders: HTTP 头常量
"""

# 导入HTTP状态码常量（使用Python标准库）
from http import HTTPStatus as HttpStatus

# 导入HTTP头常量
from .http_headers import HttpHeaders

# 导入所有系统常量
from .system_constants import (
    ErrorCategory,
    ErrorMessages,
    ErrorSeverity,
)

__all__ = [
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    # HTTP头
    "HttpHeaders",
    # HTTP状态码
    "HttpStatus",
]
