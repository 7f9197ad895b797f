"""Select Toggle - 统一响应工具.

提供统一的错误响应结构,避免在路由层散落 JSON 拼装逻辑.
成功响应保持前端组件约定的 `{"options": [...]}` 形状,不包裹封套.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from flask import Response, jsonify

from select_toggle.constants import HttpStatus
from select_toggle.errors import map_exception_to_status
from select_toggle.utils.structlog_config import ErrorContext, enhanced_error_handler

if TYPE_CHECKING:
    from collections.abc import Mapping

    from select_toggle.types import JsonDict, JsonValue


def unified_error_response(
    error: BaseException | Exception,
    *,
    status_code: int | None = None,
    extra: Mapping[str, JsonValue] | None = None,
    context: ErrorContext | None = None,
) -> tuple[JsonDict, int]:
    """生成统一的错误响应载荷.

    Args:
        error: 异常对象.
        status_code: HTTP 状态码,可选,默认根据异常类型自动映射.
        extra: 额外的错误信息,可选.
        context: 错误上下文,可选.

    Returns:
        包含两个元素的元组:
        - 错误响应载荷字典
        - HTTP 状态码

    """
    safe_error = error if isinstance(error, Exception) else Exception(str(error))
    context = context or ErrorContext(safe_error)
    payload = cast("JsonDict", enhanced_error_handler(safe_error, context, extra=extra))
    final_status = status_code or map_exception_to_status(safe_error, default=HttpStatus.INTERNAL_SERVER_ERROR)
    payload.setdefault("success", False)
    return payload, final_status


def jsonify_unified_error(
    error: BaseException | Exception,
    *,
    context: ErrorContext | None = None,
) -> Response:
    """返回带状态码的 Flask 错误 Response."""
    payload, status = unified_error_response(error, context=context)
    response = jsonify(payload)
    response.status_code = status
    return response


def jsonify_payload(payload: Mapping[str, object], *, status: int = HttpStatus.OK) -> Response:
    """按原样序列化约定形状的成功载荷."""
    response = jsonify(dict(payload))
    response.status_code = status
    return response
