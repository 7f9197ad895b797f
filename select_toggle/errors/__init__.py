"""Select Toggle - 统一异常定义.

集中维护插件异常类型、严重度与 HTTP 状态码映射.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from werkzeug.exceptions import HTTPException

from select_toggle.constants import HttpStatus
from select_toggle.constants.system_constants import ErrorCategory, ErrorMessages, ErrorSeverity

if TYPE_CHECKING:
    from select_toggle.types.structures import LoggerExtra


@dataclass(frozen=True, slots=True)
class ExceptionMetadata:
    """异常的元信息."""

    status_code: int
    category: ErrorCategory
    severity: ErrorSeverity
    default_message_key: str


class AppError(Exception):
    """统一的基础业务异常.

    Args:
        message: 自定义错误文案,若为空则根据 ``message_key`` 推导.
        message_key: 错误码,同时用于查找默认文案.
        extra: 非敏感的诊断字段,会写入错误封套的 ``extra``.
        severity: 覆盖类级别的严重度.
        category: 覆盖类级别的错误分类.
        status_code: 覆盖类级别的 HTTP 状态码.

    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.HIGH,
        default_message_key="INTERNAL_ERROR",
    )

    def __init__(
        self,
        message: str | None = None,
        *,
        message_key: str | None = None,
        extra: LoggerExtra | None = None,
        severity: ErrorSeverity | None = None,
        category: ErrorCategory | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message_key = message_key or self.metadata.default_message_key
        self.message = message or getattr(ErrorMessages, self.message_key, ErrorMessages.INTERNAL_ERROR)
        self.extra = dict(extra or {})
        self._severity = severity or self.metadata.severity
        self._category = category or self.metadata.category
        self._status_code = status_code or self.metadata.status_code
        super().__init__(self.message)

    @property
    def severity(self) -> ErrorSeverity:
        """返回异常实例对应的严重度."""
        return self._severity

    @property
    def category(self) -> ErrorCategory:
        """返回异常所属的业务分类."""
        return self._category

    @property
    def status_code(self) -> int:
        """返回异常对应的 HTTP 状态码."""
        return self._status_code

    @property
    def recoverable(self) -> bool:
        """严重度为 LOW 或 MEDIUM 时视为可恢复."""
        return self.severity in (ErrorSeverity.LOW, ErrorSeverity.MEDIUM)


class ValidationError(AppError):
    """表示输入参数验证失败,默认返回 400."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.BAD_REQUEST,
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.LOW,
        default_message_key="VALIDATION_ERROR",
    )


class NotFoundError(AppError):
    """表示客户端请求的资源不存在,默认返回 404."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.NOT_FOUND,
        category=ErrorCategory.BUSINESS,
        severity=ErrorSeverity.LOW,
        default_message_key="RESOURCE_NOT_FOUND",
    )


class SystemError(AppError):
    """表示系统级未知错误或底层故障,默认返回 500."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.HIGH,
        default_message_key="INTERNAL_ERROR",
    )


class UnknownResourceError(AppError):
    """资源注册表中找不到请求的资源名.

    资源名来自前端组件自身的上下文,查不到意味着宿主装配有误,按服务端错误返回 500.
    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.HIGH,
        default_message_key="UNKNOWN_RESOURCE",
    )

    def __init__(self, resource_name: str) -> None:
        self.resource_name = resource_name
        super().__init__(
            ErrorMessages.UNKNOWN_RESOURCE.format(resource=resource_name),
            extra={"resource_name": resource_name},
        )


class SelectToggleFieldNotFoundError(NotFoundError):
    """资源字段中找不到可以计算选项的切换字段,返回 404."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.NOT_FOUND,
        category=ErrorCategory.BUSINESS,
        severity=ErrorSeverity.LOW,
        default_message_key="SELECT_TOGGLE_FIELD_NOT_FOUND",
    )

    def __init__(self, resource_name: str, field_attribute: str) -> None:
        self.resource_name = resource_name
        self.field_attribute = field_attribute
        super().__init__(
            ErrorMessages.SELECT_TOGGLE_FIELD_NOT_FOUND.format(resource=resource_name, attribute=field_attribute),
            extra={"resource_name": resource_name, "field_attribute": field_attribute},
        )


class SelectToggleConfigurationError(AppError):
    """选项回调返回了无法规范化的结果.

    只能由资源作者修正回调,运行期不做恢复.
    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.CONFIGURATION,
        severity=ErrorSeverity.HIGH,
        default_message_key="SELECT_TOGGLE_MISCONFIGURED",
    )

    def __init__(self, attribute: str, target_attribute: str | None, target_value: object) -> None:
        self.attribute = attribute
        self.target_attribute = target_attribute
        self.target_value = target_value
        super().__init__(
            ErrorMessages.SELECT_TOGGLE_MISCONFIGURED.format(
                attribute=attribute,
                target_attribute=target_attribute,
                target_value=target_value,
            ),
            extra={
                "field_attribute": attribute,
                "target_attribute": target_attribute,
                "target_value": str(target_value),
            },
        )


def map_exception_to_status(error: Exception, default: int = HttpStatus.INTERNAL_SERVER_ERROR) -> int:
    """根据异常类型推导 HTTP 状态码.

    Args:
        error: 捕获到的异常对象.
        default: 无法匹配时的默认状态码.

    Returns:
        int: 与异常对应的 HTTP 状态码.

    """
    if isinstance(error, AppError):
        return error.status_code

    if isinstance(error, HTTPException):
        code = getattr(error, "code", None)
        if code is not None:
            return int(code)

    return default


__all__ = [
    "AppError",
    "ExceptionMetadata",
    "NotFoundError",
    "SelectToggleConfigurationError",
    "SelectToggleFieldNotFoundError",
    "SystemError",
    "UnknownResourceError",
    "ValidationError",
    "map_exception_to_status",
]
