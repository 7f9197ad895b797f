"""Select Toggle 的结构化日志配置与辅助函数.

所有模块统一通过 ``get_logger`` / ``log_*`` 输出事件, 事件会自动带上
request_id、应用名与版本, 便于把一次选项请求的日志串起来.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, cast

import structlog
from flask import Flask, current_app, has_request_context

from select_toggle.constants.system_constants import ErrorSeverity
from select_toggle.errors import AppError
from select_toggle.settings import APP_VERSION
from select_toggle.types import ContextDict, JsonValue, LoggerExtra, StructlogEventDict
from select_toggle.utils.logging.context_vars import request_id_var
from select_toggle.utils.logging.error_adapter import (
    ErrorContext,
    ErrorMetadata,
    build_public_context,
    derive_error_metadata,
    get_error_suggestions,
)
from select_toggle.utils.logging.handlers import DebugFilter

if TYPE_CHECKING:
    from structlog.typing import BindableLogger, Processor

LogField = JsonValue | ContextDict | LoggerExtra
ErrorPayload = dict[str, LogField]

DEFAULT_APP_NAME = "Select Toggle"

_SEVERITY_LEVELS: dict[ErrorSeverity, str] = {
    ErrorSeverity.CRITICAL: "critical",
    ErrorSeverity.HIGH: "error",
}


class StructlogConfig:
    """structlog 处理器链的持有者.

    ``configure`` 只在首次调用时安装处理器链, 之后的调用只同步调试日志开关,
    因此多个 app 实例(例如测试)可以共用同一份配置.

    Attributes:
        debug_filter: 调试日志过滤器.
        configured: 处理器链是否已安装.

    """

    def __init__(self) -> None:
        self.debug_filter = DebugFilter(enabled=False)
        self.configured = False

    def configure(self, app: Flask | None = None) -> None:
        """安装处理器链(幂等), 并按 ``ENABLE_DEBUG_LOG`` 同步调试开关."""
        if not self.configured:
            structlog.configure(
                processors=cast("list[structlog.types.Processor]", self._build_processors()),
                context_class=dict,
                logger_factory=structlog.stdlib.LoggerFactory(),
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True,
            )
            self.configured = True

        if app is not None:
            self.debug_filter.set_enabled(enabled=bool(app.config.get("ENABLE_DEBUG_LOG", False)))

    def _build_processors(self) -> list[object]:
        return [
            self.debug_filter,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            self._inject_request_id,
            self._inject_app_identity,
            self._console_renderer(),
        ]

    @staticmethod
    def _inject_request_id(
        _logger: BindableLogger,
        _method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        if has_request_context():
            event_dict["request_id"] = request_id_var.get()
        return event_dict

    @staticmethod
    def _inject_app_identity(
        logger: BindableLogger,
        _method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        # 脱离应用上下文(如 CLI、单元测试)时回落到包内默认值
        try:
            config = current_app.config
            event_dict["app_name"] = config.get("APP_NAME", DEFAULT_APP_NAME)
            event_dict["app_version"] = config.get("APP_VERSION", APP_VERSION)
        except RuntimeError:
            event_dict["app_name"] = DEFAULT_APP_NAME
            event_dict["app_version"] = APP_VERSION

        event_dict["logger_name"] = getattr(logger, "name", "unknown")
        return event_dict

    @staticmethod
    def _console_renderer() -> Processor:
        if not sys.stdout.isatty():
            return structlog.dev.ConsoleRenderer(colors=False)
        return structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=10),
        )


structlog_config = StructlogConfig()


def get_logger(name: str) -> structlog.BoundLogger:
    """获取结构化日志记录器.

    Example:
        >>> get_logger("select_toggle").info("选项解析完成", option_count=2)

    """
    structlog_config.configure()
    return structlog.get_logger(name)


def get_system_logger() -> structlog.BoundLogger:
    return get_logger("system")


def configure_structlog(app: Flask) -> None:
    """配置 structlog 并注册应用上下文清理时的异常日志."""
    structlog_config.configure(app)

    @app.teardown_appcontext
    def log_teardown_error(exception: BaseException | None) -> None:
        if exception is not None:
            get_system_logger().error("应用请求处理异常", module="system", exception=str(exception))


def should_log_debug() -> bool:
    """当前应用是否开启了调试日志."""
    try:
        return bool(current_app.config.get("ENABLE_DEBUG_LOG", False))
    except RuntimeError:
        return False


def _emit(
    level: str,
    message: str,
    module: str,
    exception: Exception | None,
    fields: dict[str, LogField],
) -> None:
    logger = get_logger("app")
    if exception is None:
        getattr(logger, level)(message, module=module, **fields)
    elif level == "error":
        # error 级别附带堆栈
        logger.exception(message, module=module, error=str(exception), **fields)
    elif level == "critical":
        logger.critical(message, module=module, error=str(exception), **fields)
    else:
        getattr(logger, level)(message, module=module, exception=str(exception), **fields)


def log_info(message: str, module: str = "app", **kwargs: LogField) -> None:
    _emit("info", message, module, None, kwargs)


def log_debug(message: str, module: str = "app", **kwargs: LogField) -> None:
    """记录调试日志, 未开启 ``ENABLE_DEBUG_LOG`` 时直接跳过."""
    if should_log_debug():
        _emit("debug", message, module, None, kwargs)


def enhanced_error_handler(
    error: Exception,
    context: ErrorContext | None = None,
    *,
    extra: LoggerExtra | None = None,
) -> ErrorPayload:
    """把异常转换为错误封套载荷, 并按严重度记录日志.

    Args:
        error: 异常对象.
        context: 错误上下文,未提供时按当前请求自动创建.
        extra: 调用方追加的诊断字段, 与 ``AppError.extra`` 合并后写入 ``extra``.

    Returns:
        包含 error_id、category、severity、message_code、message、timestamp、
        recoverable、suggestions、context 的字典, 有诊断字段时另含 extra.

    """
    context = context or ErrorContext(error)
    metadata = derive_error_metadata(error)

    extra_payload: dict[str, JsonValue] = dict(error.extra) if isinstance(error, AppError) else {}
    extra_payload.update(extra or {})

    payload: ErrorPayload = {
        "error": True,
        "error_id": context.error_id,
        "category": metadata.category.value,
        "severity": metadata.severity.value,
        "message_code": metadata.message_key,
        "message": metadata.message,
        "timestamp": context.timestamp.isoformat(),
        "recoverable": metadata.recoverable,
        "suggestions": get_error_suggestions(metadata.category),
        "context": build_public_context(context),
    }
    if extra_payload:
        payload["extra"] = extra_payload

    _log_error_payload(error, metadata, payload)
    return payload


def _log_error_payload(error: Exception, metadata: ErrorMetadata, payload: ErrorPayload) -> None:
    fields: dict[str, LogField] = {
        key: payload[key] for key in ("error_id", "category", "severity", "context", "extra") if key in payload
    }
    level = _SEVERITY_LEVELS.get(metadata.severity, "warning")
    _emit(level, str(payload["message"]), "error_handler", error, fields)


__all__ = [
    "ErrorContext",
    "ErrorMetadata",
    "configure_structlog",
    "enhanced_error_handler",
    "get_logger",
    "get_system_logger",
    "log_debug",
    "log_info",
    "should_log_debug",
]
