"""路由层异常收口.

业务异常(``AppError``、``HTTPException``)记 warning 后原样抛出, 交给统一错误封套;
其余异常记 error 并包装成 ``fallback_exception(public_error)``, 避免内部细节外泄.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, Unpack

from werkzeug.exceptions import HTTPException

from select_toggle.errors import AppError, SystemError
from select_toggle.utils.structlog_config import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from select_toggle.types import RouteSafetyOptions

R = TypeVar("R")
DEFAULT_EXPECTED_EXCEPTIONS: tuple[type[BaseException], ...] = (AppError, HTTPException)


def _log_failure(
    level: str,
    exc: BaseException,
    *,
    module: str,
    action: str,
    options: RouteSafetyOptions,
    **fields: object,
) -> None:
    payload: dict[str, object] = {"module": module, "action": action}
    payload.update(options.get("context") or {})
    payload.update(options.get("extra") or {})
    payload.update(fields, error_type=exc.__class__.__name__)

    event = options.get("log_event") or f"{action}执行失败"
    getattr(get_logger("app"), level)(event, **payload)


def safe_route_call(
    func: Callable[[], R],
    *,
    module: str,
    action: str,
    public_error: str,
    **options: Unpack[RouteSafetyOptions],
) -> R:
    """执行无参闭包 ``func`` 并收口异常.

    Args:
        func: 路由业务闭包.
        module: 日志模块名.
        action: 动作名, 例如 "get_select_toggle_options".
        public_error: 非预期异常时返回给客户端的文案.
        **options: context、extra、expected_exceptions、fallback_exception、log_event.

    Raises:
        AppError: 业务异常原样抛出, 非预期异常包装为 ``fallback_exception``.

    """
    expected = DEFAULT_EXPECTED_EXCEPTIONS + tuple(options.get("expected_exceptions") or ())
    try:
        return func()
    except expected as exc:
        _log_failure("warning", exc, module=module, action=action, options=options, error_message=str(exc))
        raise
    except Exception as exc:
        _log_failure("error", exc, module=module, action=action, options=options, unexpected=True)
        fallback_exception = options.get("fallback_exception", SystemError)
        raise fallback_exception(public_error) from exc
