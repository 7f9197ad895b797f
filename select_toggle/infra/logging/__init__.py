"""请求级日志基础设施."""

from select_toggle.infra.logging.request_middleware import register_request_logging

__all__ = ["register_request_logging"]
