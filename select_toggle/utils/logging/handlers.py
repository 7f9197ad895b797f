"""structlog 处理器."""

from __future__ import annotations

from typing import Any

import structlog


class DebugFilter:
    """根据配置决定是否丢弃 DEBUG 日志的处理器.

    Attributes:
        enabled: 是否启用 DEBUG 日志.

    """

    def __init__(self, *, enabled: bool = False) -> None:
        self.enabled = enabled

    def set_enabled(self, *, enabled: bool) -> None:
        """设置是否启用 DEBUG 日志."""
        self.enabled = enabled

    def __call__(self, logger: structlog.BoundLogger, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        """未启用时丢弃 DEBUG 事件.

        Raises:
            structlog.DropEvent: 当 DEBUG 日志未启用时抛出.

        """
        if method_name == "debug" and not self.enabled:
            raise structlog.DropEvent
        return event_dict


__all__ = ["DebugFilter"]
