"""Select Toggle - 本地开发环境启动文件.

使用 ``select_toggle.demo`` 中的演示 ``users`` 资源.
"""

from __future__ import annotations

import os
from typing import Final

from select_toggle import create_app
from select_toggle.demo import build_registry
from select_toggle.utils.structlog_config import get_system_logger

os.environ.setdefault("FLASK_APP", "app")
os.environ.setdefault("FLASK_ENV", "development")

DEFAULT_HOST: Final[str] = "127.0.0.1"
DEFAULT_PORT: Final[str] = "5001"
DEFAULT_DEBUG: Final[str] = "true"


def _load_runtime_config() -> tuple[str, int, bool]:
    """读取开发服务器运行参数."""
    host = os.environ.get("FLASK_HOST") or DEFAULT_HOST
    port = int(os.environ.get("FLASK_PORT", DEFAULT_PORT))
    debug = os.environ.get("FLASK_DEBUG", DEFAULT_DEBUG).lower() == "true"
    return host, port, debug


def main() -> None:
    """启动 Flask 开发服务器并打印辅助信息."""
    app = create_app(registry=build_registry())
    host, port, debug = _load_runtime_config()

    logger = get_system_logger()
    logger.info("Select Toggle 开发环境已启动", host=host, port=port, debug=debug)
    logger.info(
        "选项接口",
        url=f"http://{host}:{port}{app.config['SELECT_TOGGLE_ROUTE_PREFIX']}/options"
        "?resourceName=users&fieldAttribute=role&targetAttribute=type&targetValue=admin",
    )

    app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=False)


if __name__ == "__main__":
    main()
