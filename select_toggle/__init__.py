"""Select Toggle - Flask 应用初始化.

提供目标字段联动的下拉字段插件: 字段定义、选项解析服务、vendor 路由与前端静态资源.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flask import Flask, request
from flask.typing import ResponseReturnValue
from flask_cors import CORS

from select_toggle.constants import HttpHeaders
from select_toggle.extension import SelectToggleExtension
from select_toggle.infra.logging import register_request_logging
from select_toggle.resources import ResourceRegistry
from select_toggle.settings import Settings
from select_toggle.utils.response_utils import jsonify_unified_error
from select_toggle.utils.structlog_config import ErrorContext, configure_structlog

cors = CORS()


def create_app(
    *,
    settings: Settings | None = None,
    registry: ResourceRegistry | None = None,
    extension: SelectToggleExtension | None = None,
) -> Flask:
    """创建Flask应用实例.

    Args:
        settings: 可选的配置对象,用于测试或多环境启动.
        registry: 宿主的资源注册表,未提供时使用空注册表.
        extension: 已构造好的插件扩展,优先于 ``registry``.

    Returns:
        Flask: Flask应用实例

    """
    resolved_settings = settings or Settings.load()
    app = Flask(__name__)

    # 配置应用
    configure_app(app, resolved_settings)

    # 初始化 CORS
    configure_cors(app, resolved_settings)

    # 配置日志
    configure_logging(app)

    # 配置统一日志系统
    configure_structlog(app)
    register_request_logging(app)

    # 设置全局日志级别
    log_level_name = str(app.config.get("LOG_LEVEL", "INFO"))
    logging.getLogger().setLevel(getattr(logging, log_level_name, logging.INFO))

    # 注册全局错误处理器
    @app.errorhandler(Exception)
    def handle_global_exception(error: Exception) -> ResponseReturnValue:
        """全局错误处理."""
        return jsonify_unified_error(error, context=ErrorContext(error, request))

    # 挂载插件
    resolved_extension = extension or SelectToggleExtension(registry)
    resolved_extension.init_app(app, resolved_settings)

    return app


def configure_app(app: Flask, settings: Settings) -> None:
    """写入 Settings 提供的配置.

    Args:
        app: Flask 应用实例.
        settings: 统一配置对象,包含环境变量解析、默认值与校验结果.

    """
    app.config.from_mapping(settings.to_flask_config())
    app.config["TESTING"] = settings.environment.strip().lower() == "testing"
    app.config.setdefault("APPLICATION_ROOT", "/")


def configure_cors(app: Flask, settings: Settings) -> None:
    """仅对插件路由开放跨域."""
    cors.init_app(
        app,
        resources={
            rf"{settings.route_prefix}/*": {
                "origins": list(settings.cors_origins),
                "methods": ["GET", "POST", "OPTIONS"],
                "allow_headers": [
                    HttpHeaders.CONTENT_TYPE,
                    HttpHeaders.X_CSRF_TOKEN,
                    HttpHeaders.X_REQUESTED_WITH,
                    HttpHeaders.X_REQUEST_ID,
                ],
                "expose_headers": [HttpHeaders.X_REQUEST_ID],
                "supports_credentials": True,
            },
        },
    )


def configure_logging(app: Flask) -> None:
    """配置日志系统与文件处理器.

    调试与测试模式下只输出到控制台.
    """
    if not app.debug and not app.testing:
        # 创建日志目录
        log_path = Path(app.config["LOG_FILE"])
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=app.config["LOG_MAX_SIZE"],
            backupCount=app.config["LOG_BACKUP_COUNT"],
        )
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]"),
        )
        file_handler.setLevel(getattr(logging, app.config["LOG_LEVEL"]))
        app.logger.addHandler(file_handler)

        app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"]))
        app.logger.info("Select Toggle 应用启动")


__all__ = ["create_app"]
