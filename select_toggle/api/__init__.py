"""Select Toggle JSON API (Flask-RESTX) 入口.

- 在 `SELECT_TOGGLE_ROUTE_PREFIX` 下提供选项接口与静态资源清单
- 提供 Swagger UI 与 OpenAPI JSON 导出能力
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flask import Flask

    from select_toggle.settings import Settings


def register_api_blueprints(app: Flask, settings: Settings) -> None:
    """按 Settings 注册插件 blueprint."""
    from select_toggle.api.vendor import create_select_toggle_blueprint  # noqa: PLC0415

    blueprint = create_select_toggle_blueprint(settings)
    app.register_blueprint(blueprint, url_prefix=settings.route_prefix)
