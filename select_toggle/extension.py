"""Select Toggle Flask 扩展.

按 Flask 扩展惯例通过 ``init_app`` 挂载: 注册 vendor 路由与静态资源,
并把自身写入 ``app.extensions``, 不依赖模块级可变注册表.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Flask, current_app, url_for

from select_toggle.api import register_api_blueprints
from select_toggle.assets import DEFAULT_ASSET_MANIFEST, AssetManifest
from select_toggle.resources import ResourceRegistry
from select_toggle.services.select_toggle.select_toggle_options_service import SelectToggleOptionsService
from select_toggle.utils.structlog_config import get_system_logger

if TYPE_CHECKING:
    from select_toggle.settings import Settings

EXTENSION_KEY = "select_toggle"
STATIC_ENDPOINT = "select_toggle.static"


class SelectToggleExtension:
    """插件扩展对象.

    Attributes:
        registry: 资源注册表.
        manifest: 前端组件静态资源清单.

    Example:
        >>> registry = ResourceRegistry([UserResource])
        >>> SelectToggleExtension(registry).init_app(app, settings)

    """

    def __init__(
        self,
        registry: ResourceRegistry | None = None,
        *,
        manifest: AssetManifest = DEFAULT_ASSET_MANIFEST,
    ) -> None:
        self.registry = registry if registry is not None else ResourceRegistry()
        self.manifest = manifest
        self._options_service = SelectToggleOptionsService(self.registry)

    @property
    def options_service(self) -> SelectToggleOptionsService:
        return self._options_service

    def init_app(self, app: Flask, settings: Settings) -> None:
        """注册路由、静态资源与模板上下文."""
        register_api_blueprints(app, settings)
        app.extensions[EXTENSION_KEY] = self

        @app.context_processor
        def inject_select_toggle_assets() -> dict[str, object]:
            return {"select_toggle_assets": self.asset_urls()}

        missing = self.manifest.missing()
        if missing:
            get_system_logger().warning("Select Toggle 静态资源缺失", module="select_toggle", missing=missing)

        get_system_logger().info(
            "Select Toggle 插件已注册",
            module="select_toggle",
            route_prefix=settings.route_prefix,
            resources=self.registry.keys(),
        )

    def asset_urls(self) -> list[dict[str, str]]:
        """返回清单中所有资源的访问地址,脚本在前、样式在后."""
        return [
            {"name": asset.name, "kind": asset.kind.value, "url": url_for(STATIC_ENDPOINT, filename=asset.path)}
            for asset in (*self.manifest.scripts(), *self.manifest.styles())
        ]


def get_extension(app: Flask | None = None) -> SelectToggleExtension:
    """读取已挂载到应用上的插件扩展.

    Raises:
        RuntimeError: 应用未调用 ``init_app`` 时抛出.

    """
    target = app or current_app
    extension = target.extensions.get(EXTENSION_KEY)
    if extension is None:
        msg = "Select Toggle 扩展尚未初始化, 请先调用 SelectToggleExtension.init_app"
        raise RuntimeError(msg)
    return extension


__all__ = ["EXTENSION_KEY", "SelectToggleExtension", "get_extension"]
