"""Select Toggle 选项读取服务.

负责: 资源实例化 -> 字段定位 -> 回调调用 -> 结果规范化. 不做缓存,每次请求重新计算.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from select_toggle.errors import SelectToggleFieldNotFoundError
from select_toggle.services.select_toggle.field_resolver import resolve_field
from select_toggle.utils.structlog_config import log_debug, log_info

if TYPE_CHECKING:
    from flask import Request

    from select_toggle.resources import ResourceRegistry
    from select_toggle.types import OptionPayload


class SelectToggleOptionsService:
    """切换字段选项解析服务."""

    def __init__(self, registry: ResourceRegistry) -> None:
        self._registry = registry

    def get_options(
        self,
        resource_name: str,
        field_attribute: str,
        target_attribute: str | None,
        target_value: Any,
        *,
        request: Request | None = None,
    ) -> list[OptionPayload]:
        """返回指定切换字段在目标取值下的选项.

        Args:
            resource_name: 资源名.
            field_attribute: 切换字段的属性名.
            target_attribute: 目标字段的属性名.
            target_value: 目标字段当前取值,为 None 时直接返回空列表且不查询资源.
            request: 传给 ``Resource.fields`` 的请求对象.

        Returns:
            规范化后的选项列表.

        Raises:
            UnknownResourceError: 资源名未注册.
            SelectToggleFieldNotFoundError: 资源中没有可计算选项的同名字段.
            SelectToggleConfigurationError: 回调返回值无法规范化.

        """
        if target_value is None:
            log_debug(
                "目标取值为空,跳过选项解析",
                module="select_toggle",
                resource_name=resource_name,
                field_attribute=field_attribute,
            )
            return []

        resource = self._registry.resource_instance_for_key(resource_name)
        field = resolve_field(resource.fields(request), field_attribute)
        if field is None:
            raise SelectToggleFieldNotFoundError(resource_name, field_attribute)

        options = field.call_options(target_attribute, target_value)
        log_info(
            "切换选项解析完成",
            module="select_toggle",
            resource_name=resource_name,
            field_attribute=field_attribute,
            target_attribute=target_attribute,
            option_count=len(options),
        )
        return options


__all__ = ["SelectToggleOptionsService"]
