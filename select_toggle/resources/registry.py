"""资源注册表.

由应用显式构造并交给插件扩展,不使用模块级全局状态.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from select_toggle.errors import UnknownResourceError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from select_toggle.resources.base import Resource


class ResourceRegistry:
    """资源名到资源类型的映射."""

    def __init__(self, resources: Iterable[type[Resource]] = ()) -> None:
        self._resources: dict[str, type[Resource]] = {}
        for resource in resources:
            self.register(resource)

    def register(self, resource: type[Resource]) -> type[Resource]:
        """注册资源类型,可作为类装饰器使用.

        Raises:
            ValueError: 资源名已被其他资源占用时抛出.

        """
        key = resource.key()
        existing = self._resources.get(key)
        if existing is not None and existing is not resource:
            msg = f"资源名 [{key}] 已被 {existing.__name__} 注册"
            raise ValueError(msg)
        self._resources[key] = resource
        return resource

    def resource_for_key(self, key: str) -> type[Resource] | None:
        return self._resources.get(key)

    def resource_instance_for_key(self, key: str) -> Resource:
        """实例化资源.

        Raises:
            UnknownResourceError: 资源名未注册时抛出.

        """
        resource = self.resource_for_key(key)
        if resource is None:
            raise UnknownResourceError(key)
        return resource()

    def keys(self) -> list[str]:
        return list(self._resources)

    def __contains__(self, key: object) -> bool:
        return key in self._resources

    def __iter__(self) -> Iterator[type[Resource]]:
        return iter(self._resources.values())

    def __len__(self) -> int:
        return len(self._resources)
