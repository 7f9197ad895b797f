"""资源基类.

资源是管理后台中对外暴露的领域实体,按请求构造,并按需给出当前请求下的字段列表.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from flask import Request

    from select_toggle.fields import Field

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class Resource:
    """资源基类,子类实现 ``fields``.

    Attributes:
        uri_key: 路由与前端组件使用的资源名,缺省由类名推导(如 ``UserRole`` -> ``user-roles``).

    """

    uri_key: ClassVar[str | None] = None

    @classmethod
    def key(cls) -> str:
        """返回资源名."""
        if cls.uri_key:
            return cls.uri_key
        return f"{_CAMEL_BOUNDARY.sub('-', cls.__name__).lower()}s"

    def fields(self, request: Request | None) -> list[Field]:
        """返回当前请求下的字段列表."""
        raise NotImplementedError
