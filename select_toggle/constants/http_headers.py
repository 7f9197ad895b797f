"""HTTP头常量.

定义插件路由用到的 HTTP 头名称，避免魔法字符串。
"""


class HttpHeaders:
    """HTTP头常量."""

    CONTENT_TYPE = "Content-Type"

    # 跨域相关
    X_CSRF_TOKEN = "X-CSRFToken"
    X_REQUESTED_WITH = "X-Requested-With"

    # 请求追踪
    X_REQUEST_ID = "X-Request-ID"
