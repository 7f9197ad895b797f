"""Select Toggle 运行时配置.

环境变量(及可选的项目根目录 `.env`)只在这里读取, `create_app(settings=...)` 与扩展只消费 Settings.
生产环境缺失 SECRET_KEY 时拒绝启动, 并默认关闭 Swagger 文档.
"""

from __future__ import annotations

import json
import logging
import secrets
from collections.abc import Iterable
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DOTENV_PATH = PROJECT_ROOT / ".env"

DEFAULT_ENVIRONMENT = "development"
APP_VERSION = "1.0.0"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "userdata/logs/select_toggle.log"
DEFAULT_LOG_MAX_SIZE_BYTES = 10 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 5

DEFAULT_CORS_ORIGINS = ("http://localhost:5001", "http://127.0.0.1:5001")

DEFAULT_ROUTE_PREFIX = "/nova-vendor/select-toggle"
DEFAULT_DOCS_ENABLED = True

_VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def _clean_items(items: Iterable[object]) -> tuple[str, ...]:
    """去掉空白项, 保留顺序."""
    return tuple(text for text in (str(item).strip() for item in items) if text)


class Settings(BaseSettings):
    """应用运行时设置集合."""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
        # `CORS_ORIGINS` 使用逗号分隔,关闭自动 JSON 解码,统一交由 validator 解析。
        enable_decoding=False,
    )

    environment: str = Field(default=DEFAULT_ENVIRONMENT, validation_alias="FLASK_ENV")
    debug: bool = Field(default=False, validation_alias="FLASK_DEBUG")

    app_name: str = Field(default="Select Toggle", validation_alias="APP_NAME")
    app_version: str = APP_VERSION

    secret_key: str = Field(default="", validation_alias="SECRET_KEY")

    log_level: str = Field(default=DEFAULT_LOG_LEVEL, validation_alias="LOG_LEVEL")
    log_file: str = Field(default=DEFAULT_LOG_FILE, validation_alias="LOG_FILE")
    log_max_size_bytes: int = Field(default=DEFAULT_LOG_MAX_SIZE_BYTES, validation_alias="LOG_MAX_SIZE")
    log_backup_count: int = Field(default=DEFAULT_LOG_BACKUP_COUNT, validation_alias="LOG_BACKUP_COUNT")
    enable_debug_log: bool = Field(default=False, validation_alias="ENABLE_DEBUG_LOG")

    cors_origins: tuple[str, ...] = Field(default=DEFAULT_CORS_ORIGINS, validation_alias="CORS_ORIGINS")

    route_prefix: str = Field(default=DEFAULT_ROUTE_PREFIX, validation_alias="SELECT_TOGGLE_ROUTE_PREFIX")
    docs_enabled: bool = Field(default=DEFAULT_DOCS_ENABLED, validation_alias="SELECT_TOGGLE_DOCS_ENABLED")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("route_prefix")
    @classmethod
    def _normalize_route_prefix(cls, value: str) -> str:
        return value.rstrip("/") if value != "/" else value

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: object) -> object:
        # 同时接受逗号分隔字符串与 JSON 数组
        if isinstance(value, str):
            raw = value.strip()
            if not raw.startswith("["):
                return _clean_items(raw.split(","))
            parsed = json.loads(raw)
            if not isinstance(parsed, list):
                raise ValueError("CORS_ORIGINS 必须是 JSON 数组或逗号分隔字符串")
            return _clean_items(parsed)
        if isinstance(value, (list, tuple, set)):
            return _clean_items(value)
        return value

    @property
    def is_production(self) -> bool:
        """当前是否为生产环境."""
        return self.environment.strip().lower() == "production"

    def to_flask_config(self) -> dict[str, object]:
        """转换为 Flask app.config 可写入的配置字典."""
        return {
            "ENV": self.environment,
            "DEBUG": self.debug,
            "APP_NAME": self.app_name,
            "APP_VERSION": self.app_version,
            "SECRET_KEY": self.secret_key,
            "LOG_LEVEL": self.log_level,
            "LOG_FILE": self.log_file,
            "LOG_MAX_SIZE": self.log_max_size_bytes,
            "LOG_BACKUP_COUNT": self.log_backup_count,
            "ENABLE_DEBUG_LOG": self.enable_debug_log,
            "CORS_ORIGINS": ",".join(self.cors_origins),
            "SELECT_TOGGLE_ROUTE_PREFIX": self.route_prefix,
            "SELECT_TOGGLE_DOCS_ENABLED": self.docs_enabled,
        }

    @classmethod
    def load(cls) -> Settings:
        """从环境变量加载 Settings 并执行必要校验."""
        load_dotenv(dotenv_path=DOTENV_PATH if DOTENV_PATH.exists() else None, override=False)
        return cls()

    @model_validator(mode="after")
    def _apply_defaults_and_validate(self) -> Settings:
        environment_normalized = self.environment.strip().lower()

        debug = self._resolve_debug(environment_normalized)
        self._ensure_secret_key(debug)
        self._apply_docs_default(environment_normalized)

        self._validate()
        return self

    def _resolve_debug(self, environment_normalized: str) -> bool:
        if "debug" in self.model_fields_set:
            return bool(self.debug)
        debug = environment_normalized != "production"
        object.__setattr__(self, "debug", debug)
        return debug

    def _ensure_secret_key(self, debug: bool) -> None:
        if self.secret_key:
            return
        if not debug:
            raise ValueError("SECRET_KEY environment variable must be set in production")
        object.__setattr__(self, "secret_key", secrets.token_urlsafe(32))
        logger.warning("⚠️  开发环境使用随机生成的SECRET_KEY,生产环境请设置环境变量")

    def _apply_docs_default(self, environment_normalized: str) -> None:
        if environment_normalized != "production":
            return
        if "docs_enabled" in self.model_fields_set:
            return
        object.__setattr__(self, "docs_enabled", False)

    def _validate(self) -> None:
        """执行跨字段校验,统一抛出可读的 ValueError."""
        errors: list[str] = []
        checks: list[tuple[str, bool]] = [
            ("LOG_LEVEL 仅支持 DEBUG/INFO/WARNING/ERROR/CRITICAL", self.log_level not in _VALID_LOG_LEVELS),
            ("LOG_MAX_SIZE 必须为正整数(字节)", self.log_max_size_bytes <= 0),
            ("LOG_BACKUP_COUNT 必须为非负整数", self.log_backup_count < 0),
            ("SELECT_TOGGLE_ROUTE_PREFIX 必须以 / 开头", not self.route_prefix.startswith("/")),
            ("SELECT_TOGGLE_ROUTE_PREFIX 不能为根路径 /", self.route_prefix == "/"),
        ]
        for message, condition in checks:
            if condition:
                errors.append(message)

        if errors:
            joined = "; ".join(errors)
            raise ValueError(f"配置校验失败: {joined}")
