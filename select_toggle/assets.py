"""前端组件静态资源清单.

宿主页面通过模板上下文 ``select_toggle_assets`` 或 ``GET {prefix}/assets`` 获取脚本与样式地址.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

STATIC_FOLDER = Path(__file__).resolve().parent / "static"


class AssetKind(str, Enum):
    """静态资源类型."""

    SCRIPT = "script"
    STYLE = "style"


@dataclass(frozen=True, slots=True)
class Asset:
    """单个静态资源.

    Attributes:
        name: 资源名,同名的脚本与样式属于同一个前端组件.
        kind: 资源类型.
        path: 相对 ``static`` 目录的路径.

    """

    name: str
    kind: AssetKind
    path: str


@dataclass(frozen=True, slots=True)
class AssetManifest:
    """按注册顺序排列的静态资源清单."""

    assets: tuple[Asset, ...] = ()

    def scripts(self) -> tuple[Asset, ...]:
        return tuple(asset for asset in self.assets if asset.kind is AssetKind.SCRIPT)

    def styles(self) -> tuple[Asset, ...]:
        return tuple(asset for asset in self.assets if asset.kind is AssetKind.STYLE)

    def missing(self, static_folder: Path = STATIC_FOLDER) -> list[str]:
        """返回清单中在磁盘上不存在的文件路径."""
        return [asset.path for asset in self.assets if not (static_folder / asset.path).is_file()]


DEFAULT_ASSET_MANIFEST = AssetManifest(
    assets=(
        Asset(name="select-toggle-field", kind=AssetKind.SCRIPT, path="js/field.js"),
        Asset(name="select-toggle-field", kind=AssetKind.STYLE, path="css/field.css"),
    ),
)

__all__ = [
    "DEFAULT_ASSET_MANIFEST",
    "STATIC_FOLDER",
    "Asset",
    "AssetKind",
    "AssetManifest",
]
