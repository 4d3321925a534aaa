"""资源文件提取

职责:
- 按资源类型读取 pkgMeta 中的字段（单个文件名或文件名列表）
- 按扩展名过滤
- 把文件名解析为磁盘上的绝对路径

路径解析是纯路径拼接，以显式传入的目录为基准，不切换进程工作目录，
因此可以重入，也可以在多个调用方之间并发使用。
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from bower_assets.core.exceptions import AssetNotFoundError, ConfigError
from bower_assets.core.models import (
    EXTERNAL_PREFIX,
    REQUIRED_EXTENSIONS,
    AssetType,
    PackageMetadata,
)

logger = logging.getLogger(__name__)


def file_extension(filename: str) -> str:
    """返回文件名最后一个 '.' 之后的部分（区分大小写），无扩展名返回空串"""
    base = os.path.basename(filename)
    if "." not in base:
        return ""
    return base.rsplit(".", 1)[1]


class AssetExtractor:
    """资源提取器

    app_dir:   应用根目录，pkg.canonical_dir 相对于它拼接
    directory: 包安装目录，app_dir 为相对路径时作为解析基准
    """

    def __init__(self, app_dir: str | Path | None, directory: str | Path = "") -> None:
        if not app_dir:
            raise ConfigError("应用根目录 (app_dir) 不能为空")
        self.app_dir = Path(app_dir)
        self.directory = Path(directory) if directory else None

    def extract(self, pkg: PackageMetadata, asset_type: AssetType) -> list[str]:
        files: list[str] = []
        for key in asset_type.keys:
            if key not in pkg.meta:
                continue
            for filename in self._filenames(pkg.name, key, pkg.meta[key]):
                if file_extension(filename) in asset_type.extensions:
                    files.append(self.resolve(pkg.canonical_dir, filename))
        return files

    def extract_all(self, pkg: PackageMetadata) -> dict[AssetType, list[str]]:
        return {t: self.extract(pkg, t) for t in AssetType}

    def resolve(self, canonical_dir: str, filename: str) -> str:
        """解析单个资源文件路径

        规则:
          - '@' 开头: 外部托管引用，原样返回，不检查存在性
          - 文件存在: 返回真实绝对路径
          - 文件不存在且扩展名为 js/css: 抛出 AssetNotFoundError
          - 其他缺失文件（图片）: 返回空串占位
        """
        if filename.startswith(EXTERNAL_PREFIX):
            return filename

        # 文件名总是相对于包目录，去掉开头的路径分隔符
        candidate = self._anchor(self.app_dir / canonical_dir / filename.lstrip("/\\"))
        if candidate.exists():
            return os.path.realpath(candidate)

        if file_extension(filename) in REQUIRED_EXTENSIONS:
            raise AssetNotFoundError(str(candidate))

        logger.warning("可选资源文件不存在，使用空路径占位: %s", candidate)
        return ""

    def _anchor(self, path: Path) -> Path:
        """把相对路径锚定到安装目录（其本身相对时再锚定到当前工作目录）"""
        if not path.is_absolute() and self.directory is not None:
            path = self.directory / path
        return Path(os.path.abspath(path))

    @staticmethod
    def _filenames(pkg_name: str, key: str, value: Any) -> list[str]:
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            return [v for v in value if isinstance(v, str)]
        logger.debug("忽略无法识别的字段值: %s.%s=%r", pkg_name, key, value)
        return []
