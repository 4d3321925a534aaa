"""依赖映射入口

用法:
    from bower_assets.core.dep import DependencyMapper

    mapper = DependencyMapper(app_dir="/srv/app", directory="bower_components")
    packages = mapper.map(load_listing("listing.json"))
    for pkg in packages:          # 根包在前，最深的叶子在后
        print(pkg.name, pkg.scripts)

返回的集合持有全部 Package 的强引用；Package 之间的依赖是弱引用，
调用方需要在使用依赖关系期间保留该集合。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from bower_assets.core.dep.builder import PackageBuilder
from bower_assets.core.dep.extractor import AssetExtractor
from bower_assets.core.dep.flattener import flatten
from bower_assets.core.dep.registry import PackageRegistry
from bower_assets.core.models import Package, PackageMetadata

if TYPE_CHECKING:
    from bower_assets.core.config import Config

logger = logging.getLogger(__name__)


class DependencyMapper:
    """依赖映射器 - 展平 -> 逐个构建 -> 反转输出"""

    def __init__(self, app_dir: str | Path | None, directory: str | Path = "") -> None:
        self.extractor = AssetExtractor(app_dir, directory)
        self.last_build_order: list[str] = []

    @classmethod
    def from_config(cls, cfg: Config) -> DependencyMapper:
        cfg.validate()
        return cls(cfg.app_dir, cfg.directory)

    def map(self, root: PackageMetadata | dict[str, Any]) -> list[Package]:
        """把依赖树映射为有序的 Package 列表（根包在前）

        每次调用使用独立的注册表，任何异常都会中止本次映射。
        """
        if not isinstance(root, PackageMetadata):
            root = PackageMetadata.from_dict(root)

        logger.info("开始映射依赖: %s", root.name)
        registry = PackageRegistry()
        builder = PackageBuilder(registry, self.extractor)

        # 只记录成功完成的映射，失败时保持为空
        self.last_build_order = []
        flattened = flatten(root)
        for name, pkg in flattened:
            builder.build_one(name, pkg)
        self.last_build_order = [name for name, _ in flattened]

        packages = list(reversed(registry.values()))
        logger.info("映射完成: %s -> %d 个包", root.name, len(packages))
        return packages
