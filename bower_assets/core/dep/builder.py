"""Package 构建与依赖连接

对展平后的每个节点构建 Package，填充三类资源，
并按名称连接到注册表中已存在的依赖包。
"""

from __future__ import annotations

import logging

from bower_assets.core.dep.extractor import AssetExtractor
from bower_assets.core.dep.ordering import order_dependencies
from bower_assets.core.dep.registry import PackageRegistry
from bower_assets.core.models import AssetType, Package, PackageMetadata

logger = logging.getLogger(__name__)


class PackageBuilder:
    """包构建器 - 写入共享的 PackageRegistry"""

    def __init__(self, registry: PackageRegistry, extractor: AssetExtractor) -> None:
        self.registry = registry
        self.extractor = extractor

    def build_one(self, name: str, pkg: PackageMetadata) -> Package:
        """构建单个包并写入注册表

        步骤:
          1. 按子依赖数量对直接依赖排序（仅保证结果可复现）
          2. 提取 scripts / styles / images
          3. 逐个连接直接依赖，依赖必须已注册，否则抛出 DependencyNotFoundError
          4. 以 name 写入注册表（同名原位覆盖）

        每个名称在一次运行中只构建一次，依赖连接一旦建立不再改变，
        菱形依赖的各个使用方因此共享同一个 Package 对象。
        """
        ordered = order_dependencies(pkg.dependencies)
        package = self.create_package(name, pkg)

        for dep_name, _ in ordered:
            package.add_dependency(self.registry.require(dep_name))

        self.registry.put(name, package)
        logger.debug(
            "已构建: %s (scripts=%d styles=%d images=%d deps=%d)",
            name, len(package.scripts), len(package.styles),
            len(package.images), len(ordered),
        )
        return package

    def create_package(self, name: str, pkg: PackageMetadata) -> Package:
        """构建只含资源、不含依赖连接的 Package"""
        assets = self.extractor.extract_all(pkg)
        package = Package(name)
        package.add_scripts(assets[AssetType.SCRIPTS])
        package.add_styles(assets[AssetType.STYLES])
        package.add_images(assets[AssetType.IMAGES])
        return package
