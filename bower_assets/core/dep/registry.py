"""包注册表

单次 map 调用内 name -> Package 的唯一所有者。
按插入顺序保存；同名写入原位覆盖，不改变位置。
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from bower_assets.core.exceptions import DependencyNotFoundError
from bower_assets.core.models import Package

logger = logging.getLogger(__name__)


class PackageRegistry:
    """包注册表 - 持有本次映射产生的全部 Package"""

    def __init__(self) -> None:
        self._packages: dict[str, Package] = {}

    def put(self, name: str, package: Package) -> None:
        if name in self._packages:
            logger.debug("覆盖已注册的包: %s", name)
        self._packages[name] = package

    def get(self, name: str) -> Package | None:
        return self._packages.get(name)

    def require(self, name: str) -> Package:
        """获取已注册的包，不存在时抛出 DependencyNotFoundError"""
        package = self._packages.get(name)
        if package is None:
            raise DependencyNotFoundError(name)
        return package

    def names(self) -> list[str]:
        return list(self._packages)

    def values(self) -> list[Package]:
        return list(self._packages.values())

    def __contains__(self, name: object) -> bool:
        return name in self._packages

    def __len__(self) -> int:
        return len(self._packages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._packages)
