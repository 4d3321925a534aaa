"""依赖树展平

把嵌套的依赖树一次遍历为 name -> 节点 的有序序列：
依赖总是排在依赖它的包之前，根包固定在最后。
"""

from __future__ import annotations

import logging

from bower_assets.core.models import PackageMetadata

logger = logging.getLogger(__name__)


def flatten(root: PackageMetadata) -> list[tuple[str, PackageMetadata]]:
    """后序遍历依赖树

    同名节点后写覆盖先写，但保留首次插入的位置；根包最后写入，总是胜出。
    """
    collected: dict[str, PackageMetadata] = {}

    def _visit(node: PackageMetadata) -> None:
        for name, dep in node.dependencies.items():
            _visit(dep)
            collected[name] = dep

    _visit(root)
    collected[root.name] = root

    logger.debug("依赖树展平完成: %s -> %d 个包", root.name, len(collected))
    return list(collected.items())
