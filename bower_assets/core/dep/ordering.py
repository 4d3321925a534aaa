"""同级依赖排序

按子依赖数量升序做稳定排序，仅用于保证多次运行结果一致，
全局构建顺序的正确性由展平阶段保证。
"""

from __future__ import annotations

from collections.abc import Mapping

from bower_assets.core.models import PackageMetadata


def order_dependencies(
    deps: Mapping[str, PackageMetadata],
) -> list[tuple[str, PackageMetadata]]:
    return sorted(deps.items(), key=lambda item: item[1].dependency_count)
