"""依赖映射模块

拆分说明:
- flattener.py: 依赖树展平
- ordering.py: 同级依赖排序
- extractor.py: 资源文件提取与路径解析
- registry.py: 包注册表
- builder.py: Package 构建与依赖连接
- mapper.py: 映射入口
"""

from bower_assets.core.dep.builder import PackageBuilder
from bower_assets.core.dep.extractor import AssetExtractor
from bower_assets.core.dep.flattener import flatten
from bower_assets.core.dep.mapper import DependencyMapper
from bower_assets.core.dep.ordering import order_dependencies
from bower_assets.core.dep.registry import PackageRegistry

__all__ = [
    "AssetExtractor",
    "DependencyMapper",
    "PackageBuilder",
    "PackageRegistry",
    "flatten",
    "order_dependencies",
]
