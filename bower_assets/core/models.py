"""核心数据模型

- AssetType: 资源类型及其识别的元数据字段和扩展名
- PackageMetadata: 包管理器输出的单个节点（只读输入）
- Package: 映射结果实体，依赖关系以弱引用保存，生命周期归注册表所有
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from bower_assets.core.exceptions import ValidationError

# 缺失时必须报错的扩展名；其余类型（如图片）缺失时降级为空路径
REQUIRED_EXTENSIONS = ("js", "css")

# 以此开头的文件名视为外部托管引用（如 CDN 别名），原样透传
EXTERNAL_PREFIX = "@"


class AssetType(str, Enum):
    """资源类型"""

    SCRIPTS = "scripts"
    STYLES = "styles"
    IMAGES = "images"

    @property
    def keys(self) -> tuple[str, ...]:
        """pkgMeta 中承载该类型文件的字段"""
        return _ASSET_KEYS[self]

    @property
    def extensions(self) -> tuple[str, ...]:
        return _ASSET_EXTENSIONS[self]


_ASSET_KEYS: dict[AssetType, tuple[str, ...]] = {
    AssetType.SCRIPTS: ("main", "script", "scripts"),
    AssetType.STYLES: ("main", "styles", "stylesheets"),
    AssetType.IMAGES: ("main",),
}

_ASSET_EXTENSIONS: dict[AssetType, tuple[str, ...]] = {
    AssetType.SCRIPTS: ("js",),
    AssetType.STYLES: ("css",),
    AssetType.IMAGES: ("png", "gif", "jpg", "jpeg", "bmp"),
}


@dataclass
class PackageMetadata:
    """包管理器列出的单个已安装包，dependencies 递归嵌套"""

    name: str
    canonical_dir: str = ""
    meta: dict[str, Any] = field(default_factory=dict)
    dependencies: dict[str, PackageMetadata] = field(default_factory=dict)

    @property
    def dependency_count(self) -> int:
        return len(self.dependencies)

    @classmethod
    def from_dict(cls, data: Any, name: str = "") -> PackageMetadata:
        """从包管理器的 JSON 列表节点构造

        名称优先取 endpoint.name，其次 pkgMeta.name，最后使用父节点中的键名。
        pkgMeta / dependencies 缺失或为 null 时视为空。
        """
        if not isinstance(data, dict):
            raise ValidationError(
                f"包节点必须是对象: {name or '<root>'} "
                f"(实际类型: {type(data).__name__})"
            )

        meta = data.get("pkgMeta") or {}
        if not isinstance(meta, dict):
            raise ValidationError(f"pkgMeta 必须是对象: {name or '<root>'}")

        endpoint = data.get("endpoint") or {}
        if not isinstance(endpoint, dict):
            raise ValidationError(f"endpoint 必须是对象: {name or '<root>'}")
        pkg_name = endpoint.get("name") or meta.get("name") or name
        if not pkg_name:
            raise ValidationError("包节点缺少名称 (endpoint.name)")

        raw_deps = data.get("dependencies") or {}
        if not isinstance(raw_deps, dict):
            raise ValidationError(f"dependencies 必须是对象: {pkg_name}")

        return cls(
            name=pkg_name,
            canonical_dir=data.get("canonicalDir") or "",
            meta=meta,
            dependencies={
                dep_name: cls.from_dict(dep, name=dep_name)
                for dep_name, dep in raw_deps.items()
            },
        )


@dataclass(eq=False)
class Package:
    """映射后的资源包

    dependencies 只保存弱引用，不持有依赖包的生命周期。
    同名依赖（菱形依赖）在整个集合中指向同一个 Package 对象。
    """

    name: str
    scripts: list[str] = field(default_factory=list)
    styles: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)
    _dependency_refs: list[weakref.ref[Package]] = field(
        default_factory=list, repr=False,
    )

    def add_scripts(self, paths: list[str]) -> None:
        self.scripts.extend(paths)

    def add_styles(self, paths: list[str]) -> None:
        self.styles.extend(paths)

    def add_images(self, paths: list[str]) -> None:
        self.images.extend(paths)

    def add_dependency(self, package: Package) -> None:
        self._dependency_refs.append(weakref.ref(package))

    @property
    def dependencies(self) -> list[Package]:
        """按连接顺序返回依赖包

        引用对象已被回收（持有它的集合已释放）时抛出 ReferenceError。
        """
        result: list[Package] = []
        for ref in self._dependency_refs:
            dep = ref()
            if dep is None:
                raise ReferenceError(
                    f"{self.name} 的依赖包已被释放，请保留 map() 返回的集合"
                )
            result.append(dep)
        return result

    @property
    def dependency_names(self) -> list[str]:
        return [dep.name for dep in self.dependencies]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "scripts": list(self.scripts),
            "styles": list(self.styles),
            "images": list(self.images),
            "dependencies": self.dependency_names,
        }
