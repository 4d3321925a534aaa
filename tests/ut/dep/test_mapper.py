"""依赖映射入口测试"""

from __future__ import annotations

import gc
import os
from pathlib import Path

import pytest

from bower_assets.core.config import Config
from bower_assets.core.dep.mapper import DependencyMapper
from bower_assets.core.dep.registry import PackageRegistry
from bower_assets.core.exceptions import AssetNotFoundError, ConfigError, DependencyNotFoundError
from bower_assets.core.models import PackageMetadata


def _snapshot(packages) -> list[tuple]:
    return [
        (p.name, p.scripts, p.styles, p.images, set(p.dependency_names))
        for p in packages
    ]


class TestOrdering:
    def test_chain_root_first(self, mapper, make_node) -> None:
        packages = mapper.map(make_node("a", make_node("b", make_node("c"))))
        assert [p.name for p in packages] == ["a", "b", "c"]
        assert mapper.last_build_order == ["c", "b", "a"]

    def test_single_package(self, mapper, make_node) -> None:
        packages = mapper.map(make_node("solo"))
        assert [p.name for p in packages] == ["solo"]
        assert packages[0].dependencies == []

    def test_accepts_metadata(self, mapper, make_node) -> None:
        root = PackageMetadata.from_dict(make_node("a", make_node("b")))
        assert [p.name for p in mapper.map(root)] == ["a", "b"]

    def test_dependencies_registered_before_wiring(
        self, mapper, make_node, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        seen: list[tuple[str, bool]] = []
        real_require = PackageRegistry.require

        def spy(self, name):
            seen.append((name, name in self))
            return real_require(self, name)

        monkeypatch.setattr(PackageRegistry, "require", spy)
        mapper.map(make_node(
            "app",
            make_node("ui", make_node("jquery"), make_node("lodash")),
            make_node("charts", make_node("d3", make_node("lodash"))),
        ))

        assert seen
        assert all(present for _, present in seen)


class TestDiamond:
    def test_single_shared_package(self, mapper, make_node) -> None:
        packages = mapper.map(make_node(
            "a",
            make_node("b", make_node("d")),
            make_node("c", make_node("d")),
        ))

        by_name = {p.name: p for p in packages}
        assert [p.name for p in packages].count("d") == 1
        assert by_name["b"].dependencies[0] is by_name["d"]
        assert by_name["c"].dependencies[0] is by_name["d"]
        assert set(by_name["a"].dependency_names) == {"b", "c"}

    def test_root_dependency_also_nested(self, mapper, make_node) -> None:
        packages = mapper.map(make_node(
            "app", make_node("jquery"), make_node("plugin", make_node("jquery")),
        ))
        by_name = {p.name: p for p in packages}
        assert by_name["app"].dependencies[0] is by_name["jquery"]
        assert by_name["plugin"].dependencies[0] is by_name["jquery"]


class TestAssets:
    def test_extension_filtering(self, mapper, make_node, write_asset) -> None:
        a = write_asset("lib", "a.js")
        write_asset("lib", "b.css")
        write_asset("lib", "c")
        packages = mapper.map(make_node("lib", scripts=["a.js", "b.css", "c"]))
        assert packages[0].scripts == [os.path.realpath(a)]

    def test_missing_required_file(self, mapper, make_node, app_dir: Path) -> None:
        with pytest.raises(AssetNotFoundError) as exc_info:
            mapper.map(make_node("app", main="missing.js"))
        assert exc_info.value.path == str(app_dir / "bower_components" / "app" / "missing.js")

    def test_missing_dependency_file_aborts(self, mapper, make_node) -> None:
        with pytest.raises(FileNotFoundError):
            mapper.map(make_node("app", make_node("lib", main="gone.css")))

    def test_missing_image_placeholder(self, mapper, make_node) -> None:
        packages = mapper.map(make_node("app", main="missing.png"))
        assert packages[0].images == [""]

    def test_external_reference(self, mapper, make_node) -> None:
        packages = mapper.map(make_node("app", main="@cdn/lib.js"))
        assert packages[0].scripts == ["@cdn/lib.js"]


class TestRunIsolation:
    def test_idempotent(self, mapper, make_node, write_asset) -> None:
        write_asset("d", "d.js")
        write_asset("b", "b.css")
        tree = make_node(
            "a",
            make_node("b", make_node("d", main="d.js"), main="b.css"),
            make_node("c", make_node("d", main="d.js")),
        )
        first = mapper.map(tree)
        second = mapper.map(tree)

        assert _snapshot(first) == _snapshot(second)
        assert first[0] is not second[0]

    def test_links_survive_after_run(self, mapper, make_node) -> None:
        packages = mapper.map(make_node("a", make_node("b")))
        gc.collect()
        assert packages[0].dependencies[0] is packages[1]

    def test_inconsistent_tree_raises(self, mapper, make_node) -> None:
        # 根层的 d 不带依赖，先占住位置；深层的 d 依赖 x，x 排在 d 之后
        tree = make_node(
            "a",
            make_node("d"),
            make_node("b", make_node("d", make_node("x"))),
        )
        with pytest.raises(DependencyNotFoundError, match="x"):
            mapper.map(tree)

    def test_failed_run_clears_build_order(self, mapper, make_node) -> None:
        mapper.map(make_node("a", make_node("b")))
        assert mapper.last_build_order == ["b", "a"]

        with pytest.raises(AssetNotFoundError):
            mapper.map(make_node("c", main="gone.js"))
        assert mapper.last_build_order == []


class TestConstruction:
    def test_empty_app_dir(self) -> None:
        with pytest.raises(ConfigError):
            DependencyMapper(app_dir="")

    def test_from_config(self, app_dir: Path, make_node) -> None:
        mapper = DependencyMapper.from_config(Config(app_dir=str(app_dir)))
        assert [p.name for p in mapper.map(make_node("a"))] == ["a"]

    def test_from_config_unset(self) -> None:
        with pytest.raises(ConfigError):
            DependencyMapper.from_config(Config())
