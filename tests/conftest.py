"""共享 fixture: 依赖列表节点工厂 + 磁盘资源文件

节点格式与 `bower list --json` 输出一致:

  {
    "endpoint": {"name": "jquery"},
    "canonicalDir": "bower_components/jquery",
    "pkgMeta": {"main": "dist/jquery.js"},
    "dependencies": {...}
  }
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from bower_assets.core.dep import DependencyMapper


def _make_node(
    name: str,
    *deps: dict[str, Any],
    canonical_dir: str | None = None,
    **meta: Any,
) -> dict[str, Any]:
    """构造一个依赖列表节点

    Examples:
        make_node("a", make_node("b"), main="a.js")
    """
    return {
        "endpoint": {"name": name},
        "canonicalDir": canonical_dir if canonical_dir is not None else f"bower_components/{name}",
        "pkgMeta": {"name": name, **meta},
        "dependencies": {d["endpoint"]["name"]: d for d in deps},
    }


@pytest.fixture()
def make_node() -> Callable[..., dict[str, Any]]:
    return _make_node


@pytest.fixture()
def app_dir(tmp_path: Path) -> Path:
    d = tmp_path / "app"
    d.mkdir()
    return d


@pytest.fixture()
def write_asset(app_dir: Path) -> Callable[[str, str], Path]:
    """在 app_dir/bower_components/<pkg>/ 下创建资源文件"""

    def _write(pkg: str, filename: str) -> Path:
        path = app_dir / "bower_components" / pkg / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("/* asset */", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def mapper(app_dir: Path) -> DependencyMapper:
    return DependencyMapper(app_dir=str(app_dir))
