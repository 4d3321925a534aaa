"""包管理器输出读取

读取事先保存的机器可读依赖列表（如 `bower list --json` 的输出），
转换为 PackageMetadata 树。本模块不调用包管理器。
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from bower_assets.core.exceptions import ValidationError
from bower_assets.core.models import PackageMetadata

logger = logging.getLogger(__name__)


def parse_listing(text: str) -> PackageMetadata:
    """解析 JSON 文本"""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(
            "依赖列表不是有效的 JSON",
            details=[e.msg, f"line {e.lineno}, column {e.colno}"],
        ) from e

    if not isinstance(data, dict):
        raise ValidationError(
            f"依赖列表顶层必须是对象 (实际类型: {type(data).__name__})"
        )
    return PackageMetadata.from_dict(data)


def load_listing(path: str | Path) -> PackageMetadata:
    """读取 JSON 文件，文件不存在时抛出 FileNotFoundError"""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"依赖列表文件不存在: {p}")

    root = parse_listing(p.read_text(encoding="utf-8"))
    logger.info("已读取依赖列表: %s (根包 %s)", p, root.name)
    return root
