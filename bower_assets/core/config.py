"""集中配置管理

提供统一的配置入口：从 YAML 文件加载 + 环境变量覆盖 + 编程式覆盖。
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, field
from typing import Any

from bower_assets.core.exceptions import ConfigError
from bower_assets.utils.yaml_io import load_yaml

logger = logging.getLogger(__name__)

_ENV_OVERRIDES = {
    "app_dir": "BOWER_ASSETS_APP_DIR",
    "directory": "BOWER_ASSETS_DIRECTORY",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """全局配置"""

    # 目录
    app_dir: str = ""                    # 应用根目录，canonicalDir 相对于它解析
    directory: str = "bower_components"  # 包安装目录

    # 日志
    log_level: str = "INFO"
    log_json: bool = False

    # 自定义扩展 (放不到字段里的配置项)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str = "configs/default.yml") -> Config:
        """从 YAML 文件加载配置，不存在则使用默认值；环境变量优先"""
        data = load_yaml(path)
        known = {f.name for f in cls.__dataclass_fields__.values()}
        matched = {k: v for k, v in data.items() if k in known and k != "extra"}
        extra = {k: v for k, v in data.items() if k not in known}

        for attr, env_name in _ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                matched[attr] = value

        cfg = cls(**matched)
        cfg.extra = extra
        return cfg

    def validate(self) -> None:
        """校验字段类型和必填项，YAML 中写错类型的值不做隐式转换"""
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(
                f"log_level 无效: {self.log_level!r}，可选: {', '.join(_LOG_LEVELS)}"
            )
        if not isinstance(self.log_json, bool):
            raise ConfigError(f"log_json 必须是布尔值: {self.log_json!r}")
        if not isinstance(self.app_dir, str) or not isinstance(self.directory, str):
            raise ConfigError("app_dir / directory 必须是字符串")
        if not self.app_dir:
            raise ConfigError("应用根目录 (app_dir) 未配置")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# 全局单例，首次 import 时不加载文件；由 CLI 入口显式初始化
_current: Config | None = None


def get_config() -> Config:
    """获取当前配置（未初始化则返回默认值）"""
    global _current  # noqa: PLW0603
    if _current is None:
        _current = Config()
    return _current


def init_config(path: str = "configs/default.yml") -> Config:
    """从文件初始化全局配置"""
    global _current  # noqa: PLW0603
    _current = Config.from_file(path)
    logger.info("配置已加载: %s", path)
    return _current
