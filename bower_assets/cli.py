"""bower-assets 命令行接口"""

from __future__ import annotations

import json
import os

import click

from bower_assets import __version__
from bower_assets.core.config import Config, init_config
from bower_assets.core.dep import DependencyMapper, flatten
from bower_assets.core.exceptions import BowerAssetsError, ValidationError
from bower_assets.core.listing import load_listing
from bower_assets.utils.logger import setup_logging
from bower_assets.utils.yaml_io import dump_yaml


def _load_config(config: str, app_dir: str | None, directory: str | None) -> Config:
    """加载配置文件并应用命令行覆盖；未设置日志环境变量时使用配置中的日志级别"""
    cfg = init_config(config)
    if app_dir:
        cfg.app_dir = app_dir
    if directory:
        cfg.directory = directory
    cfg.validate()
    if "BOWER_ASSETS_LOG_LEVEL" not in os.environ:
        setup_logging(level=cfg.log_level, json_output=cfg.log_json)
    return cfg


def _fail(exc: Exception) -> click.ClickException:
    """把库异常转换为 CLI 错误，附带校验详情"""
    message = str(exc)
    if isinstance(exc, ValidationError) and exc.details:
        message += " (" + "; ".join(exc.details) + ")"
    return click.ClickException(message)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """bower-assets - 把前端依赖树映射为有序的资源包集合"""
    setup_logging(
        level=os.getenv("BOWER_ASSETS_LOG_LEVEL", "INFO"),
        json_output=os.getenv("BOWER_ASSETS_LOG_JSON", "") == "1",
    )


@main.command(name="map")
@click.argument("listing", type=click.Path(dir_okay=False))
@click.option("--config", default="configs/default.yml", help="配置文件路径")
@click.option("--app-dir", default=None, help="应用根目录（覆盖配置）")
@click.option("--directory", default=None, help="包安装目录（覆盖配置）")
@click.option(
    "--format", "fmt", type=click.Choice(["yaml", "json"]), default="yaml",
    help="输出格式",
)
def map_cmd(
    listing: str, config: str, app_dir: str | None,
    directory: str | None, fmt: str,
) -> None:
    """映射依赖列表，输出有序的资源包（根包在前）"""
    try:
        cfg = _load_config(config, app_dir, directory)
        mapper = DependencyMapper.from_config(cfg)
        packages = mapper.map(load_listing(listing))
    except (BowerAssetsError, FileNotFoundError) as e:
        raise _fail(e) from e

    data = [p.to_dict() for p in packages]
    if fmt == "json":
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        click.echo(dump_yaml(data), nl=False)


@main.command(name="order")
@click.argument("listing", type=click.Path(dir_okay=False))
def order_cmd(listing: str) -> None:
    """输出展平后的构建顺序（依赖在前，根包最后）"""
    try:
        root = load_listing(listing)
    except (BowerAssetsError, FileNotFoundError) as e:
        raise _fail(e) from e
    for name, _ in flatten(root):
        click.echo(name)


if __name__ == "__main__":
    main()
