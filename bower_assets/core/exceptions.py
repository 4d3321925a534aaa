"""统一异常体系

所有业务异常继承 BowerAssetsError，CLI 层据此输出友好提示。
任何异常都会中止当前的 map 调用，内部不做重试。
"""

from __future__ import annotations


class BowerAssetsError(Exception):
    """基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(BowerAssetsError):
    """配置缺失或内容无效（如应用根目录为空）"""

    code = "CONFIG_ERROR"


class AssetNotFoundError(BowerAssetsError, FileNotFoundError):
    """必需的资源文件 (js/css) 在磁盘上不存在"""

    code = "ASSET_NOT_FOUND"

    def __init__(self, path: str) -> None:
        super().__init__(
            f'The required file "{path}" could not be found. '
            "Did you accidentally delete the package install directory?"
        )
        self.path = path


class DependencyNotFoundError(BowerAssetsError):
    """声明的依赖在注册表中找不到，说明输入的依赖树不一致"""

    code = "DEPENDENCY_NOT_FOUND"

    def __init__(self, name: str) -> None:
        super().__init__(f"Dependency {name} not found.")
        self.name = name


class ValidationError(BowerAssetsError):
    """包管理器输出的数据格式无效"""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.details = details or []
