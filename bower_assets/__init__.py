"""bower-assets - 前端包管理器依赖树到资源包集合的映射"""

__version__ = "0.1.0"
