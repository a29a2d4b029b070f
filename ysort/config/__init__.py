"""配置模块

提供配置管理功能：
- AppSettings: 应用基础配置，支持 YAML + 环境变量
- 子配置类: SorterSettings, LoggingSettings
- ConfigLoader: YAML 配置加载器

快速开始:
    from ysort.config import AppSettings, load_yaml_config

    settings = load_yaml_config("config/settings.yaml", AppSettings)
"""

from .settings import (
    AppSettings,
    SorterSettings,
    LoggingSettings,
)

from .loader import (
    ConfigLoader,
    load_yaml_config,
)

__all__ = [
    "AppSettings",
    "SorterSettings",
    "LoggingSettings",
    "ConfigLoader",
    "load_yaml_config",
]
