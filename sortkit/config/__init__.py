"""配置模块

- AppSettings: 应用基础配置，支持 YAML + 环境变量
- 子配置类: SortableSettings, DatabaseSettings, LoggingSettings
- ConfigLoader / load_yaml_config: YAML 配置加载

配置优先级: YAML 文件 / 显式参数 > 环境变量 > 默认值
"""

from .settings import (
    AppSettings,
    SortableSettings,
    DatabaseSettings,
    LoggingSettings,
)

from .loader import (
    ConfigLoader,
    load_yaml_config,
)

__all__ = [
    "AppSettings",
    "SortableSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "ConfigLoader",
    "load_yaml_config",
]
