"""
sortkit - SQLAlchemy 模型排序管理

提供排序号维护、按 ID 列表重排、上移/下移、置顶/置底等功能
"""

from .version import __version__, __author__, __description__

# 导出排序模块
from .sortable import (
    OrderManager,
    SortableConfig,
    SortFieldMixin,
    SortableMixin,
    BaseRecordStore,
    MemoryRecordStore,
    ORMRecordStore,
    OrderBy,
    OrderFilter,
    SortableError,
    InvalidArgumentError,
    RecordNotFoundError,
    SortableConfigError,
)

# 导出ORM基类
from .orm import (
    Base,
    CoreModel,
    init_database,
    get_engine,
    db_session_scope,
)

# 导出日志模块
from .log import (
    setup_logger,
    get_logger,
    logger,
)

# 导出配置
from .config import (
    AppSettings,
    SortableSettings,
    DatabaseSettings,
    LoggingSettings,
    ConfigLoader,
    load_yaml_config,
)

__all__ = [
    "__version__",
    "__author__",
    "__description__",

    # Sortable
    "OrderManager",
    "SortableConfig",
    "SortFieldMixin",
    "SortableMixin",
    "BaseRecordStore",
    "MemoryRecordStore",
    "ORMRecordStore",
    "OrderBy",
    "OrderFilter",
    "SortableError",
    "InvalidArgumentError",
    "RecordNotFoundError",
    "SortableConfigError",

    # ORM
    "Base",
    "CoreModel",
    "init_database",
    "get_engine",
    "db_session_scope",

    # Log
    "setup_logger",
    "get_logger",
    "logger",

    # Config
    "AppSettings",
    "SortableSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "ConfigLoader",
    "load_yaml_config",
]
