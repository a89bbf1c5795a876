"""
配置模块
提供排序库的默认配置，业务项目可以继承并覆盖
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class SortableSettings(BaseSettings):
    """排序配置

    对应模型上的 ``__sortable__`` 字典，作为全局默认值使用。

    使用示例:
        from sortkit.config import SortableSettings

        sort_config = SortableSettings(
            order_column_name="position",
            sort_when_creating=False,
        )
        manager = OrderManager(store, sort_config.to_config())
    """
    order_column_name: str = Field(default="order_column", description="排序字段名")
    sort_when_creating: bool = Field(default=True, description="新建记录时是否自动设置为最大排序号+1")
    start_order: int = Field(default=1, description="批量重排时的起始排序号")

    @field_validator("order_column_name")
    @classmethod
    def _default_when_blank(cls, value: str) -> str:
        # 空字符串视为未配置
        return value.strip() or "order_column"

    def to_config(self):
        """转换为 SortableConfig（不可变配置对象）"""
        from ..sortable.config import SortableConfig

        return SortableConfig(
            order_column_name=self.order_column_name,
            sort_when_creating=self.sort_when_creating,
            start_order=self.start_order,
        )

    class Config:
        env_prefix = "SORTKIT_SORT_"


class DatabaseSettings(BaseSettings):
    """数据库配置

    使用示例:
        from sortkit.config import DatabaseSettings

        db_config = DatabaseSettings(url="sqlite:///./app.db")
    """
    url: str = Field(default="", description="数据库连接URL")
    echo: bool = Field(default=False, description="是否打印SQL语句")
    pool_pre_ping: bool = Field(default=True, description="连接前检查")

    class Config:
        env_prefix = "SORTKIT_DB_"


class LoggingSettings(BaseSettings):
    """日志配置

    使用示例:
        from sortkit.config import LoggingSettings
        from sortkit.log import setup_logger_from_config

        setup_logger_from_config(LoggingSettings(level="DEBUG"))
    """
    level: str = Field(default="INFO", description="日志级别")
    file_path: str = Field(default="", description="日志文件路径，为空时不写文件")
    enable_console: bool = Field(default=True, description="是否启用控制台输出")

    class Config:
        env_prefix = "SORTKIT_LOG_"


class AppSettings(BaseSettings):
    """应用基础配置

    将各子配置类聚合为嵌套结构。

    配置优先级（从高到低）:
        YAML 配置文件 / 显式参数 > 环境变量 > 代码中的默认值

    YAML 配置示例 (config/settings.yaml):
        database:
          url: "sqlite:///./app.db"
        logging:
          level: "DEBUG"
        sortable:
          order_column_name: "position"
          sort_when_creating: true
    """
    database: DatabaseSettings = DatabaseSettings()
    logging: LoggingSettings = LoggingSettings()
    sortable: SortableSettings = SortableSettings()


__all__ = [
    "SortableSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "AppSettings",
]
