"""ORM模块

- Base / CoreModel: 声明基类与基础模型
- 数据库会话管理

使用示例:
    from sortkit.orm import CoreModel, init_database, db_session_scope

    init_database("sqlite:///./app.db")
"""

from .model import Base, CoreModel
from .db_session import (
    db_manager,
    init_database,
    get_engine,
    db_session_scope,
)

__all__ = [
    "Base",
    "CoreModel",
    "db_manager",
    "init_database",
    "get_engine",
    "db_session_scope",
]
