"""记录存储模块

提供不同的记录存储实现：
- MemoryRecordStore: 内存存储
- ORMRecordStore: SQLAlchemy 存储（持久化）
"""

from .base import BaseRecordStore, OrderBy, OrderFilter, FILTER_OPERATORS
from .memory import MemoryRecordStore
from .orm import ORMRecordStore

__all__ = [
    "BaseRecordStore",
    "OrderBy",
    "OrderFilter",
    "FILTER_OPERATORS",
    "MemoryRecordStore",
    "ORMRecordStore",
]
