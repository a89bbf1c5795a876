"""排序管理模块

导出:
    - OrderManager: 排序管理器（排序算法）
    - SortableConfig: 排序配置
    - SortFieldMixin: 排序字段 Mixin（提供 order_column 字段）
    - SortableMixin: 排序管理 Mixin（模型级排序方法）
    - 记录存储: BaseRecordStore / MemoryRecordStore / ORMRecordStore
    - 异常: SortableError / InvalidArgumentError / RecordNotFoundError / SortableConfigError

使用示例:
    from sortkit.sortable import OrderManager, MemoryRecordStore

    manager = OrderManager(MemoryRecordStore(items))
    manager.reorder([3, 1, 2])

    # ORM 模型
    from sortkit.sortable import SortFieldMixin, SortableMixin

    class Banner(CoreModel, SortFieldMixin, SortableMixin):
        __tablename__ = "banner"
        title = mapped_column(String(100))

    Banner.get(1).move_down()
"""

from .config import SortableConfig, DEFAULT_ORDER_COLUMN
from .exceptions import (
    SortableError,
    InvalidArgumentError,
    RecordNotFoundError,
    SortableConfigError,
)
from .stores import (
    BaseRecordStore,
    OrderBy,
    OrderFilter,
    MemoryRecordStore,
    ORMRecordStore,
)
from .manager import OrderManager
from .sortable_fields import SortFieldMixin
from .sortable_mixin import SortableMixin

__all__ = [
    "SortableConfig",
    "DEFAULT_ORDER_COLUMN",
    "SortableError",
    "InvalidArgumentError",
    "RecordNotFoundError",
    "SortableConfigError",
    "BaseRecordStore",
    "OrderBy",
    "OrderFilter",
    "MemoryRecordStore",
    "ORMRecordStore",
    "OrderManager",
    "SortFieldMixin",
    "SortableMixin",
]
