"""内存记录存储

适用于：
- 开发测试
- 不需要持久化的排序列表

注意：存储的是记录对象本身的引用，不做拷贝。
"""

from typing import Any, Dict, Iterable, List, Optional

from ..exceptions import RecordNotFoundError
from .base import BaseRecordStore, OrderBy, OrderFilter


class MemoryRecordStore(BaseRecordStore):
    """内存记录存储

    记录可以是任意带 ``id`` 属性的对象。

    使用示例:
        store = MemoryRecordStore([a, b, c])
        manager = OrderManager(store)
        manager.move_down(a)
    """

    def __init__(self, records: Optional[Iterable[Any]] = None):
        self._records: Dict[Any, Any] = {}
        for record in records or ():
            self.save(record)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: Any) -> bool:
        return record_id in self._records

    def find(self, record_id: Any) -> Any:
        try:
            return self._records[record_id]
        except KeyError:
            raise RecordNotFoundError(record_id) from None

    def max(self, column: str) -> int:
        values = self._values(column)
        return max(values) if values else 0

    def min(self, column: str) -> int:
        values = self._values(column)
        return min(values) if values else 0

    def query(
        self,
        where: Optional[OrderFilter] = None,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
    ) -> List[Any]:
        records = list(self._records.values())
        if where is not None:
            records = [r for r in records if where.matches(r)]
        if order_by is not None:
            # None 排在最前（与 SQLite 升序行为一致），相同排序号按 id 排列
            records.sort(
                key=lambda r: (_null_first_key(getattr(r, order_by.column, None)), r.id),
                reverse=order_by.descending,
            )
        if limit is not None:
            records = records[:limit]
        return records

    def save(self, record: Any) -> None:
        record_id = getattr(record, "id", None)
        if record_id is None:
            raise ValueError(f"记录缺少 id，无法保存: {record!r}")
        self._records[record_id] = record

    def all(self) -> List[Any]:
        """获取所有记录（插入顺序）"""
        return list(self._records.values())

    def _values(self, column: str) -> List[int]:
        values = (getattr(r, column, None) for r in self._records.values())
        return [v for v in values if v is not None]


def _null_first_key(value: Any):
    return (value is not None, value if value is not None else 0)


__all__ = [
    "MemoryRecordStore",
]
