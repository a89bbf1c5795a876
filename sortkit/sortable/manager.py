"""排序管理器

在记录存储之上实现排序算法：
- 新记录初始排序号（最大值 + 1）
- 按 ID 列表批量重排
- 上移 / 下移（与相邻记录交换排序号）
- 置顶 / 置底 / 规范化

管理器本身不持有状态，也不开启事务。每个操作都是一串独立的
存储读写，多个调用方并发操作同一张表时可能产生重复或跳号的排序值；
需要原子性时由调用方包裹事务（见 ORMRecordStore.atomic）。
"""

from collections.abc import Hashable, Sequence
from typing import Any, List, Optional

from sortkit.log import get_logger

from .config import SortableConfig
from .exceptions import InvalidArgumentError
from .stores.base import BaseRecordStore, OrderBy, OrderFilter

logger = get_logger("sortkit.sortable.manager")


class OrderManager:
    """排序管理器

    Args:
        store: 记录存储
        config: 排序配置，None 时使用默认配置

    使用示例:
        store = MemoryRecordStore([a, b, c])
        manager = OrderManager(store)

        manager.assign_initial_order(d)   # d.order_column = max + 1
        manager.reorder([c.id, a.id, b.id])
        manager.move_down(c)
    """

    def __init__(self, store: BaseRecordStore, config: Optional[SortableConfig] = None):
        self.store = store
        self.config = config or SortableConfig()

    @property
    def column(self) -> str:
        return self.config.order_column_name

    def _get_order(self, record: Any) -> Optional[int]:
        return getattr(record, self.column, None)

    def _set_order(self, record: Any, value: int) -> None:
        setattr(record, self.column, value)

    # ==================== 查询 ====================

    def get_highest_order_number(self) -> int:
        """获取最大排序号，无记录返回 0"""
        return int(self.store.max(self.column))

    def get_lowest_order_number(self) -> int:
        """获取最小排序号，无记录返回 0"""
        return int(self.store.min(self.column))

    def should_sort_when_creating(self) -> bool:
        return self.config.sort_when_creating

    def ordered(self, descending: bool = False) -> List[Any]:
        """按排序字段获取所有记录"""
        return self.store.query(order_by=OrderBy(self.column, descending))

    # ==================== 新记录 ====================

    def assign_initial_order(self, record: Any) -> int:
        """设置新记录的排序号为当前最大值 + 1

        空表时最大值按 0 计算，新记录得到 1。

        Returns:
            分配的排序号
        """
        value = self.get_highest_order_number() + 1
        self._set_order(record, value)
        return value

    # ==================== 批量重排 ====================

    def reorder(self, ids: Sequence, start_order: Optional[int] = None) -> int:
        """按 ID 列表顺序重新设置排序号

        列表中第一个 ID 的记录得到 start_order，第二个得到 start_order + 1，依此类推，
        与原排序号无关。

        Args:
            ids: 有序的 ID 序列（list / tuple 等）
            start_order: 起始排序号，默认取配置值（1）

        Returns:
            写入的记录数

        Raises:
            InvalidArgumentError: ids 不是有序序列，或其中包含 None / 不可哈希的元素
            RecordNotFoundError: 某个 ID 不存在。此前已保存的记录不回滚
        """
        if not _is_id_sequence(ids):
            raise InvalidArgumentError(
                f"reorder 需要有序的 ID 序列，收到 {type(ids).__name__}",
                argument=ids,
            )
        invalid = [record_id for record_id in ids if not _is_record_id(record_id)]
        if invalid:
            raise InvalidArgumentError(
                f"reorder 收到无效的 ID: {invalid[0]!r}",
                argument=ids,
            )

        order = self.config.start_order if start_order is None else start_order
        count = 0
        for record_id in ids:
            record = self.store.find(record_id)
            self._set_order(record, order)
            self.store.save(record)
            logger.debug(f"reorder: {record_id} -> {order}")
            order += 1
            count += 1

        logger.info(f"reorder 完成，共更新 {count} 条记录")
        return count

    def normalize(self, start_order: Optional[int] = None) -> int:
        """规范化排序号

        按当前顺序从 start_order 开始连续编号，消除间隙和重复。

        Returns:
            排序号发生变化的记录数
        """
        order = self.config.start_order if start_order is None else start_order
        count = 0
        for record in self.ordered():
            if self._get_order(record) != order:
                self._set_order(record, order)
                self.store.save(record)
                count += 1
            order += 1

        logger.info(f"normalize 完成，共更新 {count} 条记录")
        return count

    # ==================== 相邻移动 ====================

    def move_down(self, record: Any) -> bool:
        """与排序号更大的最近记录交换

        Returns:
            是否移动。已在最底部时返回 False
        """
        neighbour = self._adjacent(record, "gt", descending=False)
        if neighbour is None:
            return False
        self.swap(record, neighbour)
        return True

    def move_up(self, record: Any) -> bool:
        """与排序号更小的最近记录交换

        Returns:
            是否移动。已在最顶部时返回 False
        """
        neighbour = self._adjacent(record, "lt", descending=True)
        if neighbour is None:
            return False
        self.swap(record, neighbour)
        return True

    def _adjacent(self, record: Any, op: str, descending: bool) -> Optional[Any]:
        current = self._get_order(record)
        if current is None:
            return None
        found = self.store.query(
            where=OrderFilter(self.column, op, current),
            order_by=OrderBy(self.column, descending),
            limit=1,
        )
        return found[0] if found else None

    def swap(self, record_a: Any, record_b: Any) -> None:
        """交换两条记录的排序号

        先交换内存中的值，再依次保存 record_b、record_a。
        两次保存都必须成功，否则表中会出现重复的排序号。
        """
        order_a = self._get_order(record_a)
        order_b = self._get_order(record_b)

        self._set_order(record_b, order_a)
        self._set_order(record_a, order_b)

        self.store.save(record_b)
        self.store.save(record_a)
        logger.debug(f"swap: {record_a.id}({order_a} -> {order_b}), {record_b.id}({order_b} -> {order_a})")

    # ==================== 置顶 / 置底 ====================

    def move_to_start(self, record: Any) -> bool:
        """置顶

        当前记录取得最小排序号，原来排在它前面的记录依次后移一位。

        Returns:
            是否移动。已在最顶部时返回 False
        """
        current = self._get_order(record)
        if current is None:
            return False
        lowest = self.get_lowest_order_number()
        if current <= lowest:
            return False

        for other in self.store.query(where=OrderFilter(self.column, "lt", current)):
            self._set_order(other, self._get_order(other) + 1)
            self.store.save(other)

        self._set_order(record, lowest)
        self.store.save(record)
        logger.debug(f"move_to_start: {record.id} ({current} -> {lowest})")
        return True

    def move_to_end(self, record: Any) -> bool:
        """置底

        当前记录取得最大排序号，原来排在它后面的记录依次前移一位。

        Returns:
            是否移动。已在最底部时返回 False
        """
        current = self._get_order(record)
        if current is None:
            return False
        highest = self.get_highest_order_number()
        if current >= highest:
            return False

        for other in self.store.query(where=OrderFilter(self.column, "gt", current)):
            self._set_order(other, self._get_order(other) - 1)
            self.store.save(other)

        self._set_order(record, highest)
        self.store.save(record)
        logger.debug(f"move_to_end: {record.id} ({current} -> {highest})")
        return True


def _is_id_sequence(ids: Any) -> bool:
    # 字符串也是 Sequence，但不是 ID 列表
    return isinstance(ids, Sequence) and not isinstance(ids, (str, bytes, bytearray))


def _is_record_id(value: Any) -> bool:
    return value is not None and isinstance(value, Hashable)


__all__ = [
    "OrderManager",
]
