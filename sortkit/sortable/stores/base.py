"""记录存储抽象基类

定义排序管理器依赖的记录存储接口规范。
"""

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from ..exceptions import InvalidArgumentError


# 过滤操作符 -> 比较函数
FILTER_OPERATORS: Dict[str, Callable[[Any, Any], bool]] = {
    "lt": operator.lt,
    "le": operator.le,
    "gt": operator.gt,
    "ge": operator.ge,
    "eq": operator.eq,
}


@dataclass(frozen=True)
class OrderFilter:
    """排序字段过滤条件

    Example:
        OrderFilter("order_column", "gt", 3)  # order_column > 3
    """
    column: str
    op: str
    value: Any

    def __post_init__(self):
        if self.op not in FILTER_OPERATORS:
            raise InvalidArgumentError(
                f"不支持的过滤操作符: {self.op!r}，可选: {sorted(FILTER_OPERATORS)}",
                argument=self.op,
            )

    def matches(self, record: Any) -> bool:
        """判断记录是否满足条件（字段为 None 的记录不满足任何条件）"""
        current = getattr(record, self.column, None)
        if current is None:
            return False
        return FILTER_OPERATORS[self.op](current, self.value)


@dataclass(frozen=True)
class OrderBy:
    """排序规则"""
    column: str
    descending: bool = False


class BaseRecordStore(ABC):
    """记录存储抽象基类

    排序管理器只通过这几个方法访问持久化层，
    不负责事务，也不做重试；存储层的异常原样向上抛出。
    """

    @abstractmethod
    def find(self, record_id: Any) -> Any:
        """根据 ID 获取记录

        Raises:
            RecordNotFoundError: 记录不存在
        """
        pass

    @abstractmethod
    def max(self, column: str) -> int:
        """获取字段最大值，无记录返回 0"""
        pass

    @abstractmethod
    def min(self, column: str) -> int:
        """获取字段最小值，无记录返回 0"""
        pass

    @abstractmethod
    def query(
        self,
        where: Optional[OrderFilter] = None,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
    ) -> List[Any]:
        """查询记录

        Args:
            where: 过滤条件
            order_by: 排序规则
            limit: 最多返回的条数，None 表示不限制

        Returns:
            记录列表
        """
        pass

    @abstractmethod
    def save(self, record: Any) -> None:
        """保存记录"""
        pass


__all__ = [
    "FILTER_OPERATORS",
    "OrderFilter",
    "OrderBy",
    "BaseRecordStore",
]
