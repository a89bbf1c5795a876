"""排序配置

把模型上的 ``__sortable__`` 字典解析成不可变的 SortableConfig，
在类定义或管理器构造时解析一次，之后不再逐次查找。
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


DEFAULT_ORDER_COLUMN = "order_column"


@dataclass(frozen=True)
class SortableConfig:
    """排序配置

    Attributes:
        order_column_name: 排序字段名
        sort_when_creating: 新建记录时是否自动设置为最大排序号+1
        start_order: reorder / normalize 的默认起始排序号
    """
    order_column_name: str = DEFAULT_ORDER_COLUMN
    sort_when_creating: bool = True
    start_order: int = 1

    @classmethod
    def from_mapping(
        cls,
        options: Optional[Mapping[str, Any]],
        defaults: Optional["SortableConfig"] = None,
    ) -> "SortableConfig":
        """从字典解析配置

        缺失或为空的 order_column_name 回退到默认值；
        缺失的 sort_when_creating 视为 True。

        Example:
            SortableConfig.from_mapping({"order_column_name": "position"})
            SortableConfig.from_mapping(None)  # 全部默认
        """
        base = defaults or cls()
        if not options:
            return base

        column = options.get("order_column_name") or base.order_column_name
        sort_when_creating = options.get("sort_when_creating")
        if sort_when_creating is None:
            sort_when_creating = base.sort_when_creating
        start_order = options.get("start_order")
        if start_order is None:
            start_order = base.start_order

        return cls(
            order_column_name=column,
            sort_when_creating=bool(sort_when_creating),
            start_order=int(start_order),
        )


__all__ = [
    "DEFAULT_ORDER_COLUMN",
    "SortableConfig",
]
