"""排序异常定义

提供排序管理相关的异常类。
"""

from typing import Any, Optional


class SortableError(Exception):
    """排序管理基础异常"""
    pass


class InvalidArgumentError(SortableError, TypeError):
    """无效参数异常

    当 reorder 收到的不是有序的 ID 序列（列表、元组等）时抛出。

    Attributes:
        argument: 收到的参数值
    """

    def __init__(self, message: str, argument: Any = None):
        self.argument = argument
        super().__init__(message)


class RecordNotFoundError(SortableError, LookupError):
    """记录不存在异常

    由记录存储的 find() 抛出，重排过程中遇到时会中止剩余处理，
    已写入的记录不会回滚。

    Attributes:
        record_id: 未找到的记录 ID
        model: 模型名称（可选）
    """

    def __init__(self, record_id: Any, model: Optional[str] = None):
        self.record_id = record_id
        self.model = model
        target = f"{model}【{record_id}】" if model else f"【{record_id}】"
        super().__init__(f"记录不存在: {target}")


class SortableConfigError(SortableError, ValueError):
    """排序配置异常

    当配置的排序字段在模型上不存在时抛出。
    """
    pass


__all__ = [
    "SortableError",
    "InvalidArgumentError",
    "RecordNotFoundError",
    "SortableConfigError",
]
