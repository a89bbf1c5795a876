"""排序管理 Mixin

把 OrderManager 组合到模型上，提供模型级别的排序方法。
排序算法本身在 OrderManager 中，这里只负责构造存储和配置。

使用示例:
    from sortkit.orm import CoreModel
    from sortkit.sortable import SortFieldMixin, SortableMixin

    class Banner(CoreModel, SortFieldMixin, SortableMixin):
        __tablename__ = "banner"
        title = mapped_column(String(100))

    class Slide(CoreModel, SortableMixin):
        __tablename__ = "slide"
        __sortable__ = {
            "order_column_name": "position",
            "sort_when_creating": False,
        }
        position = mapped_column(Integer)

    banner = Banner.get(1)
    banner.move_up()
    banner.move_to_end()
    Banner.reorder([3, 1, 2])
    session.commit()
"""

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import event
from sqlalchemy.orm import Session, object_session

from sortkit.config.settings import SortableSettings
from sortkit.log import get_logger

from .config import SortableConfig
from .manager import OrderManager
from .stores.orm import ORMRecordStore

logger = get_logger("sortkit.sortable.mixin")


class SortableMixin:
    """排序管理 Mixin

    可配置属性（子类可覆盖）:
        - __sortable__: 排序配置字典
            - order_column_name: 排序字段名，默认 "order_column"（空值同样回退到默认）
            - sort_when_creating: 新建时是否自动设置为最大值 + 1，默认 True
            - start_order: reorder / normalize_order 的默认起始值，默认 1

    未在 __sortable__ 中给出的项取全局 SortableSettings（环境变量 SORTKIT_SORT_*）。
    配置在类定义时解析一次，之后通过 sortable_config() 获取。

    所有方法只修改并 flush 记录，不提交事务。
    """

    __sortable__ = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._sortable_config = SortableConfig.from_mapping(
            getattr(cls, "__sortable__", None),
            defaults=SortableSettings().to_config(),
        )

    # ==================== 配置 / 管理器 ====================

    @classmethod
    def sortable_config(cls) -> SortableConfig:
        """获取解析后的排序配置"""
        return cls._sortable_config

    @classmethod
    def order_manager(cls, session: Optional[Session] = None, commit: bool = False) -> OrderManager:
        """创建绑定到当前模型的排序管理器

        Args:
            session: 使用的 session，None 时使用模型默认 session
            commit: 每次保存是否立即提交
        """
        return OrderManager(ORMRecordStore(cls, session, commit=commit), cls.sortable_config())

    def _manager(self) -> OrderManager:
        return type(self).order_manager(object_session(self))

    @classmethod
    def should_sort_when_creating(cls) -> bool:
        return cls.sortable_config().sort_when_creating

    # ==================== 类方法 ====================

    @classmethod
    def get_highest_order_number(cls) -> int:
        """获取最大排序号，无记录返回 0"""
        return cls.order_manager().get_highest_order_number()

    @classmethod
    def get_lowest_order_number(cls) -> int:
        """获取最小排序号，无记录返回 0"""
        return cls.order_manager().get_lowest_order_number()

    @classmethod
    def ordered(cls, desc: bool = False) -> List[Any]:
        """获取按排序字段排序的全部记录

        Example:
            titles = [b.title for b in Banner.ordered()]
        """
        return cls.order_manager().ordered(descending=desc)

    @classmethod
    def reorder(cls, ids: Sequence, start_order: Optional[int] = None) -> int:
        """批量重排序

        根据传入的 ID 顺序重新设置排序号，适用于前端拖拽排序后提交新顺序的场景。
        某个 ID 不存在时抛出 RecordNotFoundError，此前的修改已 flush 但未提交，
        是否回滚由调用方决定。

        Example:
            Banner.reorder([3, 1, 2])
            session.commit()

        Returns:
            写入的记录数
        """
        return cls.order_manager().reorder(ids, start_order)

    @classmethod
    def normalize_order(cls, start_order: Optional[int] = None) -> int:
        """规范化排序号（消除间隙与重复）

        Example:
            # 删除一些记录后，排序号可能不连续: 1, 3, 7, 10
            Banner.normalize_order()
            # 规范化后变成: 1, 2, 3, 4
        """
        return cls.order_manager().normalize(start_order)

    # ==================== 实例方法 ====================

    def set_highest_order_number(self) -> int:
        """把当前记录的排序号设置为最大值 + 1"""
        return self._manager().assign_initial_order(self)

    def move_up(self) -> bool:
        """上移一位（与前一个记录交换排序号）

        Returns:
            是否成功移动（已在最顶部时返回 False）
        """
        return self._manager().move_up(self)

    def move_down(self) -> bool:
        """下移一位（与后一个记录交换排序号）

        Returns:
            是否成功移动（已在最底部时返回 False）
        """
        return self._manager().move_down(self)

    def swap_with(self, other: "SortableMixin") -> None:
        """与另一个对象交换排序号"""
        self._manager().swap(self, other)

    def move_to_start(self) -> bool:
        """置顶"""
        return self._manager().move_to_start(self)

    def move_to_end(self) -> bool:
        """置底"""
        return self._manager().move_to_end(self)


# ==================== 新建记录排序事件监听器 ====================

@event.listens_for(Session, "before_flush")
def event_before_flush_assign_order(session, flush_context, instances):
    """flush 前为新建的可排序记录设置排序号

    - 仅处理 sort_when_creating 为 True 的模型
    - 同一次 flush 中的多条新记录依次得到 max + 1、max + 2 ...
    """
    next_orders: Dict[type, int] = {}

    with session.no_autoflush:
        for obj in list(session.new):
            if not isinstance(obj, SortableMixin):
                continue
            model = type(obj)
            config = model.sortable_config()
            if not config.sort_when_creating:
                continue

            if model not in next_orders:
                manager = OrderManager(ORMRecordStore(model, session), config)
                next_orders[model] = manager.get_highest_order_number() + 1

            setattr(obj, config.order_column_name, next_orders[model])
            logger.debug(f"{model.__name__} 新记录排序号: {next_orders[model]}")
            next_orders[model] += 1


__all__ = [
    "SortableMixin",
]
