"""SQLAlchemy 记录存储

基于 SQLAlchemy Session 和映射模型类实现记录存储接口。
"""

from contextlib import contextmanager
from typing import Any, Generator, List, Optional, Type

from sqlalchemy import func, select
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import InstrumentedAttribute

from sortkit.log import get_logger

from ..exceptions import RecordNotFoundError, SortableConfigError
from .base import FILTER_OPERATORS, BaseRecordStore, OrderBy, OrderFilter

logger = get_logger("sortkit.sortable.store")


class ORMRecordStore(BaseRecordStore):
    """SQLAlchemy 记录存储

    save() 默认只 flush 不提交，由调用方控制事务边界；
    commit=True 时每次保存都立即提交。

    使用示例:
        store = ORMRecordStore(Banner, session)
        manager = OrderManager(store, Banner.sortable_config())

        # 需要原子性时显式包裹
        with store.atomic():
            manager.reorder([3, 1, 2])
    """

    def __init__(self, model: Type[Any], session: Optional[Session] = None, commit: bool = False):
        self.model = model
        self._session = session
        self.commit = commit

    @property
    def session(self) -> Session:
        if self._session is None:
            get_session = getattr(self.model, "get_session", None)
            if get_session is not None:
                self._session = get_session()
            else:
                from sortkit.orm.db_session import db_manager
                self._session = db_manager.get_session()
        return self._session

    def column(self, name: str) -> InstrumentedAttribute:
        """获取模型上的映射字段

        Raises:
            SortableConfigError: 字段不存在或不是映射字段
        """
        attr = getattr(self.model, name, None)
        if not isinstance(attr, InstrumentedAttribute):
            raise SortableConfigError(f"{self.model.__name__} 上不存在排序字段 '{name}'")
        return attr

    def find(self, record_id: Any) -> Any:
        record = self.session.get(self.model, record_id)
        if record is None:
            logger.warning(f"{self.model.__name__}【{record_id}】不存在")
            raise RecordNotFoundError(record_id, self.model.__name__)
        return record

    def max(self, column: str) -> int:
        return self.session.scalar(select(func.max(self.column(column)))) or 0

    def min(self, column: str) -> int:
        return self.session.scalar(select(func.min(self.column(column)))) or 0

    def query(
        self,
        where: Optional[OrderFilter] = None,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
    ) -> List[Any]:
        stmt = select(self.model)
        if where is not None:
            stmt = stmt.where(FILTER_OPERATORS[where.op](self.column(where.column), where.value))
        if order_by is not None:
            col = self.column(order_by.column)
            pk = self.model.id
            if order_by.descending:
                stmt = stmt.order_by(col.desc(), pk.desc())
            else:
                stmt = stmt.order_by(col.asc(), pk.asc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.scalars(stmt).all())

    def save(self, record: Any) -> None:
        self.session.add(record)
        if self.commit:
            self.session.commit()
        else:
            self.session.flush()

    @contextmanager
    def atomic(self) -> Generator["ORMRecordStore", None, None]:
        """原子执行上下文

        正常退出时提交，出现异常时回滚并重新抛出。
        块内的 save() 不会单独提交。
        """
        previous_commit = self.commit
        self.commit = False
        try:
            yield self
            self.session.commit()
        except Exception:
            logger.warning(f"{self.model.__name__} 排序操作失败，已回滚")
            self.session.rollback()
            raise
        finally:
            self.commit = previous_commit


__all__ = [
    "ORMRecordStore",
]
