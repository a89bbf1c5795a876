"""
ORM基础模型

提供主键、会话访问和最常用的保存/查询方法。
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from sqlalchemy import Integer, inspect
from sqlalchemy.orm import Mapped, Session, declarative_base, mapped_column

if TYPE_CHECKING:
    from typing_extensions import Self


# 声明基类
Base = declarative_base()


class CoreModel(Base):
    """ORM基础模型类

    提供功能：
    - 自增主键字段 id
    - 通过 ``query`` 属性访问 scoped session（由 init_database 或测试夹具设置）
    - save / get 等常用方法

    使用示例:
        from sortkit.orm import CoreModel, init_database

        init_database("sqlite:///./app.db")

        class Banner(CoreModel):
            __tablename__ = "banner"
            title: Mapped[str] = mapped_column(String(100))

        Banner(title="首页").save(commit=True)
    """
    __abstract__ = True

    # 由 db_manager.init() 设置为 scoped_session.query_property()
    query = None

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, comment='主键ID')

    @classmethod
    def get_session(cls) -> Session:
        """获取当前模型使用的 session"""
        # 抽象基类未映射，不能通过 query 属性取 session
        if inspect(cls, raiseerr=False) is not None and cls.query is not None:
            return cls.query.session
        from .db_session import db_manager
        return db_manager.get_session()

    @property
    def session(self) -> Session:
        return self.__class__.get_session()

    def save(self, commit: bool = False) -> Self:
        """保存对象（自动判断新增或更新）

        Args:
            commit: 是否立即提交，默认False（只 flush）

        Returns:
            self: 返回自身，支持链式调用
        """
        # session.add() 是幂等的，对已在 session 中的对象调用是安全的
        self.session.add(self)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
        return self

    @classmethod
    def get(cls, id) -> Optional[Self]:
        """根据ID获取对象，不存在返回None"""
        return cls.get_session().get(cls, id)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id}>"


__all__ = [
    "Base",
    "CoreModel",
]
