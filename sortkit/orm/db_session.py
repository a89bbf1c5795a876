"""
数据库会话管理模块

公开 API:
- db_manager: 数据库管理器单例
- init_database(): 初始化数据库连接
- get_engine(): 获取数据库引擎
- db_session_scope(): 脚本/任务场景的上下文管理器
"""

from contextlib import contextmanager
from typing import Any, Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, scoped_session, sessionmaker

from sortkit.log import get_logger

_logger = get_logger("sortkit.orm.session")

__all__ = [
    'db_manager',
    'init_database',
    'get_engine',
    'db_session_scope',
]


class DatabaseManager:
    """数据库管理器（单例）

    使用示例:
        from sortkit.orm import db_manager

        db_manager.init(database_url="sqlite:///./test.db")
        session = db_manager.get_session()
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._engine = None
        self._session_scope = None
        self._initialized = True

    @property
    def engine(self):
        """获取数据库引擎（只读）

        Raises:
            RuntimeError: 数据库未初始化时
        """
        if self._engine is None:
            raise RuntimeError("数据库未初始化，请先调用 init_database()")
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None and self._session_scope is not None

    def init(
        self,
        database_url: str = None,
        echo: bool = False,
        pool_pre_ping: bool = True,
        config: Any = None,
        auto_setup_query: bool = True,
        **engine_kwargs
    ):
        """初始化数据库连接

        Args:
            database_url: 数据库连接URL（如果提供 config 则忽略）
            echo: 是否输出SQL语句（如果提供 config 则忽略）
            pool_pre_ping: 连接前检查（如果提供 config 则忽略）
            config: DatabaseSettings 配置对象
            auto_setup_query: 是否自动设置 CoreModel.query
            **engine_kwargs: 透传给 create_engine 的其他参数

        Returns:
            数据库引擎
        """
        if config is not None:
            database_url = getattr(config, "url", database_url)
            echo = getattr(config, "echo", echo)
            pool_pre_ping = getattr(config, "pool_pre_ping", pool_pre_ping)

        if not database_url:
            raise ValueError("database_url 不能为空")

        if self._session_scope is not None:
            self._session_scope.remove()
        if self._engine is not None:
            self._engine.dispose()

        self._engine = create_engine(
            database_url,
            echo=echo,
            pool_pre_ping=pool_pre_ping,
            **engine_kwargs
        )
        session_maker = sessionmaker(autocommit=False, autoflush=False, bind=self._engine)
        self._session_scope = scoped_session(session_maker)

        if auto_setup_query:
            from .model import CoreModel
            CoreModel.query = self._session_scope.query_property()

        _logger.info(f"数据库已初始化: {self._engine.url.render_as_string(hide_password=True)}")
        return self._engine

    def get_session(self) -> Session:
        """获取当前线程的 session"""
        if self._session_scope is None:
            raise RuntimeError("数据库未初始化，请先调用 init_database()")
        return self._session_scope()

    def remove_session(self):
        """关闭并移除当前线程的 session"""
        if self._session_scope is not None:
            self._session_scope.remove()

    def dispose(self):
        """释放引擎和会话（主要用于测试）"""
        self.remove_session()
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._session_scope = None


db_manager = DatabaseManager()


def init_database(database_url: str = None, **kwargs):
    """初始化数据库连接，参数同 DatabaseManager.init"""
    return db_manager.init(database_url=database_url, **kwargs)


def get_engine():
    """获取数据库引擎"""
    return db_manager.engine


@contextmanager
def db_session_scope() -> Generator[Session, None, None]:
    """会话上下文管理器

    正常退出时提交，异常时回滚并重新抛出，最终移除 session。

    使用示例:
        with db_session_scope() as session:
            Banner.reorder([3, 1, 2])
    """
    session = db_manager.get_session()
    try:
        yield session
        session.commit()
    except Exception:
        _logger.warning("会话内发生异常，已回滚", exc_info=True)
        session.rollback()
        raise
    finally:
        db_manager.remove_session()
