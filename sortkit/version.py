"""版本信息"""

__version__ = "0.1.0"
__author__ = "sortkit contributors"
__description__ = "SQLAlchemy 模型排序管理：排序号维护、批量重排、上移下移"
