"""排序字段定义

提供标准的排序字段定义 Mixin，简化模型定义。

使用示例:
    from sortkit.orm import CoreModel
    from sortkit.sortable import SortFieldMixin, SortableMixin

    class Banner(CoreModel, SortFieldMixin, SortableMixin):
        __tablename__ = "banner"

        title = mapped_column(String(100))
        # order_column 字段由 SortFieldMixin 自动提供
"""

from typing import Optional

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column


class SortFieldMixin:
    """排序字段 Mixin

    字段说明:
        - order_column: 排序序号，值越小越靠前。新建时为空，
          由 sort_when_creating 钩子在 flush 前填入最大值 + 1

    排序号不要求连续或唯一。
    """

    order_column: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        index=True,
        comment="排序序号"
    )


__all__ = [
    "SortFieldMixin",
]
