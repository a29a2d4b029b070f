"""排序字段定义

提供排序引擎读写的 sort_order 字段。

SortableMixin 通过该字段实现 sort_number() / change_sort()：
冻结（置顶）行的 sort_order 作为锚点保持不变，
可移动行的 sort_order 由排序引擎重新分配到锚点间隙或最大锚点之后。

使用示例:
    from ysort.orm import CoreModel, SortFieldMixin, SortableMixin

    class Banner(CoreModel, SortFieldMixin, SortableMixin):
        __tablename__ = "banner"

        title = mapped_column(String(100))
        pinned = mapped_column(Boolean, default=False)

    Banner.renumber(by_title, can_be_sorted=lambda b: not b.pinned)
"""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column


class SortFieldMixin:
    """排序字段 Mixin

    字段说明:
        - sort_order: 排序号，默认为 0，值越小越靠前。
          排序引擎只修改可移动行的 sort_order，冻结行的值作为锚点读取。
          按分组查询时需要按该字段排序，因此建立索引。
    """

    sort_order: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
        index=True,
        comment="排序号（冻结行作为重排锚点）"
    )


__all__ = [
    "SortFieldMixin",
]
