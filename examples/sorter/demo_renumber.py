"""排序引擎使用示例

演示 renumber / SortableMixin 的使用场景：
1. 普通对象按标题重新编号
2. 置顶记录保持不动，其他记录插入间隙
3. 间隙不足时追加到末尾
4. SQLAlchemy 模型分组重新编号
"""

import sys
from pathlib import Path

# 添加项目根目录到 path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from sqlalchemy import Boolean, Integer, String, create_engine
from sqlalchemy.orm import Mapped, mapped_column, scoped_session, sessionmaker

from ysort import renumber, setup_logger
from ysort.orm import Base, CoreModel, SortFieldMixin, SortableMixin


class Row:
    """最简单的可排序对象"""

    def __init__(self, row_id, title, sort, pinned=False):
        self.row_id = row_id
        self.title = title
        self.sort = sort
        self.pinned = pinned

    def sort_number(self):
        return self.sort

    def change_sort(self, sort):
        self.sort = sort

    def entity_id(self):
        return self.row_id


def by_title(a, b):
    return (a.title > b.title) - (a.title < b.title)


def show(label, rows):
    print(f"{label}: " + ", ".join(f"{row.title}={row.sort}" for row in rows))


# ==================== 示例 1: 全部重新编号 ====================

def demo_sequential():
    rows = [Row(1, "cherry", 3), Row(2, "apple", 1), Row(3, "banana", 7)]
    changed = renumber(rows, by_title, start=10, increment=10)
    show("顺序编号", changed)


# ==================== 示例 2: 置顶记录 + 间隙分布 ====================

def demo_gaps():
    rows = [
        Row(1, "a-pinned", 10, pinned=True),
        Row(2, "m-pinned", 20, pinned=True),
        Row(3, "c", 0),
        Row(4, "b", 0),
        Row(5, "x", 0),
    ]
    changed = renumber(rows, by_title, can_be_sorted=lambda row: not row.pinned)
    show("间隙分布", changed)


# ==================== 示例 3: 间隙不足 ====================

def demo_fallback():
    rows = [
        Row(1, "a-pinned", 10, pinned=True),
        Row(2, "z-pinned", 11, pinned=True),
        Row(3, "c", 0),
        Row(4, "b", 0),
    ]
    changed = renumber(rows, by_title, can_be_sorted=lambda row: not row.pinned)
    show("追加到末尾", changed)


# ==================== 示例 4: ORM 分组 ====================

class Product(CoreModel, SortFieldMixin, SortableMixin):
    """产品模型 - 按分类分组排序"""
    __tablename__ = "demo_product"
    __sort_group_by__ = "category_id"

    category_id: Mapped[int] = mapped_column(Integer, comment="分类ID")
    title: Mapped[str] = mapped_column(String(100), comment="产品名称")
    pinned: Mapped[bool] = mapped_column(Boolean, default=False, comment="是否置顶")


def demo_orm():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    session_scope = scoped_session(sessionmaker(bind=engine))
    CoreModel.query = session_scope.query_property()

    session = session_scope()
    session.add_all([
        Product(category_id=1, title="top", sort_order=1, pinned=True),
        Product(category_id=1, title="pear", sort_order=5),
        Product(category_id=1, title="fig", sort_order=2),
        Product(category_id=2, title="kiwi", sort_order=9),
    ])
    session.commit()

    changed = Product.renumber(
        by_title,
        can_be_sorted=lambda p: not p.pinned,
        group_filters={"category_id": 1},
    )
    session.commit()
    show("ORM 分组", changed)
    show("分类 1", Product.get_sorted({"category_id": 1}))

    session_scope.remove()


if __name__ == "__main__":
    setup_logger("ysort", level="DEBUG")
    demo_sequential()
    demo_gaps()
    demo_fallback()
    demo_orm()
