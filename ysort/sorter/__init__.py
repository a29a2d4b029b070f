"""排序引擎模块

导出:
    - EntitySorter: 排序引擎
    - renumber: 使用默认排序引擎重新编号
    - sort_entities: renumber 的别名
    - SortableEntity: 可排序实体协议

使用示例:
    from ysort.sorter import renumber

    # 置顶行保持原排序号，其他行按标题排序后插入间隙
    changed = renumber(
        rows,
        lambda a, b: (a.title > b.title) - (a.title < b.title),
        can_be_sorted=lambda row: not row.pinned,
        start=10,
        increment=10,
    )
"""

from .protocols import SortableEntity, is_sortable_entity
from .entity_sorter import EntitySorter, renumber, sort_entities

__all__ = [
    "SortableEntity",
    "is_sortable_entity",
    "EntitySorter",
    "renumber",
    "sort_entities",
]
