"""可排序实体协议

定义排序引擎所需的实体能力。

任何提供以下三个方法的对象都可以交给排序引擎处理，无需继承任何基类:
    - sort_number(): 读取当前排序号
    - change_sort(sort): 写入新的排序号（排序引擎唯一的修改操作）
    - entity_id(): 实体标识，仅用于排序号相同时的确定性比较

使用示例:
    class Row:
        def __init__(self, row_id: int, sort: int):
            self._id = row_id
            self._sort = sort

        def sort_number(self) -> int:
            return self._sort

        def change_sort(self, sort: int) -> None:
            self._sort = sort

        def entity_id(self) -> int:
            return self._id

    isinstance(Row(1, 10), SortableEntity)  # True
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SortableEntity(Protocol):
    """可排序实体协议

    排序引擎只读取 sort_number()，只调用 change_sort() 修改实体，
    entity_id() 的返回值之间必须可以用 < 比较。
    """

    def sort_number(self) -> int: ...

    def change_sort(self, sort: int) -> None: ...

    def entity_id(self) -> Any: ...


def is_sortable_entity(obj: Any) -> bool:
    """检查对象是否满足 SortableEntity 协议"""
    return isinstance(obj, SortableEntity)


__all__ = [
    "SortableEntity",
    "is_sortable_entity",
]
