"""排序引擎辅助函数

提供排序引擎使用的纯函数：
- 实体过滤与分组
- 按比较器 / 按排序号排序
- 锚点间隙计算
- 间隙内均匀分布排序号

这些函数不记录日志、不抛业务异常，只做计算。
"""

import functools
from typing import Any, Callable, Iterable, List, Sequence, Tuple

from .protocols import SortableEntity

Comparator = Callable[[Any, Any], int]
Predicate = Callable[[Any], bool]


# ==================== 过滤与分组 ====================

def is_there_at_least_one_entity_that(predicate: Predicate, entities: Iterable[Any]) -> bool:
    """判断是否至少有一个实体满足条件

    Args:
        predicate: 判断函数
        entities: 实体集合

    Returns:
        存在满足条件的实体返回 True
    """
    for entity in entities:
        if predicate(entity):
            return True
    return False


def partition_entities(
    entities: Iterable[Any],
    predicate: Predicate
) -> Tuple[List[Any], List[Any]]:
    """按条件把实体拆成两组，各组保持原有顺序

    Args:
        entities: 实体集合
        predicate: 判断函数，每个实体只调用一次

    Returns:
        (满足条件的实体, 不满足条件的实体)
    """
    matching, rest = [], []
    for entity in entities:
        if predicate(entity):
            matching.append(entity)
        else:
            rest.append(entity)
    return matching, rest


# ==================== 排序 ====================

def order_by_comparator(entities: Iterable[Any], comparator: Comparator) -> List[Any]:
    """按比较器排序，返回新列表

    比较器返回负数/0/正数，排序是稳定的，相等元素保持输入顺序。
    """
    return sorted(entities, key=functools.cmp_to_key(comparator))


def order_by_sort_numbers(entities: Iterable[SortableEntity]) -> List[SortableEntity]:
    """按当前排序号升序排序，排序号相同时按 entity_id() 排序"""
    return sorted(entities, key=lambda entity: (entity.sort_number(), entity.entity_id()))


def get_sort_numbers_of_entities(entities: Iterable[SortableEntity]) -> List[int]:
    """提取实体的排序号列表"""
    return [entity.sort_number() for entity in entities]


# ==================== 间隙计算 ====================

def find_next_sort_number(anchors: Sequence[int], passed: int) -> int:
    """查找 anchors[passed - 1] 之后第一个不同的锚点值

    Args:
        anchors: 升序排列的锚点排序号
        passed: 已经越过的锚点数量（>= 1）

    Returns:
        下一个不同的锚点值；后面全部相同时返回 anchors[passed - 1]
    """
    last_sort = anchors[passed - 1]
    for next_sort in anchors[passed:]:
        if next_sort != last_sort:
            return next_sort
    return last_sort


def gap_bounds(anchors: Sequence[int], passed: int) -> Tuple[int, int]:
    """计算当前间隙的上下边界

    Args:
        anchors: 升序排列的锚点排序号
        passed: 已经越过的锚点数量

    Returns:
        (prev_sort, next_sort)，第一个间隙的下边界为 0
    """
    if passed == 0:
        return 0, anchors[0]
    return anchors[passed - 1], find_next_sort_number(anchors, passed)


def gap_size(prev_sort: int, next_sort: int) -> int:
    """两个锚点之间可用的整数个数"""
    return next_sort - prev_sort - 1


def spread_in_gap(prev_sort: int, next_sort: int, count: int) -> List[int]:
    """在 (prev_sort, next_sort) 之间均匀分布 count 个排序号

    第 k 个值为 prev_sort + k * (next_sort - prev_sort) / (count + 1)，
    四舍五入（0.5 向上）取整。使用整数运算，不受浮点误差影响。

    Example:
        spread_in_gap(10, 20, 1)  # [15]
        spread_in_gap(0, 10, 3)   # [3, 5, 8]
    """
    span = next_sort - prev_sort
    parts = count + 1
    return [
        prev_sort + (2 * k * span + parts) // (2 * parts)
        for k in range(1, count + 1)
    ]


# ==================== 赋值 ====================

def assign_sequence(entities: Iterable[SortableEntity], start: int, increment: int) -> None:
    """从 start 开始按 increment 递增依次设置排序号"""
    sort = start
    for entity in entities:
        entity.change_sort(sort)
        sort += increment


__all__ = [
    "Comparator",
    "Predicate",
    "is_there_at_least_one_entity_that",
    "partition_entities",
    "order_by_comparator",
    "order_by_sort_numbers",
    "get_sort_numbers_of_entities",
    "find_next_sort_number",
    "gap_bounds",
    "gap_size",
    "spread_in_gap",
    "assign_sequence",
]
