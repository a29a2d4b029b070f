"""实体排序引擎

为一组实体重新分配整数排序号，使存储顺序符合比较器给出的顺序，
同时保持"冻结"实体（置顶行、手工固定的条目等）的排序号不变。

算法概要:
    1. 按 can_be_sorted 把实体分为可移动 / 冻结两组
    2. 没有冻结实体: 按比较器排序，从 start 开始按 increment 依次编号
    3. 有冻结实体: 冻结实体按当前排序号排序得到锚点序列，
       全部实体（可移动 + 冻结）按比较器排序
    4. 如果每一段连续的可移动实体都能放进相邻锚点之间的整数间隙，
       就在间隙内均匀分布；最后一个锚点之后的实体从该锚点起按 increment 递增
    5. 放不下时，可移动实体按比较器顺序从 max(锚点) + increment 开始依次编号

排序引擎只修改返回列表中的实体，冻结实体永远不会被修改。
返回列表就是需要持久化的"已变更实体"列表。

使用示例:
    from ysort import EntitySorter

    sorter = EntitySorter()
    changed = sorter.sort_entities(
        rows,
        lambda a, b: (a.title > b.title) - (a.title < b.title),
        can_be_sorted=lambda row: not row.pinned,
    )
    for row in changed:
        session.add(row)
"""

from typing import Any, Iterable, List, Optional, Sequence, Set

from ysort.config import SorterSettings
from ysort.exceptions import SortValidationError
from ysort.log import get_logger
from .helpers import (
    Comparator,
    Predicate,
    is_there_at_least_one_entity_that,
    partition_entities,
    order_by_comparator,
    order_by_sort_numbers,
    get_sort_numbers_of_entities,
    gap_bounds,
    gap_size,
    spread_in_gap,
    assign_sequence,
)
from .protocols import SortableEntity, is_sortable_entity

logger = get_logger()


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


class EntitySorter:
    """实体排序引擎

    实例本身不保存任何可变状态，可以在多个线程间共享；
    但并发调用不能操作同一批实体。

    Attributes:
        default_start: 未指定 start 时使用的起始排序号
        default_increment: 未指定 increment 时使用的步长
    """

    def __init__(self, default_start: int = 1, default_increment: int = 1):
        self.default_start = default_start
        self.default_increment = default_increment

    @classmethod
    def from_settings(cls, settings: Optional[SorterSettings] = None) -> "EntitySorter":
        """根据配置创建排序引擎

        Args:
            settings: 排序配置，None 时从环境变量读取
        """
        settings = settings or SorterSettings()
        return cls(
            default_start=settings.default_start,
            default_increment=settings.default_increment,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"default_start={self.default_start!r}, "
            f"default_increment={self.default_increment!r})"
        )

    # ==================== 公共方法 ====================

    def sort_entities(
        self,
        entities: Iterable[SortableEntity],
        comparator: Comparator,
        can_be_sorted: Optional[Predicate] = None,
        start: Optional[int] = None,
        increment: Optional[int] = None,
    ) -> List[SortableEntity]:
        """重新计算实体排序号

        Args:
            entities: 待排序实体集合
            comparator: 比较函数 comparator(a, b)，返回负数/0/正数
            can_be_sorted: 判断实体是否可以移动，None 表示全部可移动
            start: 起始排序号，None 时使用 default_start
            increment: 排序号步长，None 时使用 default_increment

        Returns:
            排序号被修改过的实体列表（按比较器顺序）。
            注意：返回列表可能比输入少，冻结实体不会出现在其中。

        Raises:
            SortValidationError: start / increment 不是正整数，或存在不满足
                SortableEntity 协议的元素。抛出时没有任何实体被修改。
        """
        entities = list(entities)
        if not entities:
            return []

        start = self.default_start if start is None else start
        increment = self.default_increment if increment is None else increment
        self._assert_params_valid(entities, increment, start)

        if can_be_sorted is None:
            movable, frozen = entities, []
        else:
            movable, frozen = partition_entities(entities, can_be_sorted)
            if not movable:
                logger.debug("No movable entity among %d, nothing to renumber", len(entities))
                return []

        if not frozen:
            ordered = order_by_comparator(entities, comparator)
            assign_sequence(ordered, start, increment)
            logger.debug(
                "Renumbered %d entities sequentially from %d by %d",
                len(ordered), start, increment
            )
            return ordered

        anchors = get_sort_numbers_of_entities(order_by_sort_numbers(frozen))
        ordered = order_by_comparator(entities, comparator)
        movable_ids = {id(entity) for entity in movable}

        logger.debug(
            "Renumbering %d movable entities around %d frozen anchors %s",
            len(movable), len(frozen), anchors
        )

        if self._can_put_between_frozen(ordered, movable_ids, anchors):
            changed = self._put_between_frozen(ordered, movable_ids, anchors, increment)
            logger.debug("Placed %d movable entities into anchor gaps", len(changed))
            return changed

        changed = [entity for entity in ordered if id(entity) in movable_ids]
        max_sort = max(anchors)
        assign_sequence(changed, max_sort + increment, increment)
        logger.debug(
            "Anchor gaps too small, appended %d movable entities after %d",
            len(changed), max_sort
        )
        return changed

    def is_there_at_least_one_entity_that(
        self,
        predicate: Predicate,
        entities: Iterable[Any]
    ) -> bool:
        """判断是否至少有一个实体满足条件"""
        return is_there_at_least_one_entity_that(predicate, entities)

    # ==================== 内部方法 ====================

    @staticmethod
    def _assert_params_valid(entities: Sequence[Any], increment: Any, start: Any) -> None:
        """校验参数，全部通过后才允许修改实体"""
        if not _is_positive_int(increment):
            raise SortValidationError.for_argument("increment", increment)

        if not _is_positive_int(start):
            raise SortValidationError.for_argument("start", start)

        for index, entity in enumerate(entities):
            if not is_sortable_entity(entity):
                raise SortValidationError.for_entity(index, entity)

    @staticmethod
    def _can_put_between_frozen(
        ordered: Sequence[SortableEntity],
        movable_ids: Set[int],
        anchors: Sequence[int]
    ) -> bool:
        """判断每段连续的可移动实体能否放进相邻锚点之间的间隙

        最后一个锚点之后的可移动实体不参与判断。
        """
        total = len(anchors)
        pending = passed = 0

        for entity in ordered:
            if id(entity) in movable_ids:
                pending += 1
                continue

            if pending > 0:
                prev_sort, next_sort = gap_bounds(anchors, passed)

                if prev_sort >= next_sort:
                    logger.debug("No room between anchors %d and %d", prev_sort, next_sort)
                    return False

                gap = gap_size(prev_sort, next_sort)
                if pending > gap:
                    logger.debug(
                        "%d entities do not fit into gap of %d between %d and %d",
                        pending, gap, prev_sort, next_sort
                    )
                    return False

                pending = 0

            passed += 1
            if passed == total:
                break

        return True

    @staticmethod
    def _put_between_frozen(
        ordered: Sequence[SortableEntity],
        movable_ids: Set[int],
        anchors: Sequence[int],
        increment: int
    ) -> List[SortableEntity]:
        """把可移动实体分布到锚点间隙中，返回被修改的实体"""
        total = len(anchors)
        passed = 0
        last_sort = None
        group: List[SortableEntity] = []
        changed: List[SortableEntity] = []

        for entity in ordered:
            movable = id(entity) in movable_ids

            # 最后一个锚点之后按步长递增
            if last_sort is not None:
                if movable:
                    last_sort += increment
                    entity.change_sort(last_sort)
                    changed.append(entity)
                continue

            if movable:
                group.append(entity)
                continue

            if group:
                prev_sort, next_sort = gap_bounds(anchors, passed)
                for member, sort in zip(group, spread_in_gap(prev_sort, next_sort, len(group))):
                    member.change_sort(sort)
                changed.extend(group)
                group = []

            passed += 1
            if passed == total:
                last_sort = entity.sort_number()

        return changed


# 模块级默认实例，只读
_default_sorter = EntitySorter()


def renumber(
    entities: Iterable[SortableEntity],
    comparator: Comparator,
    can_be_sorted: Optional[Predicate] = None,
    start: int = 1,
    increment: int = 1,
) -> List[SortableEntity]:
    """重新计算实体排序号（使用默认排序引擎）

    参数与返回值同 EntitySorter.sort_entities()。

    使用示例:
        from ysort import renumber

        changed = renumber(rows, by_title, can_be_sorted=lambda r: not r.pinned)
    """
    return _default_sorter.sort_entities(
        entities,
        comparator,
        can_be_sorted=can_be_sorted,
        start=start,
        increment=increment,
    )


# 与 EntitySorter.sort_entities 同名的模块级入口
sort_entities = renumber


__all__ = [
    "EntitySorter",
    "renumber",
    "sort_entities",
]
