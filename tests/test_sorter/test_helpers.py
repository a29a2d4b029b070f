"""排序引擎辅助函数测试"""

import pytest

from ysort.sorter import SortableEntity, is_sortable_entity
from ysort.sorter.helpers import (
    assign_sequence,
    find_next_sort_number,
    gap_bounds,
    gap_size,
    is_there_at_least_one_entity_that,
    order_by_comparator,
    order_by_sort_numbers,
    partition_entities,
    spread_in_gap,
)
from tests.helpers import Row, by_title, make_rows, titles, sorts


class TestSpreadInGap:
    """间隙内均匀分布"""

    @pytest.mark.parametrize("prev_sort, next_sort, count, expected", [
        (10, 20, 1, [15]),
        (0, 10, 2, [3, 7]),
        (0, 10, 3, [3, 5, 8]),
        (10, 14, 3, [11, 12, 13]),
        (0, 3, 1, [2]),
        (100, 109, 7, [101, 102, 103, 105, 106, 107, 108]),
    ])
    def test_values(self, prev_sort, next_sort, count, expected):
        """测试四舍五入（0.5 向上）后的分布结果"""
        assert spread_in_gap(prev_sort, next_sort, count) == expected

    def test_no_duplicates_when_group_fits(self):
        """测试数量不超过间隙时不会产生重复值"""
        for span in range(2, 40):
            for count in range(1, span):
                values = spread_in_gap(0, span, count)
                assert len(set(values)) == count
                assert all(0 < value < span for value in values)

    def test_empty_group(self):
        """测试数量为 0 时返回空列表"""
        assert spread_in_gap(0, 10, 0) == []


class TestAnchorGaps:
    """锚点间隙计算"""

    def test_find_next_sort_number(self):
        """测试跳过重复锚点查找下一个更大的值"""
        anchors = [5, 10, 10, 10, 20]

        assert find_next_sort_number(anchors, 1) == 10
        assert find_next_sort_number(anchors, 2) == 20
        assert find_next_sort_number(anchors, 4) == 20

    def test_find_next_sort_number_without_larger_value(self):
        """测试后面没有不同值时返回当前锚点"""
        assert find_next_sort_number([5, 10, 10], 2) == 10
        assert find_next_sort_number([5, 10], 2) == 10

    def test_gap_bounds(self):
        """测试间隙边界"""
        anchors = [4, 8, 8, 15]

        assert gap_bounds(anchors, 0) == (0, 4)
        assert gap_bounds(anchors, 1) == (4, 8)
        assert gap_bounds(anchors, 2) == (8, 15)
        assert gap_bounds(anchors, 3) == (8, 15)

    def test_gap_size(self):
        """测试间隙大小"""
        assert gap_size(10, 20) == 9
        assert gap_size(10, 11) == 0


class TestOrdering:
    """排序与分组"""

    def test_order_by_sort_numbers_breaks_ties_by_id(self):
        """测试排序号相同时按 entity_id 排序"""
        rows = [Row(2, sort=5), Row(1, sort=5), Row(9, sort=3)]

        ordered = order_by_sort_numbers(rows)

        assert [row.row_id for row in ordered] == [9, 1, 2]

    def test_order_by_comparator_returns_copy(self):
        """测试按比较器排序返回新列表"""
        rows = make_rows(("b", 0), ("a", 0))

        ordered = order_by_comparator(rows, by_title)

        assert titles(ordered) == ["a", "b"]
        assert titles(rows) == ["b", "a"]

    def test_partition_entities(self):
        """测试分组保持原有顺序，条件只求值一次"""
        rows = make_rows(("a", 1, True), ("b", 2), ("c", 3, True), ("d", 4))
        calls = []

        def predicate(row):
            calls.append(row)
            return not row.pinned

        movable, frozen = partition_entities(rows, predicate)

        assert titles(movable) == ["b", "d"]
        assert titles(frozen) == ["a", "c"]
        assert calls == rows

    def test_is_there_at_least_one_entity_that(self):
        """测试找到第一个满足条件的实体后停止"""
        calls = []

        def predicate(value):
            calls.append(value)
            return value > 1

        assert is_there_at_least_one_entity_that(predicate, [1, 2, 3])
        assert calls == [1, 2]

    def test_assign_sequence(self):
        """测试顺序赋值"""
        rows = make_rows(("a", 0), ("b", 0), ("c", 0))

        assign_sequence(rows, 7, 3)

        assert sorts(rows) == [7, 10, 13]


class TestSortableEntityProtocol:
    """SortableEntity 协议"""

    def test_duck_typed_entity(self):
        """测试实现三个方法的对象满足协议"""
        assert isinstance(Row(1), SortableEntity)
        assert is_sortable_entity(Row(1))

    def test_missing_methods(self):
        """测试缺少方法的对象不满足协议"""

        class OnlyReads:
            def sort_number(self):
                return 1

        assert not is_sortable_entity(object())
        assert not is_sortable_entity(OnlyReads())
        assert not is_sortable_entity(None)
