"""排序管理 Mixin

让 SQLAlchemy 模型满足 SortableEntity 协议，并提供按组重新编号的能力。
只修改内存中的对象，提交由调用方负责。

使用示例:
    from ysort.orm import CoreModel, SortFieldMixin, SortableMixin

    # 分组排序（同一分类内排序）
    class Product(CoreModel, SortFieldMixin, SortableMixin):
        __tablename__ = "product"
        __sort_group_by__ = "category_id"

        category_id = mapped_column(Integer)
        name = mapped_column(String(100))
        pinned = mapped_column(Boolean, default=False)

    changed = Product.renumber(
        lambda a, b: (a.name > b.name) - (a.name < b.name),
        can_be_sorted=lambda p: not p.pinned,
        group_filters={"category_id": 1},
    )
    session.commit()
"""

from typing import Any, Callable, List, Optional, Union

from ysort.log import get_logger
from ysort.sorter import EntitySorter

logger = get_logger()


class SortableMixin:
    """排序管理 Mixin

    字段要求（使用者需定义或使用 SortFieldMixin）:
        - sort_order: int  排序序号
        - id: 主键，作为 entity_id()

    可配置属性（子类可覆盖）:
        - __sort_field__: 排序字段名，默认 "sort_order"
        - __sort_group_by__: 分组字段，默认 None（不分组）
            - 字符串: 单字段分组，如 "category_id"
            - 列表: 多字段分组，如 ["category_id", "status"]
        - __sorter__: 使用的排序引擎，默认 EntitySorter()
    """

    # ==================== 配置 ====================

    # 排序字段名（子类可覆盖）
    __sort_field__: str = "sort_order"

    # 分组字段（子类可覆盖）
    __sort_group_by__: Union[str, List[str], None] = None

    __sorter__: Optional[EntitySorter] = None

    # ==================== SortableEntity 协议 ====================

    def sort_number(self) -> int:
        """当前排序号，未设置时视为 0"""
        field_name = getattr(self.__class__, '__sort_field__', 'sort_order')
        return getattr(self, field_name, 0) or 0

    def change_sort(self, sort: int) -> None:
        """设置排序号"""
        field_name = getattr(self.__class__, '__sort_field__', 'sort_order')
        setattr(self, field_name, sort)

    def entity_id(self) -> Any:
        """实体标识（主键）"""
        return self.id

    # ==================== 内部方法 ====================

    @classmethod
    def _get_sort_field_column(cls):
        """获取排序字段的 Column 对象"""
        field_name = getattr(cls, '__sort_field__', 'sort_order')
        return getattr(cls, field_name)

    @classmethod
    def _get_group_fields(cls) -> List[str]:
        """获取分组字段列表"""
        group_by = getattr(cls, '__sort_group_by__', None)
        if not group_by:
            return []
        if isinstance(group_by, str):
            return [group_by]
        return list(group_by)

    def _get_group_filters(self) -> dict:
        """获取分组过滤条件（基于当前实例的值）"""
        return {field: getattr(self, field) for field in self._get_group_fields()}

    @classmethod
    def _build_group_query(cls, group_filters: dict = None):
        """构建带分组过滤条件的查询

        Args:
            group_filters: 分组过滤条件，None 表示不过滤

        Returns:
            SQLAlchemy 查询对象
        """
        query = cls.query

        for field, value in (group_filters or {}).items():
            column = getattr(cls, field)
            if value is None:
                query = query.filter(column.is_(None))
            else:
                query = query.filter(column == value)

        return query

    @classmethod
    def _get_sorter(cls) -> EntitySorter:
        return getattr(cls, '__sorter__', None) or EntitySorter()

    # ==================== 类方法 ====================

    @classmethod
    def get_sorted(cls, group_filters: dict = None, desc: bool = False):
        """获取按排序号排序的记录列表

        Args:
            group_filters: 分组过滤条件
            desc: 是否降序

        Returns:
            排序后的记录列表

        Example:
            products = Product.get_sorted({"category_id": 1})
        """
        sort_field = cls._get_sort_field_column()
        query = cls._build_group_query(group_filters)

        if desc:
            query = query.order_by(sort_field.desc(), cls.id.desc())
        else:
            query = query.order_by(sort_field, cls.id)

        return query.all()

    @classmethod
    def get_max_sort_order(cls, group_filters: dict = None) -> int:
        """获取最大排序号，无记录返回 0"""
        from sqlalchemy import func

        query = cls._build_group_query(group_filters)
        result = query.with_entities(func.max(cls._get_sort_field_column())).scalar()
        return result or 0

    @classmethod
    def renumber(
        cls,
        comparator: Callable[[Any, Any], int],
        can_be_sorted: Optional[Callable[[Any], bool]] = None,
        group_filters: dict = None,
        start: Optional[int] = None,
        increment: Optional[int] = None,
    ) -> list:
        """按比较器重新编号一组记录

        加载 group_filters 指定的记录交给排序引擎，返回排序号被修改的记录。
        不会提交事务。

        Args:
            comparator: 比较函数，返回负数/0/正数
            can_be_sorted: 判断记录是否可以移动，None 表示全部可移动
            group_filters: 分组过滤条件
            start: 起始排序号，None 时使用排序引擎默认值
            increment: 排序号步长，None 时使用排序引擎默认值

        Returns:
            排序号被修改过的记录列表

        Raises:
            SortValidationError: start / increment 无效

        Example:
            changed = Banner.renumber(by_title, can_be_sorted=lambda b: not b.pinned)
            session.commit()
        """
        items = cls._build_group_query(group_filters).all()
        changed = cls._get_sorter().sort_entities(
            items,
            comparator,
            can_be_sorted=can_be_sorted,
            start=start,
            increment=increment,
        )
        logger.debug(
            "Renumbered %d of %d %s rows (group=%s)",
            len(changed), len(items), cls.__name__, group_filters
        )
        return changed

    # ==================== 实例方法 ====================

    def renumber_siblings(
        self,
        comparator: Callable[[Any, Any], int],
        can_be_sorted: Optional[Callable[[Any], bool]] = None,
        start: Optional[int] = None,
        increment: Optional[int] = None,
    ) -> list:
        """重新编号当前记录所在分组（包含自己）

        Example:
            product = Product.query.get(1)
            product.renumber_siblings(by_name)
            session.commit()
        """
        return self.__class__.renumber(
            comparator,
            can_be_sorted=can_be_sorted,
            group_filters=self._get_group_filters(),
            start=start,
            increment=increment,
        )


__all__ = [
    "SortableMixin",
]
