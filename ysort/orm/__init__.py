"""ORM 集成模块

让 SQLAlchemy 模型可以直接交给排序引擎处理。

导出:
    - Base / CoreModel: 声明基类与带主键的抽象模型
    - SortFieldMixin: 排序字段 Mixin（提供 sort_order 字段）
    - SortableMixin: 排序管理 Mixin（实现 SortableEntity 协议，提供 renumber）
"""

from .core_model import Base, CoreModel
from .sortable_fields import SortFieldMixin
from .sortable_mixin import SortableMixin

__all__ = [
    "Base",
    "CoreModel",
    "SortFieldMixin",
    "SortableMixin",
]
