"""ysort - 实体排序号重排库

为一组实体重新分配整数排序号，同时保持冻结实体的位置不变。

快速开始:
    from ysort import renumber

    changed = renumber(
        rows,
        lambda a, b: (a.title > b.title) - (a.title < b.title),
        can_be_sorted=lambda row: not row.pinned,
    )
    # changed 中的实体排序号已被修改，需要由调用方持久化
"""

__version__ = "0.1.0"

from .sorter import (
    EntitySorter,
    SortableEntity,
    is_sortable_entity,
    renumber,
    sort_entities,
)

from .exceptions import (
    Err,
    ErrorCode,
    BusinessException,
    ValidationException,
    SortValidationError,
    register_exception_handlers,
)

from .config import (
    AppSettings,
    SorterSettings,
    LoggingSettings,
    load_yaml_config,
)

from .log import get_logger, setup_logger

__all__ = [
    "__version__",
    # 排序引擎
    "EntitySorter",
    "SortableEntity",
    "is_sortable_entity",
    "renumber",
    "sort_entities",
    # 异常
    "Err",
    "ErrorCode",
    "BusinessException",
    "ValidationException",
    "SortValidationError",
    "register_exception_handlers",
    # 配置
    "AppSettings",
    "SorterSettings",
    "LoggingSettings",
    "load_yaml_config",
    # 日志
    "get_logger",
    "setup_logger",
]
