"""测试辅助工具模块

提供测试专用的辅助函数和实体。
"""

from .sort_helpers import (
    Row,
    by_title,
    not_pinned,
    make_rows,
    titles,
    sorts,
)

__all__ = [
    "Row",
    "by_title",
    "not_pinned",
    "make_rows",
    "titles",
    "sorts",
]
