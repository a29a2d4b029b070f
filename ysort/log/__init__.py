"""日志模块

提供日志配置与获取功能。

使用示例:
    from ysort.log import setup_logger, get_logger

    # 打开排序引擎的调试日志
    setup_logger("ysort", level="DEBUG")

    # 在模块中获取日志记录器（自动推断模块名）
    logger = get_logger()
"""

from .logger import (
    setup_logger,
    setup_root_logger,
    create_formatter,
    MicrosecondFormatter,
    DEFAULT_LOG_FORMAT,
    get_logger,
)

__all__ = [
    "setup_logger",
    "setup_root_logger",
    "create_formatter",
    "MicrosecondFormatter",
    "DEFAULT_LOG_FORMAT",
    "get_logger",
]
