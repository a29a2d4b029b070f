"""异常处理模块

提供业务异常类、排序参数验证异常、全局异常处理器等功能。

使用示例:
    from ysort.exceptions import SortValidationError, register_exception_handlers

    # 在 FastAPI 应用中注册异常处理器
    app = FastAPI()
    register_exception_handlers(app)

    @router.post("/banners/reorder")
    def reorder(start: int = 1):
        # start 无效时 SortValidationError 会被转换为 422 响应
        changed = renumber(banners, by_title, start=start)
        return {"changed": len(changed)}
"""

from .exceptions import (
    Err,
    ErrorCode,
    ErrorCodeType,
    BusinessException,
    ValidationException,
    SortValidationError,
)

from .handlers import (
    register_exception_handlers,
    business_exception_handler,
    general_exception_handler,
)

__all__ = [
    "Err",
    "ErrorCode",
    "ErrorCodeType",
    "BusinessException",
    "ValidationException",
    "SortValidationError",
    "register_exception_handlers",
    "business_exception_handler",
    "general_exception_handler",
]
