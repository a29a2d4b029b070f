"""全局异常处理器

提供 FastAPI 全局异常处理器，把业务异常（包括排序参数验证失败）
转换为统一的 JSON 响应格式。
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
import traceback
import sys
import os

from ysort.log import get_logger
from .exceptions import BusinessException, ErrorCode

# 创建日志记录器
logger = get_logger()

STATUS_ERROR = "error"


def _is_debug() -> bool:
    return os.getenv("DEBUG", "false").lower() == "true"


async def business_exception_handler(
    request: Request,
    exc: BusinessException
) -> JSONResponse:
    """业务异常处理器

    处理所有继承自 BusinessException 的异常，转换为统一的 JSON 响应。

    Args:
        request: FastAPI 请求对象
        exc: 业务异常实例

    Returns:
        JSON 响应
    """
    request_id = getattr(request.state, "request_id", "unknown")

    logger.warning(
        f"Business exception occurred: {exc.code} - {exc.message}",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "error_code": exc.code,
            "status_code": exc.status_code,
            "details": exc.details,
            "extra": exc.extra
        }
    )

    content = {
        "status": STATUS_ERROR,
        "message": exc.message,
        "msg_details": exc.details,
        "data": {}
    }

    if exc.code:
        content["error_code"] = exc.code

    # 调试模式下附带上下文
    if _is_debug() and exc.extra:
        content["debug_info"] = exc.extra

    return JSONResponse(
        status_code=exc.status_code,
        content=content
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """通用异常处理器

    捕获所有未被其他处理器处理的异常，记录完整堆栈信息，
    不向调用方暴露原始异常。

    Args:
        request: FastAPI 请求对象
        exc: 异常实例

    Returns:
        JSON 响应
    """
    request_id = getattr(request.state, "request_id", "unknown")

    exc_type, exc_value, exc_traceback = sys.exc_info()
    tb_lines = traceback.format_exception(exc_type, exc_value, exc_traceback)

    logger.error(
        f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
            "traceback": "".join(tb_lines)
        }
    )

    content = {
        "status": STATUS_ERROR,
        "message": "服务器内部错误",
        "msg_details": [],
        "data": {},
        "error_code": ErrorCode.INTERNAL_SERVER_ERROR.value
    }

    if _is_debug():
        content["msg_details"] = [
            f"异常类型: {type(exc).__name__}",
            f"异常消息: {str(exc)}"
        ]

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content
    )


def register_exception_handlers(app) -> None:
    """注册异常处理器到 FastAPI 应用

    1. BusinessException - 业务异常处理器（SortValidationError 返回 422）
    2. Exception - 通用异常处理器（兜底）

    使用示例:
        from fastapi import FastAPI
        from ysort.exceptions import register_exception_handlers

        app = FastAPI()
        register_exception_handlers(app)

    Args:
        app: FastAPI 应用实例
    """
    app.add_exception_handler(BusinessException, business_exception_handler)

    # 兜底处理器必须放在最后
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Exception handlers registered successfully")
