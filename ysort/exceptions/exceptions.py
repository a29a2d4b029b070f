"""业务异常类定义

定义排序库使用的业务异常类体系。
"""

import copy
from typing import Optional, List, Any, Dict, Union
from fastapi import status
from enum import Enum


class ErrorCode(str, Enum):
    """错误代码枚举

    继承自 str，可以直接作为字符串使用。

    使用示例:
        from ysort.exceptions import ErrorCode, SortValidationError

        try:
            renumber(items, comparator, increment=0)
        except SortValidationError as e:
            if e.code == ErrorCode.INVALID_SORT_PARAMETER:
                ...
    """

    # ==================== 通用错误 ====================
    BUSINESS_ERROR = "BUSINESS_ERROR"
    OPERATION_FAILED = "OPERATION_FAILED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    # ==================== 验证相关 (422) ====================
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PARAMETER = "INVALID_PARAMETER"

    # ==================== 排序相关 (422) ====================
    INVALID_SORT_PARAMETER = "INVALID_SORT_PARAMETER"
    INVALID_SORTABLE_ENTITY = "INVALID_SORTABLE_ENTITY"


# 类型别名，支持枚举和字符串
ErrorCodeType = Union[str, ErrorCode]


class BusinessException(Exception):
    """业务异常基类

    所有业务异常都应该继承此类。

    属性:
        message: 错误消息（面向用户）
        code: 错误代码（用于程序判断，支持 ErrorCode 枚举或字符串）
        status_code: HTTP 状态码
        details: 详细错误信息列表
        extra: 额外的上下文信息

    使用示例:
        raise BusinessException("操作失败", code=ErrorCode.OPERATION_FAILED)

        # 抛出带额外上下文的异常
        raise BusinessException(
            message="排序失败",
            code=ErrorCode.OPERATION_FAILED,
            extra={"group": "banner"}
        )
    """

    def __init__(
        self,
        message: str,
        code: ErrorCodeType = ErrorCode.BUSINESS_ERROR,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[List[str]] = None,
        **extra: Any
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or []
        self.extra = extra
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式

        Returns:
            包含异常信息的字典
        """
        return {
            "message": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "details": copy.deepcopy(self.details),
            "extra": copy.deepcopy(self.extra)
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"status_code={self.status_code})"
        )


class ValidationException(BusinessException):
    """数据验证异常

    当输入数据验证失败时抛出此异常。

    使用示例:
        raise ValidationException(
            "参数无效",
            field="increment",
            details=["increment 必须是大于等于 1 的整数"]
        )
    """

    def __init__(
        self,
        message: str = "数据验证失败",
        code: ErrorCodeType = ErrorCode.VALIDATION_ERROR,
        details: Optional[List[str]] = None,
        **extra: Any
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            **extra
        )


class SortValidationError(ValidationException):
    """排序参数验证异常

    排序引擎唯一的异常类型，在修改任何实体之前抛出。

    extra 中的上下文:
        field: 无效的参数名（"increment"、"start" 或 "entities"）
        value: 无效值的 repr
        index: 无效元素在输入中的位置（仅 field == "entities" 时）
    """

    def __init__(
        self,
        message: str = "排序参数无效",
        code: ErrorCodeType = ErrorCode.INVALID_SORT_PARAMETER,
        details: Optional[List[str]] = None,
        **extra: Any
    ):
        super().__init__(message=message, code=code, details=details, **extra)

    @property
    def field(self) -> Optional[str]:
        """无效的参数名"""
        return self.extra.get("field")

    @classmethod
    def for_argument(cls, field: str, value: Any) -> "SortValidationError":
        """参数不是正整数"""
        return cls(
            f"参数 {field} 无效",
            details=[f"{field} 必须是大于等于 1 的整数，实际为 {value!r}"],
            field=field,
            value=repr(value),
        )

    @classmethod
    def for_entity(cls, index: int, entity: Any) -> "SortValidationError":
        """元素不满足 SortableEntity 协议"""
        return cls(
            "待排序集合中存在无效元素",
            code=ErrorCode.INVALID_SORTABLE_ENTITY,
            details=[
                f"第 {index} 个元素（{type(entity).__name__}）"
                f"缺少 sort_number / change_sort / entity_id 方法"
            ],
            field="entities",
            value=repr(entity),
            index=index,
        )


class Err:
    """异常快捷创建类

    使用示例:
        from ysort.exceptions import Err

        # 数据验证失败 (422)
        raise Err.invalid("数据验证失败", details=["start 不能为 0"])

        # 通用业务异常 (400)
        raise Err.fail("操作失败")
    """

    @staticmethod
    def invalid(message: str = "数据验证失败", **kwargs) -> ValidationException:
        """数据验证失败 (422)

        Args:
            message: 错误消息
            **kwargs: 额外参数（code, details 等）
        """
        return ValidationException(message, **kwargs)

    @staticmethod
    def sort_invalid(field: str, value: Any) -> SortValidationError:
        """排序参数无效 (422)"""
        return SortValidationError.for_argument(field, value)

    @staticmethod
    def fail(message: str = "操作失败", **kwargs) -> BusinessException:
        """通用业务异常 (400)"""
        return BusinessException(message, **kwargs)
