"""ORM 基础模型

提供声明基类和带自增主键的抽象模型。

使用说明:
    query 属性需要在创建 scoped_session 后设置:

        SessionLocal = sessionmaker(bind=engine)
        session_scope = scoped_session(SessionLocal)
        CoreModel.query = session_scope.query_property()
"""

from typing import ClassVar, Optional

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, Query, declarative_base, mapped_column


# 声明基类
Base = declarative_base()


class CoreModel(Base):
    """模型基类

    提供功能：
    - 自增整数主键 id
    - 类级别 query 属性（由 scoped_session.query_property() 提供）
    """
    __abstract__ = True

    query: ClassVar[Optional[Query]] = None

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self):
        return f"<{self.__class__.__name__}(id={self.id})>"
