"""
Pytest 公共配置和 Fixtures

提供测试所需的公共资源：
- 内存数据库引擎
- 日志器状态恢复
- 配置缓存清理
"""

import logging

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool


@pytest.fixture(scope="function")
def memory_engine():
    """创建内存数据库引擎

    使用 StaticPool 和 check_same_thread=False 确保所有操作使用同一个连接。
    """
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def restore_logger():
    """测试结束后恢复被 setup_logger 修改过的日志器"""
    saved = {}

    def _remember(name=None):
        _logger = logging.getLogger(name) if name else logging.getLogger()
        if _logger not in saved:
            saved[_logger] = (list(_logger.handlers), _logger.level, _logger.propagate)
        return _logger

    yield _remember

    for _logger, (handlers, level, propagate) in saved.items():
        for handler in _logger.handlers:
            if handler not in handlers:
                handler.close()
        _logger.handlers[:] = handlers
        _logger.setLevel(level)
        _logger.propagate = propagate


@pytest.fixture(autouse=True)
def clear_config_cache():
    """每个测试使用干净的配置缓存"""
    from ysort.config import ConfigLoader

    ConfigLoader.clear_cache()
    yield
    ConfigLoader.clear_cache()
