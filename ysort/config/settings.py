"""
配置模块
提供排序库的默认配置，业务项目可以继承并覆盖
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class SorterSettings(BaseSettings):
    """排序引擎配置

    使用示例:
        from ysort.config import SorterSettings
        from ysort import EntitySorter

        sorter = EntitySorter.from_settings(SorterSettings(default_increment=10))

    配置说明:
        - default_start: 没有冻结锚点时的起始排序号
        - default_increment: 相邻排序号的步长
    """
    default_start: int = Field(default=1, ge=1, description="默认起始排序号")
    default_increment: int = Field(default=1, ge=1, description="默认排序号步长")

    class Config:
        env_prefix = "YSORT_SORTER_"


class LoggingSettings(BaseSettings):
    """日志配置

    使用示例:
        from ysort.config import LoggingSettings
        from ysort.log import setup_root_logger

        log_config = LoggingSettings(level="DEBUG", file_path="logs/sort.log")
        setup_root_logger(config=log_config)
    """
    level: str = Field(default="INFO", description="日志级别")
    file_path: str = Field(default="", description="日志文件路径，为空表示不写文件")
    file_max_bytes: int = Field(default=10 * 1024 * 1024, ge=0, description="单个日志文件最大字节数，0表示不轮转")
    file_backup_count: int = Field(default=5, description="保留的备份文件数量")
    file_encoding: str = Field(default="utf-8", description="文件编码")
    enable_console: bool = Field(default=True, description="是否启用控制台输出")

    class Config:
        env_prefix = "YSORT_LOG_"


class AppSettings(BaseSettings):
    """应用基础配置

    将各子配置类聚合为嵌套结构，业务项目继承后只需添加项目特有的配置项。

    内置子配置及环境变量前缀:
        - sorter:  SorterSettings   (YSORT_SORTER_)
        - logging: LoggingSettings  (YSORT_LOG_)

    使用示例:
        from ysort.config import AppSettings, load_yaml_config

        settings = load_yaml_config("config/settings.yaml", AppSettings)

    优先级（从高到低）: load_yaml_config 的覆盖参数 > 环境变量 > YAML 文件 > 默认值

    YAML 配置示例 (config/settings.yaml):
        sorter:
          default_start: 10
          default_increment: 10
        logging:
          level: "DEBUG"
    """
    sorter: SorterSettings = SorterSettings()
    logging: LoggingSettings = LoggingSettings()
