"""配置加载器模块

提供从 YAML 文件加载配置的功能。

使用示例:
    from ysort.config import ConfigLoader, AppSettings, load_yaml_config

    # 加载配置字典
    config = ConfigLoader.load("config/settings.yaml")

    # 使用 Pydantic Settings
    settings = load_yaml_config("config/settings.yaml", AppSettings)
"""

import os
from typing import Dict, Any, Optional, Set, Type, TypeVar

import yaml
from pydantic_settings import BaseSettings


T = TypeVar("T")


class ConfigLoader:
    """配置加载器

    从 YAML 文件加载配置，按绝对路径缓存。

    使用示例:
        config = ConfigLoader.load("config/settings.yaml")
        start = config.get("sorter", {}).get("default_start")

        # 重新加载配置
        config = ConfigLoader.reload("config/settings.yaml")

        # 清除缓存
        ConfigLoader.clear_cache()
    """

    _cache: Dict[str, Dict[str, Any]] = {}

    @staticmethod
    def _resolve_path(config_path: str, base_dir: Optional[str] = None) -> str:
        if os.path.isabs(config_path):
            return config_path
        if base_dir:
            return os.path.join(base_dir, config_path)
        return os.path.abspath(config_path)

    @classmethod
    def load(
        cls,
        config_path: str,
        base_dir: Optional[str] = None,
        use_cache: bool = True
    ) -> Dict[str, Any]:
        """加载配置文件

        Args:
            config_path: 配置文件路径（相对或绝对路径）
            base_dir: 基础目录，用于解析相对路径
            use_cache: 是否使用缓存

        Returns:
            配置字典

        Raises:
            FileNotFoundError: 配置文件不存在
            yaml.YAMLError: YAML 解析错误
        """
        abs_path = cls._resolve_path(config_path, base_dir)

        if use_cache and abs_path in cls._cache:
            return cls._cache[abs_path]

        if not os.path.exists(abs_path):
            raise FileNotFoundError(f"配置文件不存在: {abs_path}")

        with open(abs_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        if use_cache:
            cls._cache[abs_path] = config

        return config

    @classmethod
    def reload(cls, config_path: str, base_dir: Optional[str] = None) -> Dict[str, Any]:
        """重新加载配置文件（忽略缓存）"""
        cls._cache.pop(cls._resolve_path(config_path, base_dir), None)
        return cls.load(config_path, base_dir, use_cache=True)

    @classmethod
    def clear_cache(cls):
        """清除所有配置缓存"""
        cls._cache.clear()


def _env_field_names(settings_class: Type[BaseSettings]) -> Set[str]:
    """返回已被环境变量设置的字段名"""
    prefix = settings_class.model_config.get("env_prefix", "")
    if settings_class.model_config.get("case_sensitive", False):
        return {name for name in settings_class.model_fields if f"{prefix}{name}" in os.environ}

    environ = {key.upper() for key in os.environ}
    return {
        name for name in settings_class.model_fields
        if f"{prefix}{name}".upper() in environ
    }


def _apply_env_precedence(settings_class: Type[T], config: Dict[str, Any]) -> Dict[str, Any]:
    """让环境变量优先于 YAML 中的值

    顶层字段中被环境变量设置的键直接丢弃；嵌套的 BaseSettings 子配置
    在丢弃同样的键后单独实例化，缺失的键由子配置自己从环境变量读取。
    """
    if not (isinstance(settings_class, type) and issubclass(settings_class, BaseSettings)):
        return config

    env_names = _env_field_names(settings_class)
    merged = {key: value for key, value in config.items() if key not in env_names}

    for name, field in settings_class.model_fields.items():
        section_class = field.annotation
        if name in env_names:
            continue
        if not (isinstance(section_class, type) and issubclass(section_class, BaseSettings)):
            continue

        section = merged.get(name)
        if section is None:
            section = {}
        if not isinstance(section, dict):
            continue

        section_env = _env_field_names(section_class)
        merged[name] = section_class(**{
            key: value for key, value in section.items() if key not in section_env
        })

    return merged


def load_yaml_config(
    config_path: str,
    settings_class: Type[T],
    base_dir: Optional[str] = None,
    **overrides
) -> T:
    """加载 YAML 配置并创建 Pydantic Settings 实例

    优先级（从高到低）: overrides 参数 > 环境变量 > YAML 文件 > 字段默认值

    Args:
        config_path: 配置文件路径
        settings_class: Pydantic Settings 类
        base_dir: 基础目录
        **overrides: 覆盖配置的参数

    Returns:
        Settings 实例

    使用示例:
        settings = load_yaml_config(
            "config/settings.yaml",
            AppSettings,
            sorter={"default_increment": 10}  # 覆盖配置
        )
    """
    # 缓存中的字典不能被覆盖参数修改
    config = _apply_env_precedence(settings_class, dict(ConfigLoader.load(config_path, base_dir)))
    config.update(overrides)

    return settings_class(**config)
