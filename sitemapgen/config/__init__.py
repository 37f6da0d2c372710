"""
配置管理模块
提供系统配置和URL条目的加载、验证功能
"""

from .config import ConfigLoader, create_default_config
from .schemas import (
    AppConfig,
    GeneratorConfig,
    LoggingConfig
)

__all__ = [
    'ConfigLoader',
    'create_default_config',
    'AppConfig',
    'GeneratorConfig',
    'LoggingConfig'
]
