#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一应用配置管理
所有配置统一从这里读取，避免配置分散
"""

from dataclasses import dataclass
from typing import Optional

from .env_config import get_env_config, reset_env_config

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class AppConfig:
    """应用配置"""
    env: str = 'local'
    debug: bool = False
    log_level: str = 'INFO'
    log_format: str = DEFAULT_LOG_FORMAT
    # 非六十甲子日柱查空亡时是否抛错
    strict_void: bool = False
    # 报告默认标注的姓名
    report_name: str = ''

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """从环境变量创建配置"""
        env_config = get_env_config()
        debug = env_config.get_bool_config('DEBUG', default=False)
        return cls(
            env=env_config.env,
            debug=debug,
            log_level=env_config.get_config('LOG_LEVEL', default='DEBUG' if debug else 'INFO').upper(),
            log_format=env_config.get_config('LOG_FORMAT', default=DEFAULT_LOG_FORMAT),
            strict_void=env_config.get_bool_config('BAZI_STRICT_VOID', default=False),
            report_name=env_config.get_config('BAZI_REPORT_NAME', default=''),
        )


# 全局配置实例（单例模式）
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """获取全局配置实例（单例）"""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """重新加载配置（环境变量或 .env 变化后调用）"""
    global _config
    reset_env_config()
    _config = AppConfig.from_env()
    return _config
