#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一环境配置管理

提供统一的环境判断和配置读取，避免各模块直接读取 os.environ
"""

import os
from enum import Enum
from typing import Literal, Optional

# 环境类型定义
Environment = Literal["local", "staging", "production"]


class EnvironmentType(Enum):
    """环境类型枚举"""
    LOCAL = "local"
    STAGING = "staging"
    PRODUCTION = "production"


class EnvConfig:
    """
    统一环境配置管理器

    ENV 优先，其次 APP_ENV，默认 local；未知取值按 local 处理
    """

    def __init__(self):
        self._env: Environment = self._detect_environment()

    @staticmethod
    def _detect_environment() -> Environment:
        env_value = os.getenv("ENV", os.getenv("APP_ENV", "local")).lower()

        if env_value in ("staging", "stage"):
            return EnvironmentType.STAGING.value
        if env_value in ("prod", "production"):
            return EnvironmentType.PRODUCTION.value
        return EnvironmentType.LOCAL.value

    @property
    def env(self) -> Environment:
        """获取当前环境"""
        return self._env

    @property
    def is_local_dev(self) -> bool:
        return self._env == EnvironmentType.LOCAL.value

    @property
    def is_staging(self) -> bool:
        return self._env == EnvironmentType.STAGING.value

    @property
    def is_production(self) -> bool:
        return self._env == EnvironmentType.PRODUCTION.value

    def get_config(self, key: str, default: str = None, required: bool = False) -> Optional[str]:
        """
        获取配置值（从环境变量）

        Raises:
            ValueError: required=True 且配置不存在
        """
        value = os.getenv(key, default)
        if required and value is None:
            raise ValueError(f"必需的环境变量 {key} 未设置")
        return value

    def get_bool_config(self, key: str, default: bool = False) -> bool:
        """获取布尔类型配置，true/1/yes/on 视为真"""
        value = os.getenv(key, str(default)).lower()
        return value in ("true", "1", "yes", "on")


# 全局单例实例
_env_config: Optional[EnvConfig] = None


def get_env_config() -> EnvConfig:
    """获取环境配置实例（全局单例）"""
    global _env_config
    if _env_config is None:
        _env_config = EnvConfig()
    return _env_config


def reset_env_config() -> EnvConfig:
    """重新检测环境（环境变量变化后调用）"""
    global _env_config
    _env_config = EnvConfig()
    return _env_config


def is_production() -> bool:
    """是否为生产环境（便捷函数）"""
    return get_env_config().is_production


def get_env() -> Environment:
    """获取当前环境（便捷函数）"""
    return get_env_config().env
