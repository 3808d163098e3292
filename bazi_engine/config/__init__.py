#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模块
"""

from .env_config import EnvConfig, get_env, get_env_config, is_production
from .app_config import AppConfig, DEFAULT_LOG_FORMAT, get_config, reload_config

__all__ = [
    'EnvConfig',
    'get_env',
    'get_env_config',
    'is_production',
    'AppConfig',
    'DEFAULT_LOG_FORMAT',
    'get_config',
    'reload_config',
]
