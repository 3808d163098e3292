#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
日志配置

提供安全的 StreamHandler（捕获 Broken pipe 等异常），
CLI 输出被管道截断时（如 | head）不会打印异常堆栈。
"""

import logging
import sys

from ..config.app_config import DEFAULT_LOG_FORMAT

PACKAGE_LOGGER = 'bazi_engine'


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


def setup_logging(level: str = 'INFO', fmt: str = DEFAULT_LOG_FORMAT) -> logging.Logger:
    """
    配置包级日志

    重复调用只更新输出流、级别和格式，不会叠加 handler。

    Args:
        level: 日志级别名称
        fmt: 日志格式

    Returns:
        包根 logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = next((h for h in logger.handlers if isinstance(h, SafeStreamHandler)), None)
    if handler is None:
        handler = SafeStreamHandler()
        logger.addHandler(handler)
    else:
        handler.setStream(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return logger
