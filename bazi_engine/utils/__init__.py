#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
工具模块
"""

from .logging_config import SafeStreamHandler, setup_logging

__all__ = ['SafeStreamHandler', 'setup_logging']
