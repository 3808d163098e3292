#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置管理单元测试
测试统一配置管理与日志配置
"""

import logging
import os
from unittest.mock import patch

from bazi_engine.calculators.chart_assembler import ChartAssembler
from bazi_engine.config.app_config import DEFAULT_LOG_FORMAT, AppConfig, get_config, reload_config
from bazi_engine.config.env_config import EnvConfig
from bazi_engine.utils.logging_config import SafeStreamHandler, setup_logging


class TestEnvConfig:
    def test_default_is_local(self):
        with patch.dict(os.environ, {}, clear=True):
            config = EnvConfig()
            assert config.env == 'local'
            assert config.is_local_dev

    def test_env_takes_precedence(self):
        with patch.dict(os.environ, {'ENV': 'prod', 'APP_ENV': 'staging'}, clear=True):
            assert EnvConfig().is_production

    def test_app_env_fallback(self):
        with patch.dict(os.environ, {'APP_ENV': 'stage'}, clear=True):
            assert EnvConfig().is_staging

    def test_unknown_is_local(self):
        with patch.dict(os.environ, {'ENV': 'qa'}, clear=True):
            assert EnvConfig().env == 'local'

    def test_bool_config(self):
        with patch.dict(os.environ, {'A': 'yes', 'B': 'off'}, clear=True):
            config = EnvConfig()
            assert config.get_bool_config('A') is True
            assert config.get_bool_config('B') is False
            assert config.get_bool_config('C', default=True) is True


class TestAppConfig:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig.from_env()
            assert config.log_level == 'INFO'
            assert config.log_format == DEFAULT_LOG_FORMAT
            assert config.strict_void is False
            assert config.report_name == ''

    def test_from_env(self):
        with patch.dict(os.environ, {
            'LOG_LEVEL': 'warning',
            'BAZI_STRICT_VOID': 'true',
            'BAZI_REPORT_NAME': '张三',
        }, clear=True):
            config = AppConfig.from_env()
            assert config.log_level == 'WARNING'
            assert config.strict_void is True
            assert config.report_name == '张三'

    def test_debug_lowers_default_level(self):
        with patch.dict(os.environ, {'DEBUG': '1'}, clear=True):
            config = AppConfig.from_env()
            assert config.debug is True
            assert config.log_level == 'DEBUG'

    def test_reload_config(self):
        with patch.dict(os.environ, {'ENV': 'production', 'BAZI_STRICT_VOID': '1'}, clear=True):
            config = reload_config()
            assert get_config() is config
            assert config.env == 'production'
            assert config.strict_void is True

    def test_assembler_reads_strict_void(self):
        with patch.dict(os.environ, {'BAZI_STRICT_VOID': 'true'}, clear=True):
            reload_config()
            assert ChartAssembler().strict_void is True
            assert ChartAssembler(strict_void=False).strict_void is False


class TestLogging:
    def test_setup_does_not_stack_handlers(self):
        logger = setup_logging('DEBUG')
        setup_logging('WARNING')
        handlers = [h for h in logger.handlers if isinstance(h, SafeStreamHandler)]
        assert len(handlers) == 1
        assert logger.level == logging.WARNING

    def test_broken_pipe_is_ignored(self):
        class BrokenStream:
            def write(self, _):
                raise BrokenPipeError()

            def flush(self):
                pass

        handler = SafeStreamHandler(BrokenStream())
        record = logging.LogRecord('bazi_engine', logging.INFO, __file__, 1, 'msg', None, None)
        handler.emit(record)
