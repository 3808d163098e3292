#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 共享 fixtures（引擎、排盘注解器、常用命盘）
- 配置单例的隔离
"""

import os
import sys

import pytest

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from bazi_engine.calculators.chart_assembler import ChartAssembler
from bazi_engine.config.app_config import reload_config
from bazi_engine.engine import BaziEngine
from tests.fixtures.sample_data import BALANCED_CHART, CLASH_CHART, STRONG_CHART


# ==================== 配置 Fixtures ====================

@pytest.fixture(autouse=True)
def fresh_config():
    """每个测试结束后按当前环境变量重建配置单例，避免测试间互相影响"""
    yield
    reload_config()


# ==================== 引擎 Fixtures ====================

@pytest.fixture
def assembler() -> ChartAssembler:
    return ChartAssembler(strict_void=False)


@pytest.fixture
def engine() -> BaziEngine:
    return BaziEngine(strict_void=False)


@pytest.fixture
def strong_chart(assembler):
    """甲寅 乙亥 甲子 癸酉：日主甲木身旺"""
    return assembler.assemble(STRONG_CHART)


@pytest.fixture
def balanced_chart(assembler):
    """庚午 己卯 己酉 己巳：日主己土中和"""
    return assembler.assemble(BALANCED_CHART)


@pytest.fixture
def clash_chart(assembler):
    """甲子 庚午 甲寅 丙寅：年月子午相冲"""
    return assembler.assemble(CLASH_CHART)
