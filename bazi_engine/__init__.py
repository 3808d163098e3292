#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字引擎

四柱八字排盘注解（十神、藏干、十二长生、自坐、空亡、神煞、纳音）
与五步综合分析（排盘、旺衰、喜忌、格局、大运指引）。
"""

from .engine import BaziEngine
from .exceptions import BaziEngineError, IncompleteInputError, MalformedChartError
from .calculators.chart_assembler import ChartAssembler, parse_chart
from .analyzers.analysis_pipeline import AnalysisPipeline

__version__ = '1.0.0'

__all__ = [
    'BaziEngine',
    'BaziEngineError',
    'IncompleteInputError',
    'MalformedChartError',
    'ChartAssembler',
    'parse_chart',
    'AnalysisPipeline',
    '__version__',
]
