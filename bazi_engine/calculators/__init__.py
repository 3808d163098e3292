#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
计算器模块：十神、单柱查询、排盘注解
"""

from .chart_assembler import ChartAssembler, parse_chart
from .pillar_lookups import (
    activated_stars,
    element_longevity_stage,
    is_void,
    longevity_stage,
    nayin_of,
    self_seat,
    void_branches,
)

__all__ = [
    'ChartAssembler',
    'parse_chart',
    'activated_stars',
    'element_longevity_stage',
    'is_void',
    'longevity_stage',
    'nayin_of',
    'self_seat',
    'void_branches',
]
