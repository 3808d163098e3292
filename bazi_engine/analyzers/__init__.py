#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
分析器模块：旺衰、喜忌、格局、五行计数、五步综合分析
"""

from .vitality_analyzer import VitalityAssessor, classify_strength
from .xiji_analyzer import FavorableElementResolver
from .pattern_analyzer import PatternAnalyzer, find_clashes
from .wuxing_score_analyzer import WuxingScoreAnalyzer
from .analysis_pipeline import AnalysisPipeline, STEP_TITLES

__all__ = [
    'VitalityAssessor',
    'classify_strength',
    'FavorableElementResolver',
    'PatternAnalyzer',
    'find_clashes',
    'WuxingScoreAnalyzer',
    'AnalysisPipeline',
    'STEP_TITLES',
]
