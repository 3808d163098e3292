#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字引擎门面

对外提供完整五步分析与单项查询（十神、喜忌、五行计数）。
"""

import logging
from typing import Any, Dict, List, Optional, Union

from .analyzers.analysis_pipeline import AnalysisPipeline
from .analyzers.pattern_analyzer import PatternAnalyzer
from .analyzers.vitality_analyzer import VitalityAssessor
from .analyzers.wuxing_score_analyzer import WuxingScoreAnalyzer
from .analyzers.xiji_analyzer import FavorableElementResolver
from .calculators.chart_assembler import ChartAssembler, RawChart
from .models.analysis import AnalysisReport, ElementPreference, WuxingScoreResult
from .models.chart import AnnotatedChart

logger = logging.getLogger(__name__)

ChartInput = Union[RawChart, AnnotatedChart]


class BaziEngine:
    """八字引擎"""

    def __init__(self, strict_void: Optional[bool] = None):
        self.assembler = ChartAssembler(strict_void=strict_void)
        self.vitality = VitalityAssessor()
        self.resolver = FavorableElementResolver()
        self.patterns = PatternAnalyzer()
        self.wuxing = WuxingScoreAnalyzer()
        self.pipeline = AnalysisPipeline(
            assembler=self.assembler,
            vitality=self.vitality,
            resolver=self.resolver,
            patterns=self.patterns,
        )

    def assemble(self, raw: ChartInput) -> AnnotatedChart:
        """排盘注解（已注解的命盘原样返回）"""
        if isinstance(raw, AnnotatedChart):
            return raw
        return self.assembler.assemble(raw)

    def ten_gods(self, raw: ChartInput) -> List[Dict[str, Any]]:
        """只计算十神：每柱的天干十神与藏干十神"""
        chart = self.assemble(raw)
        return [
            {
                'role': p.role.value,
                'ganzhi': p.pillar.ganzhi,
                'main_star': p.ten_god.value,
                'hidden_stems': [s.value for s in p.hidden_stems],
                'hidden_stars': [g.value for g in p.hidden_ten_gods],
            }
            for p in chart.pillars
        ]

    def favorable_elements(self, raw: ChartInput) -> ElementPreference:
        """只计算喜忌（旺衰 -> 喜用神/忌神）"""
        chart = self.assemble(raw)
        score = self.vitality.assess(chart)
        return self.resolver.resolve(score.strength, chart.day_master_element)

    def wuxing_scores(self, raw: ChartInput) -> WuxingScoreResult:
        """五行计数法喜用神"""
        return self.wuxing.calculate(self.assemble(raw))

    def analyze(self, raw: ChartInput, name: str = '') -> AnalysisReport:
        """完整五步分析"""
        return self.pipeline.run(self.assemble(raw), name=name)
