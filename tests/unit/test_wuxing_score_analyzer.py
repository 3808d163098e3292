#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""五行计数法喜用神单元测试"""

from bazi_engine.analyzers.wuxing_score_analyzer import WuxingScoreAnalyzer
from bazi_engine.data.constants import Element


class TestWuxingScore:
    def test_leaning_strong(self, balanced_chart):
        result = WuxingScoreAnalyzer().calculate(balanced_chart)
        assert result.score_map == {'木': 1, '火': 2, '土': 3, '金': 2, '水': 0}
        assert result.day_master_strength == '偏强'
        assert result.favorable_element is Element.WOOD
        assert result.logic[-1] == '6. 综合分析，确定喜用神为: 木'

    def test_leaning_weak(self, assembler):
        # 甲日，可见干支只有日干一个木
        chart = assembler.assemble(["庚午", "丙戌", "甲午", "庚午"])
        result = WuxingScoreAnalyzer().calculate(chart)
        assert result.score_map['木'] == 1
        assert result.day_master_strength == '偏弱'
        assert result.favorable_element is Element.WATER
        assert result.logic[3] == '3. 日主偏弱，需要寻找能够生扶日主五行的元素'

    def test_counts_eight_characters(self, strong_chart):
        result = WuxingScoreAnalyzer().calculate(strong_chart)
        assert sum(result.score_map.values()) == 8
        assert result.favorable_element is Element.METAL
