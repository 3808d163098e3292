#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""格局组合分析器单元测试"""

import pytest

from bazi_engine.analyzers.pattern_analyzer import PatternAnalyzer
from bazi_engine.data.constants import Branch, Stem, TenGod
from bazi_engine.models.chart import PillarRole
from tests.fixtures.sample_data import CLASH_CASES, PATTERN_CASES


@pytest.fixture
def analyzer():
    return PatternAnalyzer()


class TestTenGodPatterns:
    @pytest.mark.parametrize("case", PATTERN_CASES, ids=[c["id"] for c in PATTERN_CASES])
    def test_first_match(self, analyzer, assembler, case):
        report = analyzer.analyze(assembler.assemble(case["pillars"]))
        assert report.auspicious_label == case["auspicious"]
        assert report.inauspicious_label == case["inauspicious"]


class TestClashes:
    def test_year_month_clash(self, analyzer, clash_chart):
        report = analyzer.analyze(clash_chart)
        assert report.clash_descriptions == ["子与午相冲"]
        clash = report.clashes[0]
        assert (clash.first_role, clash.second_role) == (PillarRole.YEAR, PillarRole.MONTH)

    @pytest.mark.parametrize("case", CLASH_CASES, ids=[c["id"] for c in CLASH_CASES])
    def test_scan_order(self, analyzer, assembler, case):
        report = analyzer.analyze(assembler.assemble(case["pillars"]))
        assert report.clash_descriptions == case["clashes"]

    def test_all_pairs_reported(self, analyzer, assembler):
        report = analyzer.analyze(assembler.assemble(["甲子", "庚午", "甲子", "庚午"]))
        roles = [(c.first_role, c.second_role) for c in report.clashes]
        assert roles == [
            (PillarRole.YEAR, PillarRole.MONTH),
            (PillarRole.YEAR, PillarRole.HOUR),
            (PillarRole.MONTH, PillarRole.DAY),
            (PillarRole.DAY, PillarRole.HOUR),
        ]


class TestMonthCommand:
    def test_month_focus(self, analyzer, strong_chart):
        report = analyzer.analyze(strong_chart)
        assert report.month_branch is Branch.HAI
        assert report.month_hidden_stems == (Stem.REN, Stem.JIA)
        assert report.month_main_ten_god is TenGod.PIAN_YIN


class TestExplain:
    def test_lines(self, analyzer, assembler):
        report = analyzer.analyze(assembler.assemble(["丁卯", "辛酉", "甲子", "癸酉"]))
        lines = analyzer.explain(report)
        assert '1. 聚焦月令：月支酉藏干为辛，本气十神正官为格局核心。' in lines
        assert '   存在吉神组合: 伤官配印，主富贵。' in lines
        assert '   存在凶神组合: 伤官见官，主波折。' in lines
        assert '   地支关系: 卯与酉相冲，卯与酉相冲' in lines

    def test_nothing_found(self, analyzer, strong_chart):
        lines = analyzer.explain(analyzer.analyze(strong_chart))
        assert '   暂未发现明显吉神组合。' in lines
        assert '   暂未发现明显凶神组合。' in lines
        assert '   地支间无明显刑冲合害关系。' in lines
