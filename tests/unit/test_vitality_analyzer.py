#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""旺衰分析器单元测试"""

from itertools import product

import pytest

from bazi_engine.analyzers.vitality_analyzer import VitalityAssessor, classify_strength
from bazi_engine.data.longevity import LifeStage
from bazi_engine.models.analysis import Strength, SupportLevel
from tests.fixtures.sample_data import CLASH_CHART, PATTERN_CASES


@pytest.fixture
def assessor():
    return VitalityAssessor()


class TestClassifyStrength:
    @pytest.mark.parametrize("dimensions", list(product([True, False], repeat=3)))
    def test_command_true(self, dimensions):
        expected = Strength.STRONG if any(dimensions) else Strength.BALANCED
        assert classify_strength(True, dimensions) is expected

    @pytest.mark.parametrize("dimensions", list(product([True, False], repeat=3)))
    def test_command_false(self, dimensions):
        expected = Strength.BALANCED if all(dimensions) else Strength.WEAK
        assert classify_strength(False, dimensions) is expected


class TestAssess:
    def test_strong_chart(self, assessor, strong_chart):
        score = assessor.assess(strong_chart)
        assert score.command is True
        assert score.command_stage is LifeStage.CHANG_SHENG
        assert score.root is SupportLevel.STRONG
        assert score.dominant_root_count == 1
        assert score.allies is SupportLevel.STRONG
        assert score.allies_count == 4
        assert score.support is SupportLevel.STRONG
        assert score.support_count == 3
        assert score.strength is Strength.STRONG

    def test_balanced_chart(self, assessor, balanced_chart):
        score = assessor.assess(balanced_chart)
        assert score.command is False
        assert score.command_stage is LifeStage.BING
        assert score.root is SupportLevel.WEAK
        assert score.root_count == 2
        assert score.allies_count == 4
        assert score.support_count == 2
        assert score.strength is Strength.BALANCED

    def test_weak_chart(self, assessor, assembler):
        # 甲日戌月为养，失令；四支无木无水，天干无比劫印星
        score = assessor.assess(assembler.assemble(["庚午", "丙戌", "甲午", "庚午"]))
        assert score.command is False
        assert score.command_stage is LifeStage.YANG
        assert (score.root, score.allies, score.support) == (SupportLevel.NONE,) * 3
        assert score.strength is Strength.WEAK

    def test_single_backing_is_weak_but_true(self, assessor, assembler):
        # 甲日，天干地支只见一个印星（癸）
        chart = assembler.assemble(["丙午", "丙午", "甲午", "癸酉"])
        score = assessor.assess(chart)
        assert score.support_count == 1
        assert score.support is SupportLevel.WEAK
        assert score.has_support

    @pytest.mark.parametrize("case", PATTERN_CASES + [{"id": "clash", "pillars": CLASH_CHART}],
                             ids=lambda c: c["id"])
    def test_total(self, assessor, assembler, case):
        score = assessor.assess(assembler.assemble(case["pillars"]))
        assert score.strength in set(Strength)


class TestExplain:
    def test_strong_lines(self, assessor, strong_chart):
        lines = assessor.explain(assessor.assess(strong_chart))
        assert '   得令（长生），趋势强' in lines
        assert '   有本气强根，得地力强' in lines
        assert lines[-1].startswith('身旺')

    def test_priority_order(self, assessor, balanced_chart):
        lines = assessor.explain(assessor.assess(balanced_chart))
        headers = [line for line in lines if line[:2] in ('1.', '2.', '3.', '4.')]
        assert headers == ['1. 得令（看月令）:', '2. 得地（看根气）:', '3. 得势（看比劫）:', '4. 得助（看印星）:']
        assert lines[-1].startswith('中和')
