#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""五步综合分析单元测试"""

from unittest.mock import MagicMock

import pytest

from bazi_engine.analyzers.analysis_pipeline import STEP_TITLES, AnalysisPipeline
from bazi_engine.analyzers.vitality_analyzer import VitalityAssessor
from bazi_engine.calculators.chart_assembler import ChartAssembler
from bazi_engine.exceptions import MalformedChartError
from bazi_engine.models.analysis import Strength
from tests.fixtures.sample_data import BALANCED_CHART, STRONG_CHART


@pytest.fixture
def pipeline():
    return AnalysisPipeline(assembler=ChartAssembler(strict_void=False))


class TestRun:
    def test_five_steps_in_order(self, pipeline):
        report = pipeline.run(STRONG_CHART, name='张三')
        assert report.name == '张三'
        assert tuple(step.title for step in report.steps) == STEP_TITLES

    def test_chart_echo(self, pipeline):
        lines = pipeline.run(STRONG_CHART).steps[0].lines
        assert '年柱: 甲寅 (木木)' in lines
        assert '时柱: 天干(癸)为正印，藏干 辛正官' in lines
        assert '空亡: 戌亥' in lines

    def test_strength_threads_into_xiji(self, pipeline):
        report = pipeline.run(STRONG_CHART)
        assert report.vitality.strength is Strength.STRONG
        assert report.preference.strength is Strength.STRONG
        assert '   官杀(金)、财星(土)、食伤(火)' in report.steps[2].lines

    def test_fortune_uses_favorable_elements(self, pipeline):
        lines = pipeline.run(STRONG_CHART).steps[4].lines
        assert '您的日主为甲，喜用神为金、土、火。' in lines
        assert '当大运或流年出现木、水五行时，需谨慎应对可能出现的挑战。' in lines

    def test_balanced_fortune_refers_to_patterns(self, pipeline):
        report = pipeline.run(BALANCED_CHART)
        assert report.preference.requires_pattern_analysis
        assert '吉神组合: 无；凶神组合: 无。' in report.steps[4].lines

    def test_stage_values_not_parsed_from_text(self, pipeline):
        # 第二步的说明文字被替换后，第三步仍按结构化的旺衰结果计算
        vitality = VitalityAssessor()
        vitality.explain = MagicMock(return_value=['身弱'])
        report = AnalysisPipeline(assembler=ChartAssembler(strict_void=False), vitality=vitality).run(STRONG_CHART)
        assert report.preference.strength is Strength.STRONG

    def test_malformed_aborts(self, pipeline):
        with pytest.raises(MalformedChartError):
            pipeline.run(["甲子", "乙丑", "丙寅"])

    def test_to_dict(self, pipeline):
        data = pipeline.run(STRONG_CHART, name='张三').to_dict()
        assert data['name'] == '张三'
        assert [s['title'] for s in data['steps']] == list(STEP_TITLES)
