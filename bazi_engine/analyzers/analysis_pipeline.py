#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱八字五步综合分析

按固定顺序执行：
1. 排盘与定盘
2. 定旺衰，识体性
3. 明喜忌，定方向（取第2步的旺衰判定）
4. 析格局，观组合
5. 推大运，断流年（取第3步的喜用神；中和命局参考第4步的组合）

各步骤之间只传递结构化结果，任何一步失败整个分析失败，不返回部分报告。
"""

import logging
from typing import List, Optional

from ..calculators.chart_assembler import ChartAssembler, RawChart
from ..models.analysis import (
    AnalysisReport,
    AnalysisStep,
    ElementPreference,
    PatternReport,
    VitalityScore,
)
from ..models.chart import AnnotatedChart, PillarRole
from .pattern_analyzer import PatternAnalyzer
from .vitality_analyzer import VitalityAssessor
from .xiji_analyzer import FavorableElementResolver

logger = logging.getLogger(__name__)

STEP_TITLES = (
    '第一步：排盘与定盘',
    '第二步：定旺衰，识体性',
    '第三步：明喜忌，定方向',
    '第四步：析格局，观组合',
    '第五步：推大运，断流年',
)


class AnalysisPipeline:
    """四柱八字五步综合分析"""

    def __init__(
        self,
        assembler: Optional[ChartAssembler] = None,
        vitality: Optional[VitalityAssessor] = None,
        resolver: Optional[FavorableElementResolver] = None,
        patterns: Optional[PatternAnalyzer] = None,
    ):
        self.assembler = assembler or ChartAssembler()
        self.vitality = vitality or VitalityAssessor()
        self.resolver = resolver or FavorableElementResolver()
        self.patterns = patterns or PatternAnalyzer()

    def run(self, raw: RawChart, name: str = '') -> AnalysisReport:
        """
        执行五步分析

        Args:
            raw: 四柱输入（Chart 或可解析的四柱序列）
            name: 报告标注用的姓名，不参与计算

        Raises:
            MalformedChartError: 命盘格式错误
        """
        logger.info(f"🔍 开始五步分析{f' - {name}' if name else ''}")

        chart = raw if isinstance(raw, AnnotatedChart) else self.assembler.assemble(raw)
        step1 = self._chart_step(chart)

        score = self.vitality.assess(chart)
        step2 = self._vitality_step(chart, score)

        preference = self.resolver.resolve(score.strength, chart.day_master_element)
        step3 = AnalysisStep(
            title=STEP_TITLES[2],
            lines=tuple(['做什么：根据身强身弱，确定平衡八字的五行十神。'] + self.resolver.explain(preference)),
        )

        report = self.patterns.analyze(chart)
        step4 = AnalysisStep(title=STEP_TITLES[3], lines=tuple(self.patterns.explain(report)))

        step5 = self._fortune_step(chart, preference, report)

        logger.info("✅ 五步分析完成")
        return AnalysisReport(
            name=name,
            steps=(step1, step2, step3, step4, step5),
            chart=chart,
            vitality=score,
            preference=preference,
            patterns=report,
        )

    @staticmethod
    def _chart_step(chart: AnnotatedChart) -> AnalysisStep:
        lines: List[str] = ['做什么：确认天干地支表示的四柱八字，并以日干为我标注十神。', '', '您的八字排盘结果：']
        for p in chart.pillars:
            lines.append(f"{p.role.label}: {p.pillar.ganzhi} ({p.stem_element.value}{p.branch_element.value})")

        lines.append('')
        lines.append('十神分析：')
        for p in chart.pillars:
            hidden = '、'.join(f"{s.value}{g.value}" for s, g in zip(p.hidden_stems, p.hidden_ten_gods))
            lines.append(f"{p.role.label}: 天干({p.stem.value})为{p.ten_god.value}，藏干 {hidden}")

        lines.append('')
        if chart.void_branches:
            lines.append(f"空亡: {''.join(b.value for b in chart.void_branches)}")
        if chart.activated_stars:
            stars = '、'.join(f"{s.name}({s.branch.value})" for s in chart.activated_stars)
            lines.append(f"神煞: {stars}")
        return AnalysisStep(title=STEP_TITLES[0], lines=tuple(lines))

    def _vitality_step(self, chart: AnnotatedChart, score: VitalityScore) -> AnalysisStep:
        day = chart.pillar(PillarRole.DAY)
        lines = [
            '做什么：判断日主在整个八字中的能量状态（身强/身弱），这是选择喜用神的根本依据。',
            f"您的日主为: {day.stem.value}, 地支为: {day.branch.value}",
            '',
        ]
        lines.extend(self.vitality.explain(score))
        return AnalysisStep(title=STEP_TITLES[1], lines=tuple(lines))

    @staticmethod
    def _fortune_step(chart: AnnotatedChart, preference: ElementPreference,
                      report: PatternReport) -> AnalysisStep:
        lines = [
            '做什么：将大运和流年代入原局，看如何引动和改变原局的平衡。',
            '怎么做：',
            '1. 大运分析：看十年一大运是增强了喜用神还是忌神的力量。',
            '2. 流年应期：流年干支像一把钥匙，会引动原局中潜伏的信息。',
            '',
            '示例分析：',
        ]
        day_master = chart.day_master.value
        if preference.requires_pattern_analysis:
            lines.append(f"您的日主为{day_master}，命局中和，喜忌需结合格局组合确定。")
            lines.append(f"吉神组合: {report.auspicious_label or '无'}；凶神组合: {report.inauspicious_label or '无'}。")
            lines.append('大运流年宜扶助吉神组合，避免引动凶神组合。')
        else:
            favorable = '、'.join(e.value for e in preference.favorable_elements)
            unfavorable = '、'.join(e.value for e in preference.unfavorable_elements)
            lines.append(f"您的日主为{day_master}，喜用神为{favorable}。")
            lines.append(f"当大运或流年出现{favorable}五行时，通常代表运势较好。")
            lines.append(f"当大运或流年出现{unfavorable}五行时，需谨慎应对可能出现的挑战。")
        return AnalysisStep(title=STEP_TITLES[4], lines=tuple(lines))
