#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
格局组合分析器

- 聚焦月令：月支藏干及本气十神
- 十神组合：按固定优先级取第一个成立的吉神组合、凶神组合（只看天干十神）
- 地支六冲：按 年月、年日、年时、月日、月时、日时 的顺序扫描，全部列出
"""

import logging
from itertools import combinations
from typing import Callable, FrozenSet, List, Optional, Tuple

from ..calculators.bazi_core.ten_gods import classify
from ..data.constants import CLASH_PAIRS, TenGod
from ..models.analysis import (
    AuspiciousPattern,
    BranchClash,
    InauspiciousPattern,
    PatternReport,
)
from ..models.chart import AnnotatedChart, PillarRole

logger = logging.getLogger(__name__)

_T = TenGod

# 六冲查找集合（无序）
CLASHES = frozenset(frozenset(pair) for pair in CLASH_PAIRS)

Rule = Callable[[FrozenSet[TenGod]], bool]

# 吉神组合，顺序即优先级
AUSPICIOUS_RULES: Tuple[Tuple[AuspiciousPattern, Rule], ...] = (
    (AuspiciousPattern.EATING_GOD_RESTRAINS_KILLINGS,
     lambda gods: _T.SHI_SHEN in gods and _T.QI_SHA in gods),
    (AuspiciousPattern.HURTING_OFFICER_WITH_RESOURCE,
     lambda gods: bool(gods & {_T.SHI_SHEN, _T.SHANG_GUAN}) and bool(gods & {_T.ZHENG_YIN, _T.PIAN_YIN})),
    (AuspiciousPattern.EATING_GOD_GENERATES_WEALTH,
     lambda gods: _T.SHI_SHEN in gods and bool(gods & {_T.ZHENG_CAI, _T.PIAN_CAI})),
)

# 凶神组合，顺序即优先级
INAUSPICIOUS_RULES: Tuple[Tuple[InauspiciousPattern, Rule], ...] = (
    (InauspiciousPattern.HURTING_OFFICER_CONFRONTS_OFFICER,
     lambda gods: _T.SHANG_GUAN in gods and _T.ZHENG_GUAN in gods),
    (InauspiciousPattern.INDIRECT_RESOURCE_SNATCHES_FOOD,
     lambda gods: _T.PIAN_YIN in gods and _T.SHI_SHEN in gods),
    (InauspiciousPattern.PEERS_SNATCH_WEALTH,
     lambda gods: bool(gods & {_T.BI_JIAN, _T.JIE_CAI}) and bool(gods & {_T.ZHENG_CAI, _T.PIAN_CAI})),
)


def _first_match(rules, gods: FrozenSet[TenGod]):
    for pattern, rule in rules:
        if rule(gods):
            return pattern
    return None


def find_clashes(chart: AnnotatedChart) -> Tuple[BranchClash, ...]:
    """地支六冲，按柱位两两组合的顺序扫描"""
    clashes = []
    for first, second in combinations(chart.pillars, 2):
        if frozenset((first.branch, second.branch)) in CLASHES:
            clashes.append(BranchClash(
                first_role=first.role,
                second_role=second.role,
                first=first.branch,
                second=second.branch,
            ))
    return tuple(clashes)


class PatternAnalyzer:
    """格局组合分析器"""

    def analyze(self, chart: AnnotatedChart) -> PatternReport:
        """
        分析十神组合与地支六冲

        Returns:
            PatternReport
        """
        gods = frozenset(p.ten_god for p in chart.pillars)
        auspicious: Optional[AuspiciousPattern] = _first_match(AUSPICIOUS_RULES, gods)
        inauspicious: Optional[InauspiciousPattern] = _first_match(INAUSPICIOUS_RULES, gods)
        clashes = find_clashes(chart)

        month = chart.pillar(PillarRole.MONTH)
        month_main_ten_god = classify(chart.day_master, month.branch.main_qi)

        logger.info(f"✅ 格局分析完成 - 吉神组合: {auspicious.value if auspicious else '无'}, "
                    f"凶神组合: {inauspicious.value if inauspicious else '无'}, "
                    f"六冲: {[c.description for c in clashes]}")

        return PatternReport(
            month_branch=month.branch,
            month_hidden_stems=month.hidden_stems,
            month_main_ten_god=month_main_ten_god,
            auspicious=auspicious,
            inauspicious=inauspicious,
            clashes=clashes,
        )

    def explain(self, report: PatternReport) -> List[str]:
        """格局组合说明文字"""
        hidden = '、'.join(s.value for s in report.month_hidden_stems)
        lines = [
            '做什么：分析十神的分布、组合和力量，解读人生轨迹。',
            '怎么做：',
            f"1. 聚焦月令：月支{report.month_branch.value}藏干为{hidden}，"
            f"本气十神{report.month_main_ten_god.value}为格局核心。",
            '2. 分析十神组合：',
        ]
        if report.auspicious:
            lines.append(f"   存在吉神组合: {report.auspicious_label}，主富贵。")
        else:
            lines.append('   暂未发现明显吉神组合。')
        if report.inauspicious:
            lines.append(f"   存在凶神组合: {report.inauspicious_label}，主波折。")
        else:
            lines.append('   暂未发现明显凶神组合。')

        lines.append('3. 察地支刑冲合害：分析地支间的相互作用。')
        if report.clashes:
            lines.append(f"   地支关系: {'，'.join(report.clash_descriptions)}")
        else:
            lines.append('   地支间无明显刑冲合害关系。')
        return lines
