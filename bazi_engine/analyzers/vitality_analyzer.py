#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命局旺衰分析器

从四个维度评估日主能量：得令（月令）、得地（根气）、得势（比劫）、得助（印星）。
权重顺序 得令 > 得地 > 得势/得助 只用于生成说明文字，不参与最终判定。

判定规则：
- 身旺：得令，且 得地/得势/得助 至少满足一项
- 身弱：失令，且 得地/得势/得助 至少一项不满足
- 其余情况：中和
"""

import logging
from typing import Iterable, List

from ..data.constants import TenGod
from ..data.longevity import ASCENDING_STAGES
from ..models.analysis import Strength, SupportLevel, VitalityScore
from ..models.chart import AnnotatedChart, PillarRole

logger = logging.getLogger(__name__)

ALLY_TEN_GODS = frozenset({TenGod.BI_JIAN, TenGod.JIE_CAI})
SUPPORT_TEN_GODS = frozenset({TenGod.ZHENG_YIN, TenGod.PIAN_YIN})

# 比劫/印星计数达到该值视为力量强
STRONG_BACKING_COUNT = 2
# 同五行藏干达到该值视为根气强
STRONG_ROOT_COUNT = 3


class VitalityAssessor:
    """命局旺衰分析器"""

    def assess(self, chart: AnnotatedChart) -> VitalityScore:
        """
        评估日主旺衰

        Args:
            chart: 排盘注解后的命盘

        Returns:
            VitalityScore: 四维评估与旺衰判定
        """
        day_master = chart.day_master
        logger.info(f"🔍 开始分析旺衰 - 日主: {day_master.value}({day_master.element.value})")

        logger.debug("📊 步骤1: 得令（月令）")
        month = chart.pillar(PillarRole.MONTH)
        command_stage = month.life_stage
        command = command_stage in ASCENDING_STAGES
        logger.debug(f"   月支{month.branch.value}: {command_stage.value if command_stage else '未知'}，"
                     f"{'得令' if command else '失令'}")

        logger.debug("📊 步骤2: 得地（根气）")
        root_count, dominant_root_count = self._count_roots(chart)
        root = self._root_level(root_count, dominant_root_count)
        logger.debug(f"   同五行藏干: {root_count}，本气根: {dominant_root_count}，得地: {root.value}")

        logger.debug("📊 步骤3: 得势（比劫）")
        allies_count = self._count_ten_gods(chart, ALLY_TEN_GODS)
        allies = self._backing_level(allies_count)
        logger.debug(f"   比劫数量: {allies_count}，得势: {allies.value}")

        logger.debug("📊 步骤4: 得助（印星）")
        support_count = self._count_ten_gods(chart, SUPPORT_TEN_GODS)
        support = self._backing_level(support_count)
        logger.debug(f"   印星数量: {support_count}，得助: {support.value}")

        strength = classify_strength(
            command,
            (root is not SupportLevel.NONE,
             allies is not SupportLevel.NONE,
             support is not SupportLevel.NONE),
        )
        logger.info(f"✅ 旺衰判定: {strength.value}")

        return VitalityScore(
            command=command,
            command_stage=command_stage,
            root=root,
            root_count=root_count,
            dominant_root_count=dominant_root_count,
            allies=allies,
            allies_count=allies_count,
            support=support,
            support_count=support_count,
            strength=strength,
        )

    @staticmethod
    def _count_roots(chart: AnnotatedChart):
        """统计四支藏干中与日主同五行的数量，以及其中作为本气的数量"""
        element = chart.day_master_element
        total = 0
        dominant = 0
        for pillar in chart.pillars:
            for position, stem in enumerate(pillar.hidden_stems):
                if stem.element is element:
                    total += 1
                    if position == 0:
                        dominant += 1
        return total, dominant

    @staticmethod
    def _root_level(count: int, dominant_count: int) -> SupportLevel:
        if dominant_count > 0 or count >= STRONG_ROOT_COUNT:
            return SupportLevel.STRONG
        if count > 0:
            return SupportLevel.WEAK
        return SupportLevel.NONE

    @staticmethod
    def _count_ten_gods(chart: AnnotatedChart, targets: frozenset) -> int:
        """统计天干十神与地支藏干十神中属于 targets 的数量（日柱天干为日主，不计入）"""
        count = 0
        for pillar in chart.pillars:
            if pillar.ten_god in targets:
                count += 1
            count += sum(1 for god in pillar.hidden_ten_gods if god in targets)
        return count

    @staticmethod
    def _backing_level(count: int) -> SupportLevel:
        if count >= STRONG_BACKING_COUNT:
            return SupportLevel.STRONG
        if count == 1:
            return SupportLevel.WEAK
        return SupportLevel.NONE

    def explain(self, score: VitalityScore) -> List[str]:
        """按 得令 > 得地 > 得势/得助 的顺序生成说明文字"""
        lines = ['怎么做：从四个维度综合评估（权重：得令 > 得地 > 得势/得助）。']

        stage = score.command_stage.value if score.command_stage else '未知'
        lines.append('1. 得令（看月令）:')
        if score.command:
            lines.append(f"   得令（{stage}），趋势强")
        else:
            lines.append(f"   失令（{stage}），趋势弱")

        lines.append('2. 得地（看根气）:')
        if score.dominant_root_count > 0:
            lines.append('   有本气强根，得地力强')
        elif score.root is SupportLevel.STRONG:
            lines.append(f"   同五行藏干数量为{score.root_count}个，得地力强")
        elif score.root is SupportLevel.WEAK:
            lines.append(f"   同五行藏干数量为{score.root_count}个，得地力弱")
        else:
            lines.append('   完全无根为"虚浮"，力量弱')

        lines.append('3. 得势（看比劫）:')
        if score.allies is SupportLevel.STRONG:
            lines.append(f"   天干和地支藏干中比肩、劫财数量为{score.allies_count}，势众，得势")
        elif score.allies is SupportLevel.WEAK:
            lines.append(f"   天干和地支藏干中比肩、劫财数量为{score.allies_count}，势弱")
        else:
            lines.append('   天干和地支藏干中无比肩、劫财，不得势')

        lines.append('4. 得助（看印星）:')
        if score.support is SupportLevel.STRONG:
            lines.append(f"   天干和地支藏干中印星数量为{score.support_count}，得生助之力强，得助")
        elif score.support is SupportLevel.WEAK:
            lines.append(f"   天干和地支藏干中印星数量为{score.support_count}，得生助之力弱")
        else:
            lines.append('   天干和地支藏干中无印星，不得助')

        lines.append('')
        lines.append('综合判断:')
        lines.append(STRENGTH_VERDICTS[score.strength])
        return lines


STRENGTH_VERDICTS = {
    Strength.STRONG: '身旺：得令 + (得地、得势、得助满足其一或多项)',
    Strength.WEAK: '身弱：失令 + (不得地、不得势、不得助满足其一或多项)',
    Strength.BALANCED: '中和：八字五行相对平衡',
}


def classify_strength(command: bool, dimensions: Iterable[bool]) -> Strength:
    """
    旺衰判定

    Args:
        command: 是否得令
        dimensions: (得地, 得势, 得助) 是否成立
    """
    dimensions = tuple(dimensions)
    if command and any(dimensions):
        return Strength.STRONG
    if not command and not all(dimensions):
        return Strength.WEAK
    return Strength.BALANCED
