#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行计数法喜用神（快速查询）

统计八个可见干支的五行个数，日主五行个数 >= 2 视为偏强，否则偏弱。
偏强取克日主的五行为喜用神，偏弱取生日主的五行。
"""

import logging

from ..calculators.bazi_core.element_relations import (
    get_controlled_by_element,
    get_controlled_element,
    get_producing_from_element,
)
from ..data.constants import ELEMENTS
from ..models.analysis import WuxingScoreResult
from ..models.chart import AnnotatedChart

logger = logging.getLogger(__name__)

STRONG_COUNT = 2
LEANING_STRONG = '偏强'
LEANING_WEAK = '偏弱'


class WuxingScoreAnalyzer:
    """五行计数法喜用神"""

    def calculate(self, chart: AnnotatedChart) -> WuxingScoreResult:
        counts = {element: 0 for element in ELEMENTS}
        for pillar in chart.pillars:
            counts[pillar.stem_element] += 1
            counts[pillar.branch_element] += 1

        day_master = chart.day_master
        element = day_master.element
        strength = LEANING_STRONG if counts[element] >= STRONG_COUNT else LEANING_WEAK

        logic = [
            '开始分析喜用神...',
            f"1. 确定日主为: {day_master.value}, 五行属: {element.value}",
            f"2. 分析日主强弱: 日主{strength}",
        ]
        if strength == LEANING_STRONG:
            favorable = get_controlled_by_element(element)
            logic.append('3. 日主偏强，需要寻找能够克制或泄耗日主五行的元素')
            logic.append(f"4. 能克制日主{element.value}的五行是: {favorable.value}（官杀）")
            logic.append(f"5. 能耗泄日主{element.value}的五行是: {get_controlled_element(element).value}（财星）")
        else:
            favorable = get_producing_from_element(element)
            logic.append('3. 日主偏弱，需要寻找能够生扶日主五行的元素')
            logic.append(f"4. 能生扶日主{element.value}的五行是: {favorable.value}（印星）")
            logic.append(f"5. 能比助日主{element.value}的五行是: {element.value}（比劫）")
        logic.append(f"6. 综合分析，确定喜用神为: {favorable.value}")

        score_text = '、'.join(f"{e.value}{c}" for e, c in counts.items())
        logger.info(f"✅ 五行计数: {score_text}，日主{strength}，喜用神: {favorable.value}")

        return WuxingScoreResult(
            day_master=day_master,
            day_master_strength=strength,
            scores=tuple(counts.items()),
            favorable_element=favorable,
            logic=tuple(logic),
        )
