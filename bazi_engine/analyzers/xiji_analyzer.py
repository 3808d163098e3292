#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
喜忌分析器

根据旺衰判定确定喜用神与忌神：
- 身旺：喜克、泄、耗。喜官杀、财星、食伤；忌比劫、印星
- 身弱：喜生、扶。喜印星、比劫；忌官杀、财星、食伤
- 中和：无通用规则，需结合格局组合具体分析
"""

import logging
from typing import Callable, Dict, List, Tuple

from ..calculators.bazi_core.element_relations import (
    get_controlled_by_element,
    get_controlled_element,
    get_producing_element,
    get_producing_from_element,
)
from ..data.constants import Element
from ..models.analysis import ElementEntry, ElementPreference, Strength, TenGodGroup

logger = logging.getLogger(__name__)

# 十神类别 -> 由日主五行求该类别五行
GROUP_ELEMENT: Dict[TenGodGroup, Callable[[Element], Element]] = {
    TenGodGroup.OFFICER: get_controlled_by_element,      # 克我
    TenGodGroup.WEALTH: get_controlled_element,          # 我克
    TenGodGroup.OUTPUT: get_producing_element,           # 我生
    TenGodGroup.RESOURCE: get_producing_from_element,    # 生我
    TenGodGroup.COMPANION: lambda element: element,      # 同我
}

# 旺衰 -> (喜用神类别, 忌神类别)，顺序即输出顺序
XI_JI_RULES: Dict[Strength, Tuple[Tuple[TenGodGroup, ...], Tuple[TenGodGroup, ...]]] = {
    Strength.STRONG: (
        (TenGodGroup.OFFICER, TenGodGroup.WEALTH, TenGodGroup.OUTPUT),
        (TenGodGroup.COMPANION, TenGodGroup.RESOURCE),
    ),
    Strength.WEAK: (
        (TenGodGroup.RESOURCE, TenGodGroup.COMPANION),
        (TenGodGroup.OFFICER, TenGodGroup.WEALTH, TenGodGroup.OUTPUT),
    ),
    Strength.BALANCED: ((), ()),
}

XI_JI_GUIDANCE = {
    Strength.STRONG: '身旺：喜克、泄、耗。喜用神为：官杀、财星、食伤。忌神为：比劫、印星。',
    Strength.WEAK: '身弱：喜生、扶。喜用神为：印星、比劫。忌神为：官杀、财星、食伤。',
    Strength.BALANCED: '中和：五行相对平衡，需根据具体组合确定喜忌。',
}


class FavorableElementResolver:
    """喜忌分析器"""

    def resolve(self, strength: Strength, day_master_element: Element) -> ElementPreference:
        """
        确定喜忌

        Args:
            strength: 旺衰判定
            day_master_element: 日主五行

        Returns:
            ElementPreference: 喜用神与忌神（两者互不相交）
        """
        strength = Strength(strength)
        day_master_element = Element(day_master_element)
        favorable_groups, unfavorable_groups = XI_JI_RULES[strength]

        preference = ElementPreference(
            strength=strength,
            day_master_element=day_master_element,
            favorable=self._entries(favorable_groups, day_master_element),
            unfavorable=self._entries(unfavorable_groups, day_master_element),
        )
        logger.info(f"✅ 喜忌判定({strength.value}) - "
                    f"喜神: {[e.label for e in preference.favorable]}, "
                    f"忌神: {[e.label for e in preference.unfavorable]}")
        return preference

    @staticmethod
    def _entries(groups, day_master_element: Element) -> Tuple[ElementEntry, ...]:
        return tuple(
            ElementEntry(element=GROUP_ELEMENT[group](day_master_element), group=group)
            for group in groups
        )

    def explain(self, preference: ElementPreference) -> List[str]:
        """喜忌说明文字"""
        lines = [f"您的日主状态为: {preference.strength.value}", '怎么做：', XI_JI_GUIDANCE[preference.strength]]
        if preference.requires_pattern_analysis:
            return lines
        lines.append('喜用神：')
        lines.append('   ' + '、'.join(entry.label for entry in preference.favorable))
        lines.append('忌神：')
        lines.append('   ' + '、'.join(entry.label for entry in preference.unfavorable))
        return lines
