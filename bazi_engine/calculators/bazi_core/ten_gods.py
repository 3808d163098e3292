#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
十神计算模块

提供十神（主星、副星）的计算功能。参照系始终是日主（日柱天干）。
"""

from typing import Tuple

from ...data.constants import HIDDEN_STEMS, Branch, Stem, TenGod
from .element_relations import ElementRelation, get_element_relation

# (关系, 阴阳是否相同) -> 十神
_TEN_GOD_BY_RELATION = {
    (ElementRelation.SAME, True): TenGod.BI_JIAN,
    (ElementRelation.SAME, False): TenGod.JIE_CAI,
    (ElementRelation.ME_PRODUCING, True): TenGod.SHI_SHEN,
    (ElementRelation.ME_PRODUCING, False): TenGod.SHANG_GUAN,
    (ElementRelation.ME_CONTROLLING, True): TenGod.PIAN_CAI,
    (ElementRelation.ME_CONTROLLING, False): TenGod.ZHENG_CAI,
    (ElementRelation.PRODUCING_ME, True): TenGod.PIAN_YIN,
    (ElementRelation.PRODUCING_ME, False): TenGod.ZHENG_YIN,
    (ElementRelation.CONTROLLING_ME, True): TenGod.QI_SHA,
    (ElementRelation.CONTROLLING_ME, False): TenGod.ZHENG_GUAN,
}


def classify(day_master: Stem, other: Stem) -> TenGod:
    """
    计算十神

    Args:
        day_master: 日干
        other: 目标天干

    Returns:
        TenGod: 十神（对全部 10x10 天干组合均有定义）
    """
    if day_master is other:
        return TenGod.BI_JIAN

    relation = get_element_relation(day_master.element, other.element)
    same_polarity = day_master.polarity is other.polarity
    return _TEN_GOD_BY_RELATION[(relation, same_polarity)]


def get_main_star(day_master: Stem, target_stem: Stem, is_day_pillar: bool = False) -> TenGod:
    """计算主星（天干十神），日柱天干本身标注为日主"""
    if is_day_pillar:
        return TenGod.SELF
    return classify(day_master, target_stem)


def get_branch_ten_gods(day_master: Stem, branch: Branch) -> Tuple[TenGod, ...]:
    """
    计算地支藏干的十神（副星）

    Returns:
        按藏干顺序（本气、中气、余气）排列的十神
    """
    return tuple(classify(day_master, hidden) for hidden in HIDDEN_STEMS[branch])
