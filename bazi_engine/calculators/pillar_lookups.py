#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
单柱查询：十二长生、自坐、空亡、神煞、纳音

全部为纯函数，只读取 data 包中的静态表。
"""

import logging
from typing import Dict, Iterable, Optional, Tuple

from ..data.constants import HIDDEN_STEMS, YANG_STEM_OF_ELEMENT, Branch, Element, Stem
from ..data.longevity import LONGEVITY_TABLE, LifeStage
from ..data.nayin import NAYIN_TABLE
from ..data.star_table import STAR_NAMES, STAR_TABLE
from ..data.void_table import VOID_TABLE
from ..exceptions import IncompleteInputError
from ..models.chart import SelfSeat, SelfSeatKind

logger = logging.getLogger(__name__)


def longevity_stage(stem: Stem, branch: Branch) -> Optional[LifeStage]:
    """天干在地支上的十二长生阶段，无法识别的符号返回 None"""
    return LONGEVITY_TABLE.get((stem, branch))


def element_longevity_stage(element: Element, branch: Branch) -> Optional[LifeStage]:
    """五行通用的十二长生（取该五行阳干的序列）"""
    yang_stem = YANG_STEM_OF_ELEMENT.get(element)
    if yang_stem is None:
        return None
    return longevity_stage(yang_stem, branch)


def self_seat(stem: Stem, branch: Branch) -> SelfSeat:
    """
    自坐

    - 天干在本柱地支藏干中：自坐本气
    - 否则按天干五行取十二长生：自坐<阶段>
    - 都查不到：空
    """
    if stem in HIDDEN_STEMS.get(branch, ()):
        return SelfSeat(kind=SelfSeatKind.ROOTED)

    stage = element_longevity_stage(stem.element, branch)
    if stage is not None:
        return SelfSeat(kind=SelfSeatKind.STAGE, stage=stage)
    return SelfSeat(kind=SelfSeatKind.NONE)


def void_branches(day_stem: Stem, day_branch: Branch, strict: bool = False) -> Tuple[Branch, ...]:
    """
    以日柱查空亡

    Args:
        day_stem: 日干
        day_branch: 日支
        strict: 为 True 时，非六十甲子的日柱抛出 IncompleteInputError

    Returns:
        两个空亡地支；查不到时为空元组
    """
    pair = VOID_TABLE.get((day_stem, day_branch))
    if pair is not None:
        return pair

    key = f"{day_stem.value}{day_branch.value}"
    if strict:
        raise IncompleteInputError(f"空亡表中没有日柱 {key}", key=key)
    logger.warning(f"⚠️  日柱 {key} 不在六十甲子中，空亡为空")
    return ()


def is_void(day_stem: Stem, day_branch: Branch, branch: Branch, strict: bool = False) -> bool:
    """地支是否落空亡"""
    return branch in void_branches(day_stem, day_branch, strict=strict)


def activated_stars(day_master: Stem, branches: Iterable[Branch]) -> Dict[str, Branch]:
    """
    查找被引动的神煞

    按神煞表顺序逐个神煞扫描年、月、日、时四支，每个神煞取第一个命中的地支，
    之后的命中不覆盖。

    Returns:
        {神煞名: 引动地支}，按神煞表顺序
    """
    table = STAR_TABLE.get(day_master)
    if table is None:
        return {}

    branches = tuple(branches)
    found = {}
    for name in STAR_NAMES:
        triggers = table[name]
        for branch in branches:
            if branch in triggers:
                found[name] = branch
                break
    return found


def nayin_of(stem: Stem, branch: Branch) -> str:
    """纳音，非六十甲子组合返回空字符串"""
    return NAYIN_TABLE.get((stem, branch), '')
