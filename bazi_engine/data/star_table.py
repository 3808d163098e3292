#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
神煞对照表（以日干查询）

每个日干下按固定顺序列出神煞及其引动地支。
"""

from types import MappingProxyType
from typing import Dict, Tuple

from .constants import Branch, Stem

# 神煞名称（顺序即扫描顺序）
STAR_NAMES: Tuple[str, ...] = (
    '天乙贵人', '太极贵人', '文昌贵人', '将星', '华盖', '咸池', '驿马', '灾煞',
)

_RAW_STAR_TABLE = {
    '甲': ('丑未', '子午', '巳', '子', '戌', '酉', '寅', '午'),
    '乙': ('子申', '卯酉', '午', '酉', '未', '午', '亥', '卯'),
    '丙': ('亥酉', '卯酉', '申', '午', '辰', '卯', '巳', '子'),
    '丁': ('亥酉', '子午', '酉', '卯', '丑', '子', '申', '酉'),
    '戊': ('丑未', '卯酉', '申', '午', '辰', '卯', '巳', '子'),
    '己': ('子申', '子午', '酉', '卯', '丑', '子', '申', '酉'),
    '庚': ('丑未', '子午', '亥', '子', '戌', '酉', '寅', '午'),
    '辛': ('寅午', '卯酉', '子', '酉', '未', '午', '亥', '卯'),
    '壬': ('卯巳', '子午', '寅', '午', '辰', '卯', '巳', '子'),
    '癸': ('卯巳', '卯酉', '卯', '卯', '丑', '子', '申', '酉'),
}


def _build_star_table() -> Dict[Stem, Dict[str, Tuple[Branch, ...]]]:
    table = {}
    for stem, triggers in _RAW_STAR_TABLE.items():
        table[Stem(stem)] = MappingProxyType({
            name: tuple(Branch(ch) for ch in branches)
            for name, branches in zip(STAR_NAMES, triggers)
        })
    return MappingProxyType(table)


STAR_TABLE: Dict[Stem, Dict[str, Tuple[Branch, ...]]] = _build_star_table()
