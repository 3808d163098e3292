#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
六十甲子纳音表

每两个相邻干支共用一个纳音，甲子乙丑海中金起。
"""

from types import MappingProxyType
from typing import Dict, Tuple

from .constants import EARTHLY_BRANCHES, HEAVENLY_STEMS, Branch, Stem

_NAYIN_NAMES = (
    '海中金', '炉中火', '大林木', '路旁土', '剑锋金',
    '山头火', '涧下水', '城头土', '白蜡金', '杨柳木',
    '泉中水', '屋上土', '霹雳火', '松柏木', '长流水',
    '砂中金', '山下火', '平地木', '壁上土', '金箔金',
    '覆灯火', '天河水', '大驿土', '钗钏金', '桑柘木',
    '大溪水', '沙中土', '天上火', '石榴木', '大海水',
)

NAYIN_TABLE: Dict[Tuple[Stem, Branch], str] = MappingProxyType({
    (HEAVENLY_STEMS[i % 10], EARTHLY_BRANCHES[i % 12]): _NAYIN_NAMES[i // 2]
    for i in range(60)
})
