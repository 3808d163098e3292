#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
空亡对照表（以日柱查询）

六十甲子每旬十日，余下两支为该旬空亡。
"""

from types import MappingProxyType
from typing import Dict, Tuple

from .constants import Branch, Stem

_RAW_VOID_TABLE = {
    '甲子': '戌亥', '甲戌': '申酉', '甲申': '午未', '甲午': '辰巳', '甲辰': '寅卯', '甲寅': '子丑',
    '乙丑': '戌亥', '乙亥': '申酉', '乙酉': '午未', '乙未': '辰巳', '乙巳': '寅卯', '乙卯': '子丑',
    '丙寅': '戌亥', '丙子': '申酉', '丙戌': '午未', '丙申': '辰巳', '丙午': '寅卯', '丙辰': '子丑',
    '丁卯': '戌亥', '丁丑': '申酉', '丁亥': '午未', '丁酉': '辰巳', '丁未': '寅卯', '丁巳': '子丑',
    '戊辰': '戌亥', '戊寅': '申酉', '戊子': '午未', '戊戌': '辰巳', '戊申': '寅卯', '戊午': '子丑',
    '己巳': '戌亥', '己卯': '申酉', '己丑': '午未', '己亥': '辰巳', '己酉': '寅卯', '己未': '子丑',
    '庚午': '戌亥', '庚辰': '申酉', '庚寅': '午未', '庚子': '辰巳', '庚戌': '寅卯', '庚申': '子丑',
    '辛未': '戌亥', '辛巳': '申酉', '辛卯': '午未', '辛丑': '辰巳', '辛亥': '寅卯', '辛酉': '子丑',
    '壬申': '戌亥', '壬午': '申酉', '壬辰': '午未', '壬寅': '辰巳', '壬子': '寅卯', '壬戌': '子丑',
    '癸酉': '戌亥', '癸未': '申酉', '癸巳': '午未', '癸卯': '辰巳', '癸丑': '寅卯', '癸亥': '子丑',
}

VOID_TABLE: Dict[Tuple[Stem, Branch], Tuple[Branch, Branch]] = MappingProxyType({
    (Stem(pillar[0]), Branch(pillar[1])): (Branch(pair[0]), Branch(pair[1]))
    for pillar, pair in _RAW_VOID_TABLE.items()
})
