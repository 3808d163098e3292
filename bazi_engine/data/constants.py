#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
天干地支基础常量

天干、地支、五行、阴阳、十神均为封闭集合，使用 str 枚举表示，
枚举值即汉字本身，因此 Stem('甲') 与 '甲' 可以互相比较、互相作为字典键。
所有表在导入时构建一次，之后只读（MappingProxyType）。
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Tuple


class Element(str, Enum):
    """五行"""
    WOOD = '木'
    FIRE = '火'
    EARTH = '土'
    METAL = '金'
    WATER = '水'

    def __str__(self):
        return self.value


class Polarity(str, Enum):
    """阴阳"""
    YANG = '阳'
    YIN = '阴'

    def __str__(self):
        return self.value


class Stem(str, Enum):
    """天干（顺序固定）"""
    JIA = '甲'
    YI = '乙'
    BING = '丙'
    DING = '丁'
    WU = '戊'
    JI = '己'
    GENG = '庚'
    XIN = '辛'
    REN = '壬'
    GUI = '癸'

    @property
    def order(self) -> int:
        return HEAVENLY_STEMS.index(self)

    @property
    def element(self) -> Element:
        return STEM_ELEMENTS[self]

    @property
    def polarity(self) -> Polarity:
        return STEM_POLARITY[self]

    def __str__(self):
        return self.value


class Branch(str, Enum):
    """地支（顺序固定）"""
    ZI = '子'
    CHOU = '丑'
    YIN = '寅'
    MAO = '卯'
    CHEN = '辰'
    SI = '巳'
    WU = '午'
    WEI = '未'
    SHEN = '申'
    YOU = '酉'
    XU = '戌'
    HAI = '亥'

    @property
    def order(self) -> int:
        return EARTHLY_BRANCHES.index(self)

    @property
    def element(self) -> Element:
        return BRANCH_ELEMENTS[self]

    @property
    def hidden_stems(self) -> Tuple[Stem, ...]:
        return HIDDEN_STEMS[self]

    @property
    def main_qi(self) -> Stem:
        """本气（藏干第一位）"""
        return HIDDEN_STEMS[self][0]

    def __str__(self):
        return self.value


class TenGod(str, Enum):
    """十神；SELF 仅用于标注日柱天干本身，不是分类结果"""
    BI_JIAN = '比肩'
    JIE_CAI = '劫财'
    SHI_SHEN = '食神'
    SHANG_GUAN = '伤官'
    PIAN_CAI = '偏财'
    ZHENG_CAI = '正财'
    QI_SHA = '七杀'
    ZHENG_GUAN = '正官'
    PIAN_YIN = '偏印'
    ZHENG_YIN = '正印'
    SELF = '日主'

    def __str__(self):
        return self.value


HEAVENLY_STEMS: Tuple[Stem, ...] = tuple(Stem)
EARTHLY_BRANCHES: Tuple[Branch, ...] = tuple(Branch)
ELEMENTS: Tuple[Element, ...] = tuple(Element)

# 十种分类结果（不含 SELF）
TEN_GODS: Tuple[TenGod, ...] = tuple(g for g in TenGod if g is not TenGod.SELF)

STEM_ELEMENTS: Dict[Stem, Element] = MappingProxyType({
    Stem.JIA: Element.WOOD, Stem.YI: Element.WOOD,
    Stem.BING: Element.FIRE, Stem.DING: Element.FIRE,
    Stem.WU: Element.EARTH, Stem.JI: Element.EARTH,
    Stem.GENG: Element.METAL, Stem.XIN: Element.METAL,
    Stem.REN: Element.WATER, Stem.GUI: Element.WATER,
})

STEM_POLARITY: Dict[Stem, Polarity] = MappingProxyType({
    stem: Polarity.YANG if i % 2 == 0 else Polarity.YIN
    for i, stem in enumerate(HEAVENLY_STEMS)
})

BRANCH_ELEMENTS: Dict[Branch, Element] = MappingProxyType({
    Branch.ZI: Element.WATER,
    Branch.CHOU: Element.EARTH,
    Branch.YIN: Element.WOOD,
    Branch.MAO: Element.WOOD,
    Branch.CHEN: Element.EARTH,
    Branch.SI: Element.FIRE,
    Branch.WU: Element.FIRE,
    Branch.WEI: Element.EARTH,
    Branch.SHEN: Element.METAL,
    Branch.YOU: Element.METAL,
    Branch.XU: Element.EARTH,
    Branch.HAI: Element.WATER,
})

BRANCH_POLARITY: Dict[Branch, Polarity] = MappingProxyType({
    branch: Polarity.YANG if i % 2 == 0 else Polarity.YIN
    for i, branch in enumerate(EARTHLY_BRANCHES)
})

# 地支藏干：本气、中气、余气
HIDDEN_STEMS: Dict[Branch, Tuple[Stem, ...]] = MappingProxyType({
    Branch.ZI: (Stem.GUI,),
    Branch.CHOU: (Stem.JI, Stem.XIN, Stem.GUI),
    Branch.YIN: (Stem.JIA, Stem.BING, Stem.WU),
    Branch.MAO: (Stem.YI,),
    Branch.CHEN: (Stem.WU, Stem.YI, Stem.GUI),
    Branch.SI: (Stem.BING, Stem.WU, Stem.GENG),
    Branch.WU: (Stem.DING, Stem.JI),
    Branch.WEI: (Stem.JI, Stem.DING, Stem.YI),
    Branch.SHEN: (Stem.GENG, Stem.REN, Stem.WU),
    Branch.YOU: (Stem.XIN,),
    Branch.XU: (Stem.WU, Stem.XIN, Stem.DING),
    Branch.HAI: (Stem.REN, Stem.JIA),
})

# 五行相生：木→火→土→金→水→木
GENERATING_CYCLE: Dict[Element, Element] = MappingProxyType({
    Element.WOOD: Element.FIRE,
    Element.FIRE: Element.EARTH,
    Element.EARTH: Element.METAL,
    Element.METAL: Element.WATER,
    Element.WATER: Element.WOOD,
})

# 五行相克：木→土→水→火→金→木
RESTRAINING_CYCLE: Dict[Element, Element] = MappingProxyType({
    Element.WOOD: Element.EARTH,
    Element.EARTH: Element.WATER,
    Element.WATER: Element.FIRE,
    Element.FIRE: Element.METAL,
    Element.METAL: Element.WOOD,
})

# 各五行对应的阳干，用于五行通用的十二长生
YANG_STEM_OF_ELEMENT: Dict[Element, Stem] = MappingProxyType({
    STEM_ELEMENTS[stem]: stem
    for stem in HEAVENLY_STEMS if STEM_POLARITY[stem] is Polarity.YANG
})

# 六冲
CLASH_PAIRS: Tuple[Tuple[Branch, Branch], ...] = (
    (Branch.ZI, Branch.WU),
    (Branch.CHOU, Branch.WEI),
    (Branch.YIN, Branch.SHEN),
    (Branch.MAO, Branch.YOU),
    (Branch.CHEN, Branch.XU),
    (Branch.SI, Branch.HAI),
)


def is_sexagenary(stem: Stem, branch: Branch) -> bool:
    """是否为六十甲子中的合法组合（干支阴阳相同）"""
    return STEM_POLARITY[stem] is BRANCH_POLARITY[branch]


def sexagenary_index(stem: Stem, branch: Branch) -> int:
    """六十甲子序号（甲子=0），非法组合返回 -1"""
    if not is_sexagenary(stem, branch):
        return -1
    s, b = stem.order, branch.order
    for i in range(s, 60, 10):
        if i % 12 == b:
            return i
    return -1
