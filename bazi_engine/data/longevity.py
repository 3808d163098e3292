#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
十二长生表

阳干（甲丙戊庚壬）顺行，阴干（乙丁己辛癸）逆行。
每个天干的序列从各自的长生位开始，依次对应 LIFE_STAGES 的十二个阶段。
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Tuple

from .constants import Branch, Stem


class LifeStage(str, Enum):
    """十二长生阶段"""
    CHANG_SHENG = '长生'
    MU_YU = '沐浴'
    GUAN_DAI = '冠带'
    LIN_GUAN = '临官'
    DI_WANG = '帝旺'
    SHUAI = '衰'
    BING = '病'
    SI = '死'
    MU = '墓'
    JUE = '绝'
    TAI = '胎'
    YANG = '养'

    def __str__(self):
        return self.value


LIFE_STAGES: Tuple[LifeStage, ...] = tuple(LifeStage)

# 得令：临官、帝旺、长生、冠带、沐浴
ASCENDING_STAGES = frozenset({
    LifeStage.LIN_GUAN, LifeStage.DI_WANG, LifeStage.CHANG_SHENG,
    LifeStage.GUAN_DAI, LifeStage.MU_YU,
})

# 失令：衰、病、死、墓、绝、胎、养
DESCENDING_STAGES = frozenset({
    LifeStage.SHUAI, LifeStage.BING, LifeStage.SI, LifeStage.MU,
    LifeStage.JUE, LifeStage.TAI, LifeStage.YANG,
})

_B = Branch

# 各天干的长生位
LONGEVITY_ANCHORS: Dict[Stem, Branch] = MappingProxyType({
    Stem.JIA: _B.HAI,
    Stem.BING: _B.YIN,
    Stem.WU: _B.YIN,
    Stem.GENG: _B.SI,
    Stem.REN: _B.SHEN,
    Stem.YI: _B.WU,
    Stem.DING: _B.YOU,
    Stem.JI: _B.YOU,
    Stem.XIN: _B.ZI,
    Stem.GUI: _B.MAO,
})

LONGEVITY_SEQUENCES: Dict[Stem, Tuple[Branch, ...]] = MappingProxyType({
    # 阳干顺行
    Stem.JIA: (_B.HAI, _B.ZI, _B.CHOU, _B.YIN, _B.MAO, _B.CHEN,
               _B.SI, _B.WU, _B.WEI, _B.SHEN, _B.YOU, _B.XU),
    Stem.BING: (_B.YIN, _B.MAO, _B.CHEN, _B.SI, _B.WU, _B.WEI,
                _B.SHEN, _B.YOU, _B.XU, _B.HAI, _B.ZI, _B.CHOU),
    Stem.WU: (_B.YIN, _B.MAO, _B.CHEN, _B.SI, _B.WU, _B.WEI,
              _B.SHEN, _B.YOU, _B.XU, _B.HAI, _B.ZI, _B.CHOU),
    Stem.GENG: (_B.SI, _B.WU, _B.WEI, _B.SHEN, _B.YOU, _B.XU,
                _B.HAI, _B.ZI, _B.CHOU, _B.YIN, _B.MAO, _B.CHEN),
    Stem.REN: (_B.SHEN, _B.YOU, _B.XU, _B.HAI, _B.ZI, _B.CHOU,
               _B.YIN, _B.MAO, _B.CHEN, _B.SI, _B.WU, _B.WEI),
    # 阴干逆行
    Stem.YI: (_B.WU, _B.SI, _B.CHEN, _B.MAO, _B.YIN, _B.CHOU,
              _B.ZI, _B.HAI, _B.XU, _B.YOU, _B.SHEN, _B.WEI),
    Stem.DING: (_B.YOU, _B.SHEN, _B.WEI, _B.WU, _B.SI, _B.CHEN,
                _B.MAO, _B.YIN, _B.CHOU, _B.ZI, _B.HAI, _B.XU),
    Stem.JI: (_B.YOU, _B.SHEN, _B.WEI, _B.WU, _B.SI, _B.CHEN,
              _B.MAO, _B.YIN, _B.CHOU, _B.ZI, _B.HAI, _B.XU),
    Stem.XIN: (_B.ZI, _B.HAI, _B.XU, _B.YOU, _B.SHEN, _B.WEI,
               _B.WU, _B.SI, _B.CHEN, _B.MAO, _B.YIN, _B.CHOU),
    Stem.GUI: (_B.MAO, _B.YIN, _B.CHOU, _B.ZI, _B.HAI, _B.XU,
               _B.YOU, _B.SHEN, _B.WEI, _B.WU, _B.SI, _B.CHEN),
})

# (天干, 地支) -> 长生阶段，由上表展开
LONGEVITY_TABLE: Dict[Tuple[Stem, Branch], LifeStage] = MappingProxyType({
    (stem, branch): LIFE_STAGES[position]
    for stem, sequence in LONGEVITY_SEQUENCES.items()
    for position, branch in enumerate(sequence)
})
