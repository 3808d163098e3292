#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
分析结果模型：旺衰、喜忌、格局、综合报告
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from ..data.constants import Branch, Element, Stem, TenGod
from ..data.longevity import LifeStage
from .chart import AnnotatedChart, PillarRole


class Strength(str, Enum):
    """日主旺衰"""
    STRONG = '身旺'
    WEAK = '身弱'
    BALANCED = '中和'

    def __str__(self):
        return self.value


class SupportLevel(str, Enum):
    """得地/得势/得助的力度"""
    STRONG = '强'
    WEAK = '弱'
    NONE = '无'

    def __str__(self):
        return self.value


class VitalityScore(BaseModel):
    """旺衰四维评估结果"""
    model_config = ConfigDict(frozen=True)

    command: bool
    command_stage: Optional[LifeStage] = None
    root: SupportLevel
    root_count: int = 0
    dominant_root_count: int = 0
    allies: SupportLevel
    allies_count: int = 0
    support: SupportLevel
    support_count: int = 0
    strength: Strength

    @property
    def has_root(self) -> bool:
        return self.root is not SupportLevel.NONE

    @property
    def has_allies(self) -> bool:
        return self.allies is not SupportLevel.NONE

    @property
    def has_support(self) -> bool:
        return self.support is not SupportLevel.NONE


class TenGodGroup(str, Enum):
    """十神五类"""
    OFFICER = '官杀'
    WEALTH = '财星'
    OUTPUT = '食伤'
    RESOURCE = '印星'
    COMPANION = '比劫'

    @property
    def ten_gods(self) -> Tuple[TenGod, TenGod]:
        return TEN_GOD_GROUPS[self]

    def __str__(self):
        return self.value


TEN_GOD_GROUPS = {
    TenGodGroup.OFFICER: (TenGod.QI_SHA, TenGod.ZHENG_GUAN),
    TenGodGroup.WEALTH: (TenGod.PIAN_CAI, TenGod.ZHENG_CAI),
    TenGodGroup.OUTPUT: (TenGod.SHI_SHEN, TenGod.SHANG_GUAN),
    TenGodGroup.RESOURCE: (TenGod.PIAN_YIN, TenGod.ZHENG_YIN),
    TenGodGroup.COMPANION: (TenGod.BI_JIAN, TenGod.JIE_CAI),
}


class ElementEntry(BaseModel):
    """喜忌条目：五行 + 所代表的十神类别"""
    model_config = ConfigDict(frozen=True)

    element: Element
    group: TenGodGroup

    @property
    def label(self) -> str:
        return f"{self.group.value}({self.element.value})"


class ElementPreference(BaseModel):
    """喜用神 / 忌神"""
    model_config = ConfigDict(frozen=True)

    strength: Strength
    day_master_element: Element
    favorable: Tuple[ElementEntry, ...] = ()
    unfavorable: Tuple[ElementEntry, ...] = ()

    @property
    def requires_pattern_analysis(self) -> bool:
        """中和命局没有通用喜忌规则，需结合格局组合具体分析"""
        return not self.favorable and not self.unfavorable

    @property
    def favorable_elements(self) -> Tuple[Element, ...]:
        return tuple(e.element for e in self.favorable)

    @property
    def unfavorable_elements(self) -> Tuple[Element, ...]:
        return tuple(e.element for e in self.unfavorable)

    @property
    def favorable_ten_gods(self) -> Tuple[TenGod, ...]:
        return tuple(g for e in self.favorable for g in e.group.ten_gods)

    @property
    def unfavorable_ten_gods(self) -> Tuple[TenGod, ...]:
        return tuple(g for e in self.unfavorable for g in e.group.ten_gods)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'strength': self.strength.value,
            'day_master_element': self.day_master_element.value,
            'xi_shen': [g.value for g in self.favorable_ten_gods],
            'ji_shen': [g.value for g in self.unfavorable_ten_gods],
            'xi_shen_elements': [e.value for e in self.favorable_elements],
            'ji_shen_elements': [e.value for e in self.unfavorable_elements],
        }


class AuspiciousPattern(str, Enum):
    """吉神组合"""
    EATING_GOD_RESTRAINS_KILLINGS = '食神制杀'
    HURTING_OFFICER_WITH_RESOURCE = '伤官配印'
    EATING_GOD_GENERATES_WEALTH = '食神生财'


class InauspiciousPattern(str, Enum):
    """凶神组合"""
    HURTING_OFFICER_CONFRONTS_OFFICER = '伤官见官'
    INDIRECT_RESOURCE_SNATCHES_FOOD = '枭神夺食'
    PEERS_SNATCH_WEALTH = '比劫夺财'


class BranchClash(BaseModel):
    """地支六冲"""
    model_config = ConfigDict(frozen=True)

    first_role: PillarRole
    second_role: PillarRole
    first: Branch
    second: Branch

    @property
    def description(self) -> str:
        return f"{self.first.value}与{self.second.value}相冲"


class PatternReport(BaseModel):
    """格局组合分析结果"""
    model_config = ConfigDict(frozen=True)

    month_branch: Branch
    month_hidden_stems: Tuple[Stem, ...] = ()
    month_main_ten_god: Optional[TenGod] = None
    auspicious: Optional[AuspiciousPattern] = None
    inauspicious: Optional[InauspiciousPattern] = None
    clashes: Tuple[BranchClash, ...] = ()

    @property
    def auspicious_label(self) -> str:
        return self.auspicious.value if self.auspicious else ''

    @property
    def inauspicious_label(self) -> str:
        return self.inauspicious.value if self.inauspicious else ''

    @property
    def clash_descriptions(self) -> List[str]:
        return [clash.description for clash in self.clashes]


class WuxingScoreResult(BaseModel):
    """五行计数法喜用神（快速查询）"""
    model_config = ConfigDict(frozen=True)

    day_master: Stem
    day_master_strength: str
    scores: Tuple[Tuple[Element, int], ...]
    favorable_element: Element
    logic: Tuple[str, ...] = ()

    @property
    def score_map(self) -> Dict[str, int]:
        return {element.value: count for element, count in self.scores}


class AnalysisStep(BaseModel):
    """分析步骤：标题 + 文本行"""
    model_config = ConfigDict(frozen=True)

    title: str
    lines: Tuple[str, ...] = ()


class AnalysisReport(BaseModel):
    """四柱八字五步综合分析报告"""
    model_config = ConfigDict(frozen=True)

    name: str = ''
    steps: Tuple[AnalysisStep, ...]
    chart: AnnotatedChart
    vitality: VitalityScore
    preference: ElementPreference
    patterns: PatternReport

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'steps': [{'title': s.title, 'content': list(s.lines)} for s in self.steps],
        }
