#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命盘数据模型

Pillar / Chart 为输入，AnnotatedPillar / AnnotatedChart 为排盘注解结果。
所有模型均为不可变（frozen），集合字段使用 tuple。
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..data.constants import Branch, Element, Stem, TenGod
from ..data.longevity import LifeStage


class PillarRole(str, Enum):
    """柱位"""
    YEAR = 'year'
    MONTH = 'month'
    DAY = 'day'
    HOUR = 'hour'

    @property
    def label(self) -> str:
        return PILLAR_LABELS[self]

    def __str__(self):
        return self.value


PILLAR_ROLES: Tuple[PillarRole, ...] = tuple(PillarRole)

PILLAR_LABELS = {
    PillarRole.YEAR: '年柱',
    PillarRole.MONTH: '月柱',
    PillarRole.DAY: '日柱',
    PillarRole.HOUR: '时柱',
}


class Pillar(BaseModel):
    """一柱：天干 + 地支 + 柱位"""
    model_config = ConfigDict(frozen=True)

    stem: Stem
    branch: Branch
    role: PillarRole

    @property
    def ganzhi(self) -> str:
        return f"{self.stem.value}{self.branch.value}"


class Chart(BaseModel):
    """四柱命盘（年、月、日、时，顺序固定）"""
    model_config = ConfigDict(frozen=True)

    pillars: Tuple[Pillar, ...]

    @field_validator('pillars')
    @classmethod
    def _check_roles(cls, pillars):
        if len(pillars) != len(PILLAR_ROLES):
            raise ValueError(f"四柱数量错误：需要4柱，实际{len(pillars)}柱")
        roles = tuple(p.role for p in pillars)
        if roles != PILLAR_ROLES:
            raise ValueError(f"柱位顺序错误：{[r.value for r in roles]}")
        return pillars

    def pillar(self, role: PillarRole) -> Pillar:
        return self.pillars[PILLAR_ROLES.index(role)]

    @property
    def day_master(self) -> Stem:
        return self.pillar(PillarRole.DAY).stem

    @property
    def branches(self) -> Tuple[Branch, ...]:
        return tuple(p.branch for p in self.pillars)


class SelfSeatKind(str, Enum):
    """自坐类型"""
    ROOTED = 'rooted'
    STAGE = 'stage'
    NONE = 'none'


class SelfSeat(BaseModel):
    """自坐：天干在本柱地支的状态"""
    model_config = ConfigDict(frozen=True)

    kind: SelfSeatKind
    stage: Optional[LifeStage] = None

    @property
    def label(self) -> str:
        if self.kind is SelfSeatKind.ROOTED:
            return '自坐本气'
        if self.kind is SelfSeatKind.STAGE:
            return f"自坐{self.stage.value}"
        return ''


class ActivatedStar(BaseModel):
    """被引动的神煞"""
    model_config = ConfigDict(frozen=True)

    name: str
    branch: Branch
    role: PillarRole


class AnnotatedPillar(BaseModel):
    """排盘注解后的一柱"""
    model_config = ConfigDict(frozen=True)

    pillar: Pillar
    stem_element: Element
    branch_element: Element
    ten_god: TenGod
    hidden_stems: Tuple[Stem, ...]
    hidden_ten_gods: Tuple[TenGod, ...]
    life_stage: Optional[LifeStage] = None
    self_seat: SelfSeat
    is_void: bool = False
    stars: Tuple[str, ...] = ()
    nayin: str = ''

    @property
    def role(self) -> PillarRole:
        return self.pillar.role

    @property
    def stem(self) -> Stem:
        return self.pillar.stem

    @property
    def branch(self) -> Branch:
        return self.pillar.branch

    def to_dict(self) -> Dict[str, Any]:
        return {
            'role': self.role.value,
            'stem': self.stem.value,
            'branch': self.branch.value,
            'stem_element': self.stem_element.value,
            'branch_element': self.branch_element.value,
            'main_star': self.ten_god.value,
            'hidden_stems': [s.value for s in self.hidden_stems],
            'hidden_stars': [g.value for g in self.hidden_ten_gods],
            'life_stage': self.life_stage.value if self.life_stage else '',
            'self_seat': self.self_seat.label,
            'is_void': self.is_void,
            'stars': list(self.stars),
            'nayin': self.nayin,
        }


class AnnotatedChart(BaseModel):
    """排盘注解后的完整命盘"""
    model_config = ConfigDict(frozen=True)

    chart: Chart
    pillars: Tuple[AnnotatedPillar, ...]
    activated_stars: Tuple[ActivatedStar, ...] = ()
    void_branches: Tuple[Branch, ...] = Field(default=())

    def pillar(self, role: PillarRole) -> AnnotatedPillar:
        return self.pillars[PILLAR_ROLES.index(role)]

    @property
    def day_master(self) -> Stem:
        return self.chart.day_master

    @property
    def day_master_element(self) -> Element:
        return self.chart.day_master.element

    @property
    def star_map(self) -> Dict[str, Branch]:
        return {star.name: star.branch for star in self.activated_stars}

    @property
    def life_stages(self) -> Dict[str, str]:
        """十二长生：日主在四柱地支上的状态，按柱位名称索引"""
        return {
            p.role.label: p.life_stage.value if p.life_stage else ''
            for p in self.pillars
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            'day_master': self.day_master.value,
            'pillars': [p.to_dict() for p in self.pillars],
            'stars': {name: branch.value for name, branch in self.star_map.items()},
            'void_branches': [b.value for b in self.void_branches],
            'life_stages': self.life_stages,
        }
