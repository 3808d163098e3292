#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字静态数据表（进程内只读常量）
"""

from .constants import (
    Branch,
    Element,
    Polarity,
    Stem,
    TenGod,
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    HIDDEN_STEMS,
    TEN_GODS,
)
from .longevity import LifeStage, LIFE_STAGES, LONGEVITY_SEQUENCES
from .void_table import VOID_TABLE
from .star_table import STAR_TABLE, STAR_NAMES
from .nayin import NAYIN_TABLE

__all__ = [
    'Branch',
    'Element',
    'Polarity',
    'Stem',
    'TenGod',
    'EARTHLY_BRANCHES',
    'HEAVENLY_STEMS',
    'HIDDEN_STEMS',
    'TEN_GODS',
    'LifeStage',
    'LIFE_STAGES',
    'LONGEVITY_SEQUENCES',
    'VOID_TABLE',
    'STAR_TABLE',
    'STAR_NAMES',
    'NAYIN_TABLE',
]
