#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字引擎数据模型
"""

from .chart import (
    ActivatedStar,
    AnnotatedChart,
    AnnotatedPillar,
    Chart,
    Pillar,
    PillarRole,
    PILLAR_ROLES,
    SelfSeat,
    SelfSeatKind,
)
from .analysis import (
    AnalysisReport,
    AnalysisStep,
    AuspiciousPattern,
    BranchClash,
    ElementEntry,
    ElementPreference,
    InauspiciousPattern,
    PatternReport,
    Strength,
    SupportLevel,
    TenGodGroup,
    VitalityScore,
    WuxingScoreResult,
)

__all__ = [
    'ActivatedStar',
    'AnnotatedChart',
    'AnnotatedPillar',
    'Chart',
    'Pillar',
    'PillarRole',
    'PILLAR_ROLES',
    'SelfSeat',
    'SelfSeatKind',
    'AnalysisReport',
    'AnalysisStep',
    'AuspiciousPattern',
    'BranchClash',
    'ElementEntry',
    'ElementPreference',
    'InauspiciousPattern',
    'PatternReport',
    'Strength',
    'SupportLevel',
    'TenGodGroup',
    'VitalityScore',
    'WuxingScoreResult',
]
