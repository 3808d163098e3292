#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字核心计算模块

提供八字计算的核心功能：
- 五行关系计算
- 十神计算
"""

from .element_relations import (
    ELEMENT_RELATIONS,
    ElementRelation,
    get_element_relation,
    get_producing_element,
    get_controlled_element,
    get_producing_from_element,
    get_controlled_by_element,
)
from .ten_gods import (
    classify,
    get_main_star,
    get_branch_ten_gods,
)

__all__ = [
    'ELEMENT_RELATIONS',
    'ElementRelation',
    'get_element_relation',
    'get_producing_element',
    'get_controlled_element',
    'get_producing_from_element',
    'get_controlled_by_element',
    'classify',
    'get_main_star',
    'get_branch_ten_gods',
]
