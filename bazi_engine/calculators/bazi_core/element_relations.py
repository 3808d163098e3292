#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行生克关系模块

提供五行生克关系的常量定义和计算函数。
"""

from enum import Enum
from types import MappingProxyType

from ...data.constants import GENERATING_CYCLE, RESTRAINING_CYCLE, Element


class ElementRelation(str, Enum):
    """以日主为"我"的五行关系"""
    SAME = 'same'                        # 同我
    ME_PRODUCING = 'me_producing'        # 我生
    ME_CONTROLLING = 'me_controlling'    # 我克
    PRODUCING_ME = 'producing_me'        # 生我
    CONTROLLING_ME = 'controlling_me'    # 克我


# 五行生克关系定义
ELEMENT_RELATIONS = MappingProxyType({
    element: MappingProxyType({
        'produces': GENERATING_CYCLE[element],
        'controls': RESTRAINING_CYCLE[element],
        'produced_by': next(e for e, t in GENERATING_CYCLE.items() if t is element),
        'controlled_by': next(e for e, t in RESTRAINING_CYCLE.items() if t is element),
    })
    for element in Element
})


def get_element_relation(day_element: Element, target_element: Element) -> ElementRelation:
    """
    判断五行生克关系

    五种关系恰好划分全部 25 个五行对，因此本函数是全函数。

    Args:
        day_element: 日主五行
        target_element: 目标五行

    Returns:
        ElementRelation: 关系类型
    """
    if day_element is target_element:
        return ElementRelation.SAME

    relations = ELEMENT_RELATIONS[day_element]

    if target_element is relations['produces']:
        return ElementRelation.ME_PRODUCING
    elif target_element is relations['controls']:
        return ElementRelation.ME_CONTROLLING
    elif target_element is relations['produced_by']:
        return ElementRelation.PRODUCING_ME
    return ElementRelation.CONTROLLING_ME


def get_producing_element(element: Element) -> Element:
    """获取被生的元素（我生）"""
    return ELEMENT_RELATIONS[element]['produces']


def get_controlled_element(element: Element) -> Element:
    """获取被克的元素（我克）"""
    return ELEMENT_RELATIONS[element]['controls']


def get_producing_from_element(element: Element) -> Element:
    """获取生我的元素"""
    return ELEMENT_RELATIONS[element]['produced_by']


def get_controlled_by_element(element: Element) -> Element:
    """获取克我的元素"""
    return ELEMENT_RELATIONS[element]['controlled_by']
