#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字引擎异常定义

- MalformedChartError: 四柱数量/顺序错误，或天干地支不在合法字符集内
- IncompleteInputError: 静态表中查不到对应键（严格模式下才抛出）
"""


class BaziEngineError(Exception):
    """八字引擎异常基类"""


class MalformedChartError(BaziEngineError, ValueError):
    """命盘格式错误（调用失败，不返回任何部分结果）"""

    def __init__(self, message: str, pillar_index: int = None):
        self.pillar_index = pillar_index
        super().__init__(message)


class IncompleteInputError(BaziEngineError, LookupError):
    """静态表查询缺失（如非六十甲子的日柱查空亡）"""

    def __init__(self, message: str, key: str = ''):
        self.key = key
        super().__init__(message)
