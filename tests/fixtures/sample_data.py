#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
测试数据

提供标准化的四柱命盘，用于单元测试
"""

from typing import Any, Dict, List

# ==================== 命盘 ====================

# 日主甲木，月令亥为长生，比劫、印星、本气根俱全
STRONG_CHART: List[str] = ["甲寅", "乙亥", "甲子", "癸酉"]

# 日主己土，月令卯为病（失令），但得地、得势、得助俱全
BALANCED_CHART: List[str] = ["庚午", "己卯", "己酉", "己巳"]

# 年支子、月支午相冲；天干见食神、七杀
CLASH_CHART: List[str] = ["甲子", "庚午", "甲寅", "丙寅"]

# 天干十神组合（日主均为甲）
PATTERN_CASES: List[Dict[str, Any]] = [
    {
        "id": "食神制杀",
        "pillars": ["甲子", "庚午", "甲寅", "丙寅"],
        "auspicious": "食神制杀",
        "inauspicious": "",
    },
    {
        "id": "伤官配印+伤官见官",
        "pillars": ["丁卯", "辛酉", "甲子", "癸酉"],
        "auspicious": "伤官配印",
        "inauspicious": "伤官见官",
    },
    {
        "id": "伤官配印优先于食神生财",
        "pillars": ["丙寅", "壬辰", "甲午", "戊辰"],
        "auspicious": "伤官配印",
        "inauspicious": "枭神夺食",
    },
    {
        "id": "食神生财+比劫夺财",
        "pillars": ["丙寅", "戊辰", "甲午", "甲子"],
        "auspicious": "食神生财",
        "inauspicious": "比劫夺财",
    },
    {
        "id": "无组合",
        "pillars": ["甲寅", "乙亥", "甲子", "癸酉"],
        "auspicious": "",
        "inauspicious": "",
    },
]

# 地支六冲（按 年月、年日、年时、月日、月时、日时 顺序）
CLASH_CASES: List[Dict[str, Any]] = [
    {"id": "年月", "pillars": ["甲子", "庚午", "甲寅", "丙寅"], "clashes": ["子与午相冲"]},
    {"id": "年月+年时", "pillars": ["丁卯", "辛酉", "甲子", "癸酉"], "clashes": ["卯与酉相冲", "卯与酉相冲"]},
    {"id": "日时", "pillars": ["丙寅", "戊辰", "甲午", "甲子"], "clashes": ["午与子相冲"]},
    {"id": "月日", "pillars": ["庚午", "己卯", "己酉", "己巳"], "clashes": ["卯与酉相冲"]},
    {"id": "无", "pillars": ["甲寅", "乙亥", "甲子", "癸酉"], "clashes": []},
]

# ==================== 非法输入 ====================

MALFORMED_CHARTS: List[Any] = [
    ["甲子", "乙丑", "丙寅"],                  # 三柱
    ["甲子", "乙丑", "丙寅", "丁卯", "戊辰"],  # 五柱
    ["甲子", "乙丑", "丙寅", "丁X"],           # 非法地支
    ["Q子", "乙丑", "丙寅", "丁卯"],           # 非法天干
    ["甲子", "乙丑", "丙寅", "丁卯丁"],        # 长度错误
    "甲子乙丑丙寅丁卯",                        # 不是序列
]
