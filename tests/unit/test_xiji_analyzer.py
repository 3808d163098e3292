#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""喜忌分析器单元测试"""

import pytest

from bazi_engine.analyzers.xiji_analyzer import FavorableElementResolver
from bazi_engine.data.constants import Element, TenGod
from bazi_engine.models.analysis import Strength, TenGodGroup


@pytest.fixture
def resolver():
    return FavorableElementResolver()


class TestResolve:
    def test_strong_wood(self, resolver):
        preference = resolver.resolve(Strength.STRONG, Element.WOOD)
        assert preference.favorable_elements == (Element.METAL, Element.EARTH, Element.FIRE)
        assert [e.group for e in preference.favorable] == [TenGodGroup.OFFICER, TenGodGroup.WEALTH, TenGodGroup.OUTPUT]
        assert preference.unfavorable_elements == (Element.WOOD, Element.WATER)
        assert [e.group for e in preference.unfavorable] == [TenGodGroup.COMPANION, TenGodGroup.RESOURCE]

    def test_weak_wood(self, resolver):
        preference = resolver.resolve(Strength.WEAK, Element.WOOD)
        assert preference.favorable_elements == (Element.WATER, Element.WOOD)
        assert preference.unfavorable_elements == (Element.METAL, Element.EARTH, Element.FIRE)

    def test_balanced_is_empty(self, resolver):
        preference = resolver.resolve(Strength.BALANCED, Element.EARTH)
        assert preference.favorable == ()
        assert preference.unfavorable == ()
        assert preference.requires_pattern_analysis

    def test_accepts_plain_values(self, resolver):
        preference = resolver.resolve('身弱', '土')
        assert preference.favorable_elements == (Element.FIRE, Element.EARTH)

    @pytest.mark.parametrize("strength", [Strength.STRONG, Strength.WEAK])
    @pytest.mark.parametrize("element", list(Element))
    def test_disjoint_and_complete(self, resolver, strength, element):
        preference = resolver.resolve(strength, element)
        favorable = set(preference.favorable_elements)
        unfavorable = set(preference.unfavorable_elements)
        assert not favorable & unfavorable
        assert favorable | unfavorable == set(Element)

    def test_ten_gods(self, resolver):
        preference = resolver.resolve(Strength.WEAK, Element.FIRE)
        assert preference.favorable_ten_gods == (TenGod.PIAN_YIN, TenGod.ZHENG_YIN, TenGod.BI_JIAN, TenGod.JIE_CAI)

    def test_to_dict(self, resolver):
        data = resolver.resolve(Strength.STRONG, Element.WOOD).to_dict()
        assert data['xi_shen_elements'] == ['金', '土', '火']
        assert data['ji_shen_elements'] == ['木', '水']
        assert data['ji_shen'] == ['比肩', '劫财', '偏印', '正印']


class TestExplain:
    def test_strong(self, resolver):
        lines = resolver.explain(resolver.resolve(Strength.STRONG, Element.WOOD))
        assert lines[0] == '您的日主状态为: 身旺'
        assert '   官杀(金)、财星(土)、食伤(火)' in lines
        assert '   比劫(木)、印星(水)' in lines

    def test_balanced(self, resolver):
        lines = resolver.explain(resolver.resolve(Strength.BALANCED, Element.WOOD))
        assert lines[-1].startswith('中和')
        assert '喜用神：' not in lines
