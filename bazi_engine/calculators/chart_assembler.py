#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘注解器

把四柱原始输入解析为 Chart，并为每一柱补全五行、十神、藏干、十二长生、
自坐、空亡、神煞、纳音，得到不可变的 AnnotatedChart。
"""

import logging
from collections import abc
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from ..data.constants import Branch, Stem, TenGod
from ..exceptions import MalformedChartError
from ..models.chart import (
    ActivatedStar,
    AnnotatedChart,
    AnnotatedPillar,
    Chart,
    Pillar,
    PillarRole,
    PILLAR_ROLES,
)
from .bazi_core.ten_gods import get_branch_ten_gods, get_main_star
from .pillar_lookups import (
    activated_stars,
    longevity_stage,
    nayin_of,
    self_seat,
    void_branches,
)

logger = logging.getLogger(__name__)

RawPillar = Union[Pillar, str, Sequence[Any], Mapping]
RawChart = Union[Chart, Sequence[RawPillar]]


def _to_stem(value: Any, index: int) -> Stem:
    try:
        return Stem(value)
    except ValueError:
        raise MalformedChartError(f"无法识别的天干: {value!r}（第{index + 1}柱）", pillar_index=index)


def _to_branch(value: Any, index: int) -> Branch:
    try:
        return Branch(value)
    except ValueError:
        raise MalformedChartError(f"无法识别的地支: {value!r}（第{index + 1}柱）", pillar_index=index)


def _parse_pillar(raw: RawPillar, index: int) -> Pillar:
    """解析单柱输入，未指定柱位时按位置补全"""
    role = PILLAR_ROLES[index]

    if isinstance(raw, Pillar):
        return raw

    if isinstance(raw, str):
        text = raw.strip()
        if len(text) != 2:
            raise MalformedChartError(f"干支格式错误: {raw!r}（第{index + 1}柱）", pillar_index=index)
        stem, branch = text[0], text[1]
    elif isinstance(raw, abc.Mapping):
        if 'stem' not in raw or 'branch' not in raw:
            raise MalformedChartError(f"缺少 stem/branch 字段（第{index + 1}柱）", pillar_index=index)
        stem, branch = raw['stem'], raw['branch']
        if raw.get('role') is not None:
            try:
                role = PillarRole(raw['role'])
            except ValueError:
                raise MalformedChartError(f"无法识别的柱位: {raw['role']!r}", pillar_index=index)
    elif isinstance(raw, abc.Sequence) and len(raw) == 2:
        stem, branch = raw
    else:
        raise MalformedChartError(f"无法解析的柱输入: {raw!r}（第{index + 1}柱）", pillar_index=index)

    return Pillar(stem=_to_stem(stem, index), branch=_to_branch(branch, index), role=role)


def parse_chart(raw: RawChart) -> Chart:
    """
    解析四柱输入

    支持：Chart；或4个元素的序列，元素可为 Pillar、"甲子" 字符串、
    (天干, 地支) 二元组、含 stem/branch（可选 role）的字典。

    Raises:
        MalformedChartError: 柱数不是4、柱位顺序不对、或符号不合法
    """
    if isinstance(raw, Chart):
        return raw
    if isinstance(raw, (str, bytes)) or not isinstance(raw, abc.Sequence):
        raise MalformedChartError(f"四柱输入必须是序列: {type(raw).__name__}")
    if len(raw) != len(PILLAR_ROLES):
        raise MalformedChartError(f"四柱数量错误：需要4柱，实际{len(raw)}柱")

    pillars = tuple(_parse_pillar(item, i) for i, item in enumerate(raw))
    try:
        return Chart(pillars=pillars)
    except ValidationError as e:
        raise MalformedChartError(f"命盘格式错误: {e.errors()[0]['msg']}") from e


class ChartAssembler:
    """排盘注解器"""

    def __init__(self, strict_void: Optional[bool] = None):
        """
        Args:
            strict_void: 非六十甲子日柱查空亡时是否抛错；None 时取配置 BAZI_STRICT_VOID
        """
        if strict_void is None:
            from ..config.app_config import get_config
            strict_void = get_config().strict_void
        self.strict_void = strict_void

    def assemble(self, raw: RawChart) -> AnnotatedChart:
        """
        排盘注解

        相同输入总是得到相等的 AnnotatedChart。

        Raises:
            MalformedChartError: 输入不合法
            IncompleteInputError: 严格模式下日柱不在六十甲子中
        """
        chart = parse_chart(raw)
        day_pillar = chart.pillar(PillarRole.DAY)
        day_master = day_pillar.stem
        logger.debug(f"🔍 排盘: {' '.join(p.ganzhi for p in chart.pillars)}，日主 {day_master.value}")

        voids = void_branches(day_master, day_pillar.branch, strict=self.strict_void)

        # 神煞只计算一次，挂在第一个命中的柱上
        star_hits = activated_stars(day_master, chart.branches)
        stars_by_index = {i: [] for i in range(len(chart.pillars))}
        activated = []
        for name, branch in star_hits.items():
            index = chart.branches.index(branch)
            stars_by_index[index].append(name)
            activated.append(ActivatedStar(name=name, branch=branch, role=chart.pillars[index].role))

        annotated = tuple(
            self._annotate_pillar(pillar, day_master, voids, tuple(stars_by_index[i]))
            for i, pillar in enumerate(chart.pillars)
        )
        return AnnotatedChart(
            chart=chart,
            pillars=annotated,
            activated_stars=tuple(activated),
            void_branches=voids,
        )

    @staticmethod
    def _annotate_pillar(pillar: Pillar, day_master: Stem, voids, stars) -> AnnotatedPillar:
        is_day = pillar.role is PillarRole.DAY
        ten_god: TenGod = get_main_star(day_master, pillar.stem, is_day_pillar=is_day)
        return AnnotatedPillar(
            pillar=pillar,
            stem_element=pillar.stem.element,
            branch_element=pillar.branch.element,
            ten_god=ten_god,
            hidden_stems=pillar.branch.hidden_stems,
            hidden_ten_gods=get_branch_ten_gods(day_master, pillar.branch),
            life_stage=longevity_stage(day_master, pillar.branch),
            self_seat=self_seat(pillar.stem, pillar.branch),
            is_void=pillar.branch in voids,
            stars=stars,
            nayin=nayin_of(pillar.stem, pillar.branch),
        )
