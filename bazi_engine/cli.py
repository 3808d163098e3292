#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命令行入口

用法:
    python -m bazi_engine --pillars 庚午 己卯 己酉 己巳 --name 张三
    python -m bazi_engine --pillars 甲寅 乙亥 甲子 癸酉 --query xiji --format json
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config.app_config import reload_config
from .engine import BaziEngine
from .exceptions import BaziEngineError, IncompleteInputError, MalformedChartError
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

QUERIES = ('full', 'ten-gods', 'xiji', 'wuxing')
FORMATS = ('text', 'json')

EXIT_MALFORMED = 2
EXIT_INCOMPLETE = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='bazi_engine', description="四柱八字排盘与五步分析")
    parser.add_argument("--pillars", "-p", nargs='+', required=True,
                        help="年柱 月柱 日柱 时柱，如: 庚午 己卯 己酉 己巳")
    parser.add_argument("--name", "-n", default=None, help="报告标注的姓名")
    parser.add_argument("--query", "-q", choices=QUERIES, default='full', help="查询类型")
    parser.add_argument("--format", "-f", choices=FORMATS, default='text', help="输出格式")
    parser.add_argument("--env-file", default='.env', help=".env 文件路径")
    parser.add_argument("--verbose", "-v", action="store_true", help="显示详细日志")
    return parser


def _load_env(env_path: str):
    if os.path.exists(env_path):
        load_dotenv(env_path, override=True)


def _render(engine: BaziEngine, args) -> str:
    if args.query == 'ten-gods':
        result = engine.ten_gods(args.pillars)
        if args.format == 'json':
            return json.dumps(result, ensure_ascii=False, indent=2)
        return '\n'.join(
            f"{item['ganzhi']}: {item['main_star']}  藏干 "
            + '、'.join(f"{s}{g}" for s, g in zip(item['hidden_stems'], item['hidden_stars']))
            for item in result
        )

    if args.query == 'xiji':
        preference = engine.favorable_elements(args.pillars)
        if args.format == 'json':
            return json.dumps(preference.to_dict(), ensure_ascii=False, indent=2)
        return '\n'.join(engine.resolver.explain(preference))

    if args.query == 'wuxing':
        result = engine.wuxing_scores(args.pillars)
        if args.format == 'json':
            return json.dumps({
                'day_master': result.day_master.value,
                'day_master_strength': result.day_master_strength,
                'scores': result.score_map,
                'xi_yong_shen': result.favorable_element.value,
                'logic': list(result.logic),
            }, ensure_ascii=False, indent=2)
        return '\n'.join(result.logic)

    report = engine.analyze(args.pillars, name=args.name)
    if args.format == 'json':
        return json.dumps(report.to_dict(), ensure_ascii=False, indent=2)
    blocks = [f"【{report.name}】" if report.name else '']
    for step in report.steps:
        blocks.append(step.title)
        blocks.extend(step.lines)
        blocks.append('')
    return '\n'.join(blocks).strip('\n')


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    _load_env(args.env_file)
    config = reload_config()
    setup_logging('DEBUG' if args.verbose else config.log_level, config.log_format)
    if args.name is None:
        args.name = config.report_name

    engine = BaziEngine(strict_void=config.strict_void)
    try:
        output = _render(engine, args)
    except MalformedChartError as e:
        logger.error(f"❌ 命盘格式错误: {e}")
        print(f"命盘格式错误: {e}", file=sys.stderr)
        return EXIT_MALFORMED
    except IncompleteInputError as e:
        logger.error(f"❌ 查询数据缺失: {e}")
        print(f"查询数据缺失: {e}", file=sys.stderr)
        return EXIT_INCOMPLETE
    except BaziEngineError as e:
        logger.error(f"❌ 分析失败: {e}", exc_info=True)
        print(f"分析失败: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
