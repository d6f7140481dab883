"""命令行工具 - 识别牌型、比较大小、枚举出牌"""

import argparse
import logging
import sys
from typing import List, Optional

from ddz.config import load_settings
from ddz.engine.builder import parse_hand
from ddz.engine.errors import HandError
from ddz.engine.hand import Hand
from ddz.engine.hand_detector import detect_play, compare_hands
from ddz.engine.hand_type import PlayKind
from ddz.engine.search import find_plays
from ddz.ui.renderer import TerminalRenderer, PLAY_KIND_NAME

logger = logging.getLogger(__name__)

_KIND_CHOICES = [k.value.lower() for k in PlayKind]


def _cmd_classify(args, renderer: TerminalRenderer) -> int:
    hand = parse_hand(args.cards)
    play = detect_play(hand)
    if play is None:
        renderer.show_not_a_play(hand)
        return 1
    renderer.show_play(play)
    return 0


def _cmd_compare(args, renderer: TerminalRenderer) -> int:
    a = parse_hand(args.first)
    b = parse_hand(args.second)
    renderer.show_comparison(a, b, compare_hands(a, b))
    return 0


def _cmd_search(args, renderer: TerminalRenderer) -> int:
    hand = parse_hand(args.hand) if args.hand else Hand.FULL_DECK
    kind = PlayKind(args.kind.upper())
    logger.info("在 %d 张牌中搜索 %s", len(hand), kind.value)
    plays = find_plays(hand, kind)
    if args.count:
        print(sum(1 for _ in plays))
        return 0
    renderer.print_header(f"搜索{PLAY_KIND_NAME[kind]} ({len(hand)} 张牌)")
    renderer.show_search(kind, plays, limit=args.limit)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ddz", description="斗地主牌型工具")
    parser.add_argument("--no-color", action="store_true", help="关闭彩色输出")
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("classify", help="识别一手牌的牌型")
    p.add_argument("cards", help='手牌文本，例如 "3 3 3 4"')
    p.set_defaults(func=_cmd_classify)

    p = sub.add_parser("compare", help="比较两手牌的大小")
    p.add_argument("first", help="第一手牌")
    p.add_argument("second", help="第二手牌")
    p.set_defaults(func=_cmd_compare)

    p = sub.add_parser("search", help="枚举手牌中某种牌型的全部出牌")
    p.add_argument("kind", choices=_KIND_CHOICES, help="牌型")
    p.add_argument("--hand", default="", help="手牌文本 (默认整副牌)")
    p.add_argument("--limit", type=int, default=20, help="最多展示条数，0 为不限 (默认20)")
    p.add_argument("--count", action="store_true", help="只输出总数")
    p.set_defaults(func=_cmd_search)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """命令行入口"""
    args = build_parser().parse_args(argv)
    settings = load_settings()

    level = logging.DEBUG if args.verbose else logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    renderer = TerminalRenderer(color=settings.color and not args.no_color)
    try:
        return args.func(args, renderer)
    except HandError as e:
        print(f"输入错误: {e}", file=sys.stderr)
        return 2
