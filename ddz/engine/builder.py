"""手牌构造辅助 - 从点数列表或文本快速构造 Hand"""

import re
from collections import Counter
from typing import Tuple, Union

from .card import Rank, NUM_RANKS, rank_from_text
from .errors import DuplicateRankError, UnknownRankError
from .hand import Hand

RankSpec = Union[Rank, Tuple[Rank, int]]

# 一个点数记号，后面可跟空白或逗号
_TOKEN = re.compile(r"(10|[2-9TJQKA]|BJ|SJ|RJ|小王|大王)\s*,?\s*", re.IGNORECASE)


def hand_of(*specs: RankSpec) -> Hand:
    """
    按点数列表构造手牌，未写张数的默认1张。
    例：hand_of(Rank.THREE, (Rank.FOUR, 2)) → 3 4 4
    同一点数重复指定时抛 DuplicateRankError，张数越界时抛 InvalidCountError。
    """
    counts = [0] * NUM_RANKS
    seen = set()
    for spec in specs:
        if isinstance(spec, tuple):
            rank, count = spec
        else:
            rank, count = spec, 1
        rank = Rank(rank)
        if rank in seen:
            raise DuplicateRankError(rank)
        seen.add(rank)
        counts[rank] = count
    return Hand(counts)


def parse_hand(text: str) -> Hand:
    """
    解析显示文本，例如 "3 3 3 4"、"10JQKA"、"小王 大王"、"BJ,RJ"。
    无法识别的记号抛 UnknownRankError。
    """
    text = text.strip()
    ranks = Counter()
    pos = 0
    while pos < len(text):
        m = _TOKEN.match(text, pos)
        if m is None:
            bad = text[pos:].split()[0]
            raise UnknownRankError(bad)
        ranks[rank_from_text(m.group(1))] += 1
        pos = m.end()

    counts = [0] * NUM_RANKS
    for rank, count in ranks.items():
        counts[rank] = count
    return Hand(counts)
