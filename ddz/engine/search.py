"""出牌搜索 - 枚举一手牌中某种形状的全部组合

形状由 PlaySpec 描述：主体每组张数、主体组数（连续长度）范围、
带牌每组张数、以及由连续长度决定的带牌组数。
search_plays 只产出 Hand；需要牌型标签时用 find_plays。
"""

import logging
from dataclasses import dataclass, field
from itertools import combinations
from typing import Callable, Dict, Iterator, List, Sequence, Tuple

from .card import Rank, CHAINABLE_RANKS, JOKERS, NUM_RANKS
from .composition import compose
from .guard import Guard
from .hand import Hand
from .hand_detector import to_play
from .hand_type import PlayKind, Play, ROCKET

logger = logging.getLogger(__name__)

# 主体组数 + 带牌组数的上限（按组计，不是按张计）
MAX_UNIT_COUNT = 15


def _no_kickers(length: int) -> int:
    return 0


def _one_kicker(length: int) -> int:
    return 1


def _two_kickers(length: int) -> int:
    return 2


def _kicker_per_unit(length: int) -> int:
    return length


@dataclass(frozen=True)
class PlaySpec:
    """搜索形状。

    primal_size:  主体每组张数（单/顺子为1，对/连对为2，三条/飞机为3，炸弹/四带为4）
    primal_count: 主体组数的取值范围，例如顺子为 range(5, 13)
    kicker_size:  带牌每组张数（0 表示不带）
    kicker_count: 由主体组数计算带牌组数
    """
    primal_size: int
    primal_count: range
    kicker_size: int = 0
    kicker_count: Callable[[int], int] = field(default=_no_kickers, compare=False)

    @classmethod
    def for_kind(cls, kind: PlayKind) -> "PlaySpec":
        """标准牌型对应的搜索形状（火箭不支持）"""
        if kind == PlayKind.ROCKET:
            raise ValueError("火箭不能用 PlaySpec 搜索")
        return _KIND_SPECS[kind]


_KIND_SPECS: Dict[PlayKind, PlaySpec] = {
    PlayKind.SOLO: PlaySpec(1, range(1, 2)),
    PlayKind.CHAIN: PlaySpec(1, range(5, 13)),
    PlayKind.PAIR: PlaySpec(2, range(1, 2)),
    PlayKind.PAIRS_CHAIN: PlaySpec(2, range(3, 13)),
    PlayKind.TRIO: PlaySpec(3, range(1, 2)),
    PlayKind.AIRPLANE: PlaySpec(3, range(2, 13)),
    PlayKind.TRIO_WITH_SOLO: PlaySpec(3, range(1, 2), 1, _one_kicker),
    PlayKind.AIRPLANE_WITH_SOLOS: PlaySpec(3, range(2, 13), 1, _kicker_per_unit),
    PlayKind.TRIO_WITH_PAIR: PlaySpec(3, range(1, 2), 2, _one_kicker),
    PlayKind.AIRPLANE_WITH_PAIRS: PlaySpec(3, range(2, 13), 2, _kicker_per_unit),
    PlayKind.BOMB: PlaySpec(4, range(1, 2)),
    PlayKind.FOUR_WITH_DUAL_SOLO: PlaySpec(4, range(1, 2), 1, _two_kickers),
    PlayKind.FOUR_WITH_DUAL_PAIR: PlaySpec(4, range(1, 2), 2, _two_kickers),
}


# ============================================================
#  主体窗口
# ============================================================

def _windows(run: Sequence[Rank], length: int) -> Iterator[Tuple[Rank, ...]]:
    """在一段连续点数上滑动长度为 length 的窗口"""
    for start in range(len(run) - length + 1):
        yield tuple(run[start:start + length])


def _primal_windows(counts: Sequence[int], size: int, length: int) -> Iterator[Tuple[Rank, ...]]:
    """
    枚举主体点数组合。
    length == 1 时任何张数足够的点数都可以（包括2和王）；
    length >= 2 时只在 3~A 的最长连续段内滑动，窗口不跨段。
    """
    if length == 1:
        for rank in Rank:
            if counts[rank] >= size:
                yield (rank,)
        return

    run: List[Rank] = []
    for rank in CHAINABLE_RANKS:
        if counts[rank] >= size:
            run.append(rank)
        else:
            yield from _windows(run, length)
            run = []
    yield from _windows(run, length)


# ============================================================
#  带牌组合
# ============================================================

def _kicker_combinations(
    counts: Sequence[int], primal: Tuple[Rank, ...], size: int, units: int
) -> Iterator[Tuple[Rank, ...]]:
    """
    枚举带牌点数组合。
    大小王不进主候选池；带单牌时每个王单独替换掉一张候选牌，
    但两个王永远不会同时出现（否则等于把火箭藏在带牌里）。
    """
    excluded = set(primal)
    pool = [
        r for r in Rank
        if r not in excluded and not r.is_joker and counts[r] >= size
    ]
    yield from combinations(pool, units)

    if size != 1:
        return
    jokers = [r for r in JOKERS if r not in excluded and counts[r] >= size]
    for joker in jokers:
        for rest in combinations(pool, units - 1):
            yield rest + (joker,)


def _build_hand(
    primal: Tuple[Rank, ...], primal_size: int,
    kickers: Tuple[Rank, ...] = (), kicker_size: int = 0,
) -> Hand:
    # 主体与带牌点数互不相交且都取自原手牌，计数必然合法
    counts = [0] * NUM_RANKS
    for rank in primal:
        counts[rank] = primal_size
    for rank in kickers:
        counts[rank] = kicker_size
    return Hand.new_unchecked(counts)


# ============================================================
#  搜索入口
# ============================================================

def search_plays(hand: Hand, spec: PlaySpec) -> Iterator[Hand]:
    """
    惰性枚举 hand 中所有符合 spec 形状的子集。
    顺序：连续长度升序 → 窗口起点升序 → 带牌组合（itertools.combinations 顺序）。
    """
    counts = hand.to_array()
    for length in spec.primal_count:
        if length < 1:
            continue
        units = spec.kicker_count(length) if spec.kicker_size else 0
        if length + units > MAX_UNIT_COUNT:
            logger.debug("跳过长度 %d: 主体 %d 组 + 带牌 %d 组超过上限", length, length, units)
            continue

        for primal in _primal_windows(counts, spec.primal_size, length):
            if units == 0:
                yield _build_hand(primal, spec.primal_size)
                continue
            for kickers in _kicker_combinations(counts, primal, spec.kicker_size, units):
                yield _build_hand(primal, spec.primal_size, kickers, spec.kicker_size)


def find_plays(hand: Hand, kind: PlayKind) -> Iterator[Guard[Play]]:
    """枚举 hand 中指定牌型的全部出牌，每个候选都经过牌型识别"""
    if kind == PlayKind.ROCKET:
        if hand[Rank.BLACK_JOKER] and hand[Rank.RED_JOKER]:
            yield Guard.new_unchecked(ROCKET)
        return

    for candidate in search_plays(hand, PlaySpec.for_kind(kind)):
        play = to_play(compose(candidate), kind)
        if play is None:
            logger.debug("候选 %r 不构成 %s，已丢弃", candidate, kind.value)
            continue
        yield play


def find_all_plays(hand: Hand) -> Iterator[Guard[Play]]:
    """按牌型顺序枚举 hand 中的全部出牌"""
    for kind in PlayKind:
        yield from find_plays(hand, kind)
