"""牌型检测器 - 从 Composition 识别牌型并构建 Guard[Play]"""

from typing import Callable, Dict, Optional, Union

from .card import Rank
from .composition import Composition, compose
from .guard import Guard
from .hand import Hand
from .hand_type import PlayKind, Play, ROCKET, compare_plays

CompositionLike = Union[Composition, Guard[Composition]]


def detect_play(hand: Hand) -> Optional[Guard[Play]]:
    """
    识别一手牌的牌型。
    返回 Guard[Play] 或 None（非法牌型）。
    """
    return guess_play(compose(hand))


def detect_as(hand: Hand, kind: PlayKind) -> Optional[Guard[Play]]:
    """按指定牌型识别一手牌，结构不符时返回 None"""
    return to_play(compose(hand), kind)


def guess_play(comp: CompositionLike) -> Optional[Guard[Play]]:
    """
    依次尝试全部牌型。
    四个组互不相交，因此最多只有一种牌型能匹配，尝试顺序不影响结果。
    """
    for detector in _DETECTORS.values():
        play = detector(comp)
        if play is not None:
            return Guard.new_unchecked(play)
    return None


def to_play(comp: CompositionLike, kind: PlayKind) -> Optional[Guard[Play]]:
    """只尝试指定牌型"""
    play = _DETECTORS[kind](comp)
    if play is None:
        return None
    return Guard.new_unchecked(play)


# ============================================================
#  单一组牌型
# ============================================================

def _only(comp: CompositionLike, multiplicity: int) -> bool:
    """除了指定张数的组之外其余组都为空"""
    return all(
        len(comp.group(m)) == 0 for m in (1, 2, 3, 4) if m != multiplicity
    )


def _detect_solo(comp: CompositionLike) -> Optional[Play]:
    """单张"""
    if len(comp.solos) == 1 and _only(comp, 1):
        return Play(PlayKind.SOLO, comp.solos.ranks)
    return None


def _detect_chain(comp: CompositionLike) -> Optional[Play]:
    """顺子：≥5张连续单牌，不含2和王"""
    if len(comp.solos) >= 5 and comp.solos.consecutive and _only(comp, 1):
        return Play(PlayKind.CHAIN, comp.solos.ranks)
    return None


def _detect_pair(comp: CompositionLike) -> Optional[Play]:
    """对子"""
    if len(comp.pairs) == 1 and _only(comp, 2):
        return Play(PlayKind.PAIR, comp.pairs.ranks)
    return None


def _detect_pairs_chain(comp: CompositionLike) -> Optional[Play]:
    """连对：≥3对连续对子"""
    if len(comp.pairs) >= 3 and comp.pairs.consecutive and _only(comp, 2):
        return Play(PlayKind.PAIRS_CHAIN, comp.pairs.ranks)
    return None


def _detect_trio(comp: CompositionLike) -> Optional[Play]:
    """三条"""
    if len(comp.trios) == 1 and _only(comp, 3):
        return Play(PlayKind.TRIO, comp.trios.ranks)
    return None


def _detect_airplane(comp: CompositionLike) -> Optional[Play]:
    """飞机不带：≥2组连续三条"""
    if len(comp.trios) >= 2 and comp.trios.consecutive and _only(comp, 3):
        return Play(PlayKind.AIRPLANE, comp.trios.ranks)
    return None


def _detect_bomb(comp: CompositionLike) -> Optional[Play]:
    """炸弹：四张相同点数"""
    if len(comp.fours) == 1 and _only(comp, 4):
        return Play(PlayKind.BOMB, comp.fours.ranks)
    return None


def _detect_rocket(comp: CompositionLike) -> Optional[Play]:
    """火箭：小王 + 大王"""
    if comp.solos.ranks == (Rank.BLACK_JOKER, Rank.RED_JOKER) and _only(comp, 1):
        return ROCKET
    return None


# ============================================================
#  带牌类
# ============================================================

def _detect_trio_with_solo(comp: CompositionLike) -> Optional[Play]:
    """三带一：一个三条 + 一张单牌"""
    if (
        len(comp.trios) == 1
        and len(comp.solos) == 1
        and len(comp.pairs) == 0
        and len(comp.fours) == 0
    ):
        return Play(PlayKind.TRIO_WITH_SOLO, comp.trios.ranks, comp.solos.ranks)
    return None


def _detect_airplane_with_solos(comp: CompositionLike) -> Optional[Play]:
    """飞机带单：连续三条 + 等量单牌，单牌中不能同时含大小王"""
    solos = comp.solos.ranks
    if (
        len(comp.trios) >= 2
        and len(solos) == len(comp.trios)
        and comp.trios.consecutive
        and len(comp.pairs) == 0
        and len(comp.fours) == 0
        # 带牌里藏一个火箭不算
        and solos[-2:] != (Rank.BLACK_JOKER, Rank.RED_JOKER)
    ):
        return Play(PlayKind.AIRPLANE_WITH_SOLOS, comp.trios.ranks, solos)
    return None


def _detect_trio_with_pair(comp: CompositionLike) -> Optional[Play]:
    """三带一对：一个三条 + 一个对子"""
    if (
        len(comp.trios) == 1
        and len(comp.pairs) == 1
        and len(comp.solos) == 0
        and len(comp.fours) == 0
    ):
        return Play(PlayKind.TRIO_WITH_PAIR, comp.trios.ranks, comp.pairs.ranks)
    return None


def _detect_airplane_with_pairs(comp: CompositionLike) -> Optional[Play]:
    """飞机带对：连续三条 + 等量对子"""
    if (
        len(comp.trios) >= 2
        and len(comp.pairs) == len(comp.trios)
        and comp.trios.consecutive
        and len(comp.solos) == 0
        and len(comp.fours) == 0
    ):
        return Play(PlayKind.AIRPLANE_WITH_PAIRS, comp.trios.ranks, comp.pairs.ranks)
    return None


def _detect_four_with_dual_solo(comp: CompositionLike) -> Optional[Play]:
    """四带二单：一个四条 + 两张不同的单牌，两张单牌不能是大小王"""
    if (
        len(comp.fours) == 1
        and len(comp.solos) == 2
        # 两张升序单牌中较小的是小王，说明两张正是大小王
        and comp.solos.ranks[0] != Rank.BLACK_JOKER
        and len(comp.pairs) == 0
        and len(comp.trios) == 0
    ):
        return Play(PlayKind.FOUR_WITH_DUAL_SOLO, comp.fours.ranks, comp.solos.ranks)
    return None


def _detect_four_with_dual_pair(comp: CompositionLike) -> Optional[Play]:
    """四带二对：一个四条 + 两个不同对子"""
    if (
        len(comp.fours) == 1
        and len(comp.pairs) == 2
        and len(comp.solos) == 0
        and len(comp.trios) == 0
    ):
        return Play(PlayKind.FOUR_WITH_DUAL_PAIR, comp.fours.ranks, comp.pairs.ranks)
    return None


_DETECTORS: Dict[PlayKind, Callable[[CompositionLike], Optional[Play]]] = {
    PlayKind.SOLO: _detect_solo,
    PlayKind.CHAIN: _detect_chain,
    PlayKind.PAIR: _detect_pair,
    PlayKind.PAIRS_CHAIN: _detect_pairs_chain,
    PlayKind.TRIO: _detect_trio,
    PlayKind.AIRPLANE: _detect_airplane,
    PlayKind.TRIO_WITH_SOLO: _detect_trio_with_solo,
    PlayKind.AIRPLANE_WITH_SOLOS: _detect_airplane_with_solos,
    PlayKind.TRIO_WITH_PAIR: _detect_trio_with_pair,
    PlayKind.AIRPLANE_WITH_PAIRS: _detect_airplane_with_pairs,
    PlayKind.BOMB: _detect_bomb,
    PlayKind.FOUR_WITH_DUAL_SOLO: _detect_four_with_dual_solo,
    PlayKind.FOUR_WITH_DUAL_PAIR: _detect_four_with_dual_pair,
    PlayKind.ROCKET: _detect_rocket,
}


# ============================================================
#  牌型比较
# ============================================================

def can_beat(current, previous) -> bool:
    """
    判断 current 能否压过 previous。
    规则：
    1. 火箭压一切
    2. 炸弹压非炸弹/非火箭，炸弹之间比点数
    3. 同类型同长度，比主牌点数
    """
    return compare_plays(current, previous) == 1


def compare_compositions(a: CompositionLike, b: CompositionLike) -> Optional[int]:
    """先识别两边的牌型再比较；任一边不成牌型或无法比较时返回 None"""
    play_a = guess_play(a)
    play_b = guess_play(b)
    if play_a is None or play_b is None:
        return None
    return compare_plays(play_a, play_b)


def compare_hands(a: Hand, b: Hand) -> Optional[int]:
    """同 compare_compositions，直接接受 Hand"""
    return compare_compositions(compose(a), compose(b))
