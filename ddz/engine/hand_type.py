"""牌型定义 - 斗地主14种合法牌型及其大小比较"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .card import Rank, NUM_RANKS
from .guard import Guard
from .hand import Hand


class PlayKind(str, Enum):
    """牌型枚举"""
    SOLO = "SOLO"                                   # 单张
    CHAIN = "CHAIN"                                 # 顺子 (≥5张)
    PAIR = "PAIR"                                   # 对子
    PAIRS_CHAIN = "PAIRS_CHAIN"                     # 连对 (≥3对)
    TRIO = "TRIO"                                   # 三条
    AIRPLANE = "AIRPLANE"                           # 飞机不带
    TRIO_WITH_SOLO = "TRIO_WITH_SOLO"               # 三带一
    AIRPLANE_WITH_SOLOS = "AIRPLANE_WITH_SOLOS"     # 飞机带单
    TRIO_WITH_PAIR = "TRIO_WITH_PAIR"               # 三带一对
    AIRPLANE_WITH_PAIRS = "AIRPLANE_WITH_PAIRS"     # 飞机带对
    BOMB = "BOMB"                                   # 炸弹
    FOUR_WITH_DUAL_SOLO = "FOUR_WITH_DUAL_SOLO"     # 四带二单
    FOUR_WITH_DUAL_PAIR = "FOUR_WITH_DUAL_PAIR"     # 四带二对
    ROCKET = "ROCKET"                               # 火箭(王炸)

    @property
    def primal_size(self) -> int:
        """主体每组的张数"""
        return _SHAPES[self][0]

    @property
    def kicker_size(self) -> int:
        """带牌每组的张数，0 表示不带"""
        return _SHAPES[self][1]

    @property
    def is_chain(self) -> bool:
        return self in _CHAIN_KINDS

    @property
    def is_bomb_like(self) -> bool:
        return self in (PlayKind.BOMB, PlayKind.ROCKET)

    @property
    def level(self) -> int:
        """跨牌型比较的级别：普通 0 < 炸弹 1 < 火箭 2"""
        if self == PlayKind.ROCKET:
            return 2
        if self == PlayKind.BOMB:
            return 1
        return 0


# (主体张数, 带牌张数)；火箭单独处理
_SHAPES = {
    PlayKind.SOLO: (1, 0),
    PlayKind.CHAIN: (1, 0),
    PlayKind.PAIR: (2, 0),
    PlayKind.PAIRS_CHAIN: (2, 0),
    PlayKind.TRIO: (3, 0),
    PlayKind.AIRPLANE: (3, 0),
    PlayKind.TRIO_WITH_SOLO: (3, 1),
    PlayKind.AIRPLANE_WITH_SOLOS: (3, 1),
    PlayKind.TRIO_WITH_PAIR: (3, 2),
    PlayKind.AIRPLANE_WITH_PAIRS: (3, 2),
    PlayKind.BOMB: (4, 0),
    PlayKind.FOUR_WITH_DUAL_SOLO: (4, 1),
    PlayKind.FOUR_WITH_DUAL_PAIR: (4, 2),
    PlayKind.ROCKET: (1, 0),
}

# 同牌型比较时还要求长度相同的牌型
_CHAIN_KINDS = frozenset({
    PlayKind.CHAIN,
    PlayKind.PAIRS_CHAIN,
    PlayKind.AIRPLANE,
    PlayKind.AIRPLANE_WITH_SOLOS,
    PlayKind.AIRPLANE_WITH_PAIRS,
})


@dataclass(frozen=True)
class Play:
    """一手合法出牌的结构化表示。

    primal 为主体点数（升序）：单张/对子/三条/炸弹的那个点数，
    三带/四带中的三条或四条，顺子/连对/飞机的整段序列。
    kickers 为带牌点数（升序）：三带一的单牌、四带二的两张单牌或两对、
    飞机的翅膀等。火箭的 primal 与 kickers 均为空。

    Play 本身只是数据，合法性由 Guard[Play] 保证：
    本库的 API 只产出和接受 Guard 包装过的 Play。
    """
    kind: PlayKind
    primal: Tuple[Rank, ...] = ()
    kickers: Tuple[Rank, ...] = ()

    @property
    def main_rank(self) -> Rank:
        """主牌点数（用于比较大小）：主体中最小的点数"""
        if self.kind == PlayKind.ROCKET:
            return Rank.RED_JOKER
        return self.primal[0]

    @property
    def chain_length(self) -> int:
        """顺子/连对/飞机的连续组数，其余牌型为 1"""
        return max(len(self.primal), 1)

    @property
    def is_bomb_like(self) -> bool:
        return self.kind.is_bomb_like

    @property
    def card_count(self) -> int:
        return sum(self.to_counts())

    def to_counts(self) -> List[int]:
        """按角色给每个点数赋张数：单=1，对=2，三=3，四=4"""
        counts = [0] * NUM_RANKS
        if self.kind == PlayKind.ROCKET:
            counts[Rank.BLACK_JOKER] = 1
            counts[Rank.RED_JOKER] = 1
            return counts
        for rank in self.primal:
            counts[rank] = self.kind.primal_size
        for rank in self.kickers:
            counts[rank] = self.kind.kicker_size
        return counts

    # 偏序：无法比较时四个比较运算都返回 False
    def __lt__(self, other: Any) -> bool:
        return compare_plays(self, other) == -1

    def __le__(self, other: Any) -> bool:
        return compare_plays(self, other) in (-1, 0)

    def __gt__(self, other: Any) -> bool:
        return compare_plays(self, other) == 1

    def __ge__(self, other: Any) -> bool:
        return compare_plays(self, other) in (1, 0)

    def __repr__(self) -> str:
        if self.kind == PlayKind.ROCKET:
            return "[ROCKET]"
        primal = ",".join(r.name for r in self.primal)
        if not self.kickers:
            return f"[{self.kind.value}] {primal}"
        kickers = ",".join(r.name for r in self.kickers)
        return f"[{self.kind.value}] {primal} + {kickers}"


ROCKET = Play(PlayKind.ROCKET)


def to_hand(play: Guard[Play]) -> Hand:
    """把一手已校验的出牌还原成 Hand"""
    return Hand.new_unchecked(play.to_counts())


# ============================================================
#  牌型比较
# ============================================================

def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def compare_kinds(a: PlayKind, b: PlayKind) -> Optional[int]:
    """
    牌型之间的偏序。
    相同牌型返回 0；不同牌型只有炸弹/火箭参与时才可比较，否则返回 None。
    """
    if a == b:
        return 0
    if a.level == b.level:
        return None
    return _sign(a.level - b.level)


def compare_plays(a, b) -> Optional[int]:
    """
    比较两手牌，返回 -1/0/1，无法比较时返回 None。
    规则：
    1. 火箭大于一切，炸弹大于非炸弹/非火箭
    2. 不同的普通牌型之间无法比较
    3. 同牌型比主体最小点数；顺子/连对/飞机类还要求长度相同
    """
    a = a.value if isinstance(a, Guard) else a
    b = b.value if isinstance(b, Guard) else b
    if not isinstance(a, Play) or not isinstance(b, Play):
        return None

    if a.kind != b.kind:
        return compare_kinds(a.kind, b.kind)
    if a.kind == PlayKind.ROCKET:
        return 0
    if a.kind.is_chain and len(a.primal) != len(b.primal):
        return None
    return _sign(a.primal[0] - b.primal[0])
