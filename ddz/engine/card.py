"""点数定义 - 斗地主15种点数及其大小顺序"""

from enum import IntEnum
from typing import Dict, Optional, Tuple


class Rank(IntEnum):
    """点数枚举（数值即数组下标，数值越大牌越大）"""
    THREE = 0
    FOUR = 1
    FIVE = 2
    SIX = 3
    SEVEN = 4
    EIGHT = 5
    NINE = 6
    TEN = 7
    JACK = 8
    QUEEN = 9
    KING = 10
    ACE = 11
    TWO = 12
    BLACK_JOKER = 13
    RED_JOKER = 14

    @property
    def is_joker(self) -> bool:
        return self >= Rank.BLACK_JOKER

    @property
    def is_chainable(self) -> bool:
        """能否出现在顺子/连对/飞机中（2和王不行）"""
        return self < Rank.TWO

    @property
    def limit(self) -> int:
        """一副牌中该点数的张数上限"""
        return 1 if self.is_joker else 4


NUM_RANKS = len(Rank)

JOKERS: Tuple[Rank, Rank] = (Rank.BLACK_JOKER, Rank.RED_JOKER)

# 可以连成顺子的点数: 3 ~ A
CHAINABLE_RANKS: Tuple[Rank, ...] = tuple(r for r in Rank if r.is_chainable)


# 点数显示映射
RANK_DISPLAY: Dict[Rank, str] = {
    Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8",
    Rank.NINE: "9", Rank.TEN: "10", Rank.JACK: "J",
    Rank.QUEEN: "Q", Rank.KING: "K", Rank.ACE: "A",
    Rank.TWO: "2", Rank.BLACK_JOKER: "小王", Rank.RED_JOKER: "大王",
}

# 输入时额外接受的写法
_RANK_ALIASES: Dict[str, Rank] = {
    "T": Rank.TEN,
    "BJ": Rank.BLACK_JOKER,
    "SJ": Rank.BLACK_JOKER,
    "RJ": Rank.RED_JOKER,
}

_TEXT_TO_RANK: Dict[str, Rank] = {v: k for k, v in RANK_DISPLAY.items()}
_TEXT_TO_RANK.update(_RANK_ALIASES)


def rank_from_text(text: str) -> Optional[Rank]:
    """从显示文本反查 Rank（如 'A' → Rank.ACE, 'bj' → Rank.BLACK_JOKER）"""
    return _TEXT_TO_RANK.get(text.strip().upper())
