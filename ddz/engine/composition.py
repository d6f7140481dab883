"""结构分解 - 把一手牌按张数分成单张/对子/三条/四条四组"""

from dataclasses import dataclass
from typing import List, Tuple

from .card import Rank
from .guard import Guard
from .hand import Hand


@dataclass(frozen=True)
class Group:
    """张数相同的一组点数（升序），以及它们是否构成可连的连续序列"""
    ranks: Tuple[Rank, ...] = ()
    consecutive: bool = True

    def __len__(self) -> int:
        return len(self.ranks)


@dataclass(frozen=True)
class Composition:
    """一手牌的结构：四个组两两不相交，并集恰好是所有出现过的点数"""
    solos: Group
    pairs: Group
    trios: Group
    fours: Group

    def group(self, multiplicity: int) -> Group:
        """按张数取组（1/2/3/4）"""
        return (self.solos, self.pairs, self.trios, self.fours)[multiplicity - 1]


class _GroupBuilder:
    """扫描过程中累积一个组"""

    def __init__(self):
        self.ranks: List[Rank] = []
        self.consecutive = True

    def push(self, rank: Rank) -> None:
        # 一旦断开就永远断开：遇到 2/王，或与上一个点数不相邻
        if self.consecutive:
            if not rank.is_chainable:
                self.consecutive = False
            elif self.ranks and rank - self.ranks[-1] != 1:
                self.consecutive = False
        self.ranks.append(rank)

    def freeze(self) -> Group:
        return Group(tuple(self.ranks), self.consecutive)


def compose(hand: Hand) -> Guard[Composition]:
    """从小到大扫描一遍15个计数，得到唯一的 Composition"""
    builders = [_GroupBuilder() for _ in range(4)]
    for rank in Rank:
        count = hand[rank]
        if count == 0:
            continue
        if not 1 <= count <= 4:
            raise AssertionError(f"`{rank.name}` 的张数为 {count}，校验过的 Hand 不应出现")
        builders[count - 1].push(rank)

    solos, pairs, trios, fours = (b.freeze() for b in builders)
    return Guard.new_unchecked(Composition(solos, pairs, trios, fours))
