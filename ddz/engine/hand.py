"""手牌模型 - 按点数计数的15维向量"""

from typing import Iterator, List, Optional, Sequence, Tuple

from .card import Rank, NUM_RANKS, RANK_DISPLAY
from .errors import InvalidCountError, WrongLengthError


def _validate(counts: Sequence[int]) -> Tuple[int, ...]:
    """校验计数序列，返回不可变副本；遇到第一个越界的点数即报错"""
    if len(counts) != NUM_RANKS:
        raise WrongLengthError(len(counts))
    for rank in Rank:
        count = counts[rank]
        if count < 0 or count > rank.limit:
            raise InvalidCountError(rank, count, rank.limit)
    return tuple(int(c) for c in counts)


class Hand:
    """一手牌：下标为 Rank 的15个计数。

    非王点数的张数在 [0, 4]，大小王各在 [0, 1]。
    Hand 是不可变值对象，只能经由校验构造函数产生
    （或由调用方自证合法的 new_unchecked）。
    """

    __slots__ = ("_counts",)

    FULL_DECK: "Hand"
    EMPTY: "Hand"

    def __init__(self, counts: Sequence[int]):
        # len(Hand) 是总张数而不是15，先取出计数
        if isinstance(counts, Hand):
            counts = counts._counts
        object.__setattr__(self, "_counts", _validate(counts))

    @classmethod
    def new_unchecked(cls, counts: Sequence[int]) -> "Hand":
        """跳过校验直接构造，调用方必须保证每个计数都在合法范围内"""
        hand = object.__new__(cls)
        object.__setattr__(hand, "_counts", tuple(counts))
        return hand

    def __setattr__(self, name, value) -> None:
        raise AttributeError("Hand 是不可变的")

    def __reduce__(self):
        return (Hand, (list(self._counts),))

    # ============================================================
    #  读取
    # ============================================================

    def to_array(self) -> List[int]:
        return list(self._counts)

    def __getitem__(self, rank: Rank) -> int:
        return self._counts[rank]

    def __len__(self) -> int:
        """总张数"""
        return sum(self._counts)

    @property
    def is_empty(self) -> bool:
        return not any(self._counts)

    def iter_ranks(self) -> Iterator[Rank]:
        """按点数从小到大逐张产出"""
        for rank in Rank:
            for _ in range(self._counts[rank]):
                yield rank

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._counts == other._counts

    def __hash__(self) -> int:
        return hash(self._counts)

    def __str__(self) -> str:
        return " ".join(RANK_DISPLAY[r] for r in self.iter_ranks())

    def __repr__(self) -> str:
        return f"Hand({list(self._counts)})"

    # ============================================================
    #  结构分析与牌型识别
    # ============================================================

    def composition(self):
        """结构分解，返回 Guard[Composition]"""
        from .composition import compose
        return compose(self)

    def to_play(self):
        """识别这手牌对应的牌型，返回 Guard[Play] 或 None"""
        from .hand_detector import detect_play
        return detect_play(self)

    # ============================================================
    #  运算（带校验，越界返回 None）
    # ============================================================

    def __add__(self, other) -> Optional["Hand"]:
        from .arithmetic import add
        return add(self, other)

    def __radd__(self, other) -> Optional["Hand"]:
        from .arithmetic import add
        return add(other, self)

    def __sub__(self, other) -> Optional["Hand"]:
        from .arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other) -> Optional["Hand"]:
        from .arithmetic import sub
        return sub(other, self)

    def __contains__(self, part) -> bool:
        from .arithmetic import contains
        return contains(self, part)


Hand.FULL_DECK = Hand([4] * 13 + [1, 1])
Hand.EMPTY = Hand([0] * NUM_RANKS)
