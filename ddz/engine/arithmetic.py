"""手牌运算 - Hand 与 Hand / Guard[Play] 之间的加减

带校验的 add / sub 在越界时返回 None；
unchecked_add / unchecked_sub 不做校验，只给已经自证合法的调用方使用。
"""

import logging
from typing import List, Optional, Union

from .card import NUM_RANKS
from .errors import HandError
from .guard import Guard
from .hand import Hand
from .hand_type import Play

logger = logging.getLogger(__name__)

Operand = Union[Hand, Guard[Play], None]


def _counts_of(operand: Union[Hand, Guard[Play]]) -> List[int]:
    if isinstance(operand, Hand):
        return operand.to_array()
    if isinstance(operand, Guard) and isinstance(operand.value, Play):
        return operand.value.to_counts()
    raise TypeError(f"不支持的运算对象: {type(operand).__name__}")


# ============================================================
#  不校验版本
# ============================================================

def unchecked_add(lhs: Union[Hand, Guard[Play]], rhs: Union[Hand, Guard[Play]]) -> Hand:
    """逐点数相加，不校验结果。调用方必须保证两边合法且和不越界"""
    a, b = _counts_of(lhs), _counts_of(rhs)
    return Hand.new_unchecked([a[i] + b[i] for i in range(NUM_RANKS)])


def unchecked_sub(lhs: Union[Hand, Guard[Play]], rhs: Union[Hand, Guard[Play]]) -> Hand:
    """逐点数相减，按 8 位无符号回绕，不校验结果。

    调用方必须保证每个点数 lhs >= rhs；否则得到的是垃圾数据而不是异常。
    """
    a, b = _counts_of(lhs), _counts_of(rhs)
    return Hand.new_unchecked([(a[i] - b[i]) & 0xFF for i in range(NUM_RANKS)])


# ============================================================
#  带校验版本
# ============================================================

def add(lhs: Operand, rhs: Operand) -> Optional[Hand]:
    """相加后重新校验；任一边为 None 或结果越界时返回 None"""
    if lhs is None or rhs is None:
        return None
    try:
        return Hand(unchecked_add(lhs, rhs).to_array())
    except HandError as e:
        logger.debug("加法越界: %s", e)
        return None


def sub(lhs: Operand, rhs: Operand) -> Optional[Hand]:
    """相减后重新校验；任一边为 None 或某个点数不够减时返回 None"""
    if lhs is None or rhs is None:
        return None
    try:
        return Hand(unchecked_sub(lhs, rhs).to_array())
    except HandError as e:
        logger.debug("减法越界: %s", e)
        return None


def contains(hand: Hand, part: Union[Hand, Guard[Play]]) -> bool:
    """hand 是否包含 part 的全部牌"""
    return sub(hand, part) is not None
