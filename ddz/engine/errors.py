"""异常定义 - 构造手牌时可能出现的输入错误"""

from .card import Rank, NUM_RANKS


class HandError(ValueError):
    """手牌输入非法（所有构造类错误的基类）"""


class InvalidCountError(HandError):
    """某个点数的张数超出范围"""

    def __init__(self, rank: Rank, count: int, limit: int):
        self.rank = rank
        self.count = count
        self.limit = limit
        if count < 0:
            msg = f"`{rank.name}` 的张数不能为负数: {count}"
        elif rank.is_joker:
            msg = f"`{rank.name}` 最多一张，实际指定了 {count} 张"
        else:
            msg = f"`{rank.name}` 最多四张，实际指定了 {count} 张"
        super().__init__(msg)


class WrongLengthError(HandError):
    """计数序列长度不是15"""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"计数序列长度错误: 期望 {NUM_RANKS}，实际 {length}")


class DuplicateRankError(HandError):
    """同一点数被重复指定"""

    def __init__(self, rank: Rank):
        self.rank = rank
        super().__init__(f"`{rank.name}` 的张数被重复指定")


class UnknownRankError(HandError):
    """无法识别的点数文本"""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"无法识别的点数: {token!r}")
