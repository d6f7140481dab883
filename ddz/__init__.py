"""斗地主规则库 - 手牌表示、牌型识别、大小比较与出牌枚举"""

__version__ = "0.1.0"
