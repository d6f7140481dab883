"""终端渲染器 - 在终端中展示手牌、牌型识别与比较结果"""

from typing import Iterable, Optional

from ddz.engine.card import Rank, RANK_DISPLAY
from ddz.engine.hand import Hand
from ddz.engine.hand_type import PlayKind, Play, to_hand


# 颜色常量 (ANSI)
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

# 牌型中文名
PLAY_KIND_NAME = {
    PlayKind.SOLO: "单张",
    PlayKind.CHAIN: "顺子",
    PlayKind.PAIR: "对子",
    PlayKind.PAIRS_CHAIN: "连对",
    PlayKind.TRIO: "三条",
    PlayKind.AIRPLANE: "飞机",
    PlayKind.TRIO_WITH_SOLO: "三带一",
    PlayKind.AIRPLANE_WITH_SOLOS: "飞机带翅膀(单)",
    PlayKind.TRIO_WITH_PAIR: "三带二",
    PlayKind.AIRPLANE_WITH_PAIRS: "飞机带翅膀(对)",
    PlayKind.BOMB: "炸弹 💣",
    PlayKind.FOUR_WITH_DUAL_SOLO: "四带二(单)",
    PlayKind.FOUR_WITH_DUAL_PAIR: "四带二(对)",
    PlayKind.ROCKET: "火箭 🚀",
}

# 比较结果的显示符号
_ORDER_SYMBOL = {1: ">", 0: "=", -1: "<"}


class TerminalRenderer:
    """终端渲染器"""

    def __init__(self, color: bool = True):
        self.color = color

    def _paint(self, text: str, *styles: str) -> str:
        if not self.color or not styles:
            return text
        return f"{''.join(styles)}{text}{RESET}"

    # ============================================================
    #  牌面渲染
    # ============================================================

    def format_hand(self, hand: Hand) -> str:
        """将手牌格式化为字符串，王和2高亮"""
        parts = []
        for rank in hand.iter_ranks():
            display = RANK_DISPLAY[rank]
            if rank == Rank.RED_JOKER:
                parts.append(self._paint(display, RED, BOLD))
            elif rank == Rank.BLACK_JOKER:
                parts.append(self._paint(display, CYAN))
            elif rank == Rank.TWO:
                parts.append(self._paint(display, YELLOW))
            else:
                parts.append(display)
        return " ".join(parts)

    def format_play(self, play: Play) -> str:
        """[牌型名] 牌面"""
        type_name = PLAY_KIND_NAME.get(play.kind, play.kind.value)
        return f"[{type_name}] {self.format_hand(to_hand(play))}"

    # ============================================================
    #  分隔线与标题
    # ============================================================

    @staticmethod
    def separator(char: str = "─", width: int = 60) -> str:
        return char * width

    def print_header(self, title: str) -> None:
        """打印带框的标题"""
        line = self._paint("═" * 60, YELLOW, BOLD)
        print(f"\n{line}")
        print(self._paint(f"  {title}", YELLOW, BOLD))
        print(f"{line}\n")

    # ============================================================
    #  结果展示
    # ============================================================

    def show_play(self, play: Play) -> None:
        """展示一次牌型识别结果"""
        print(f"  {self.format_play(play)}")

    def show_not_a_play(self, hand: Hand) -> None:
        """展示不成牌型的手牌"""
        cards = self.format_hand(hand) or "(空)"
        print(f"  {cards}: {self._paint('不是合法牌型', DIM)}")

    def show_comparison(self, a: Hand, b: Hand, result: Optional[int]) -> None:
        """展示两手牌的比较结果"""
        left, right = self.format_hand(a), self.format_hand(b)
        if result is None:
            print(f"  {left}  {self._paint('无法比较', DIM)}  {right}")
        else:
            print(f"  {left}  {self._paint(_ORDER_SYMBOL[result], GREEN, BOLD)}  {right}")

    def show_search(self, kind: PlayKind, plays: Iterable[Play], limit: int = 0) -> int:
        """逐行展示搜索结果，limit > 0 时只展示前 limit 个，返回总数"""
        total = 0
        for play in plays:
            total += 1
            if not limit or total <= limit:
                print(f"  {total:>5}. {self.format_play(play)}")
        type_name = PLAY_KIND_NAME.get(kind, kind.value)
        print(f"\n  {self.separator('─', 40)}")
        print(f"  {type_name}: 共 {total} 种")
        return total
