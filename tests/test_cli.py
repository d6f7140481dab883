"""终端渲染与命令行单元测试"""

import pytest

from ddz.cli import main
from ddz.config import load_settings, DEFAULT_LOG_LEVEL
from ddz.engine.builder import parse_hand
from ddz.engine.hand_detector import detect_play
from ddz.engine.hand_type import PlayKind
from ddz.ui.renderer import TerminalRenderer, PLAY_KIND_NAME, RED, RESET


# ============================================================
#  渲染器
# ============================================================

class TestRenderer:
    """TerminalRenderer 的纯文本与彩色输出"""

    def test_every_kind_has_a_name(self):
        assert set(PLAY_KIND_NAME) == set(PlayKind)

    def test_format_hand_plain(self):
        renderer = TerminalRenderer(color=False)
        assert renderer.format_hand(parse_hand("大王 3 10 2")) == "3 10 2 大王"

    def test_format_hand_color(self):
        renderer = TerminalRenderer(color=True)
        text = renderer.format_hand(parse_hand("大王"))
        assert text.startswith(RED)
        assert text.endswith(RESET)

    def test_format_play(self):
        renderer = TerminalRenderer(color=False)
        play = detect_play(parse_hand("3 3 3 4"))
        assert renderer.format_play(play) == "[三带一] 3 3 3 4"

    def test_print_header(self, capsys):
        TerminalRenderer(color=False).print_header("标题")
        out = capsys.readouterr().out
        assert "  标题" in out
        assert "═" * 60 in out

    def test_show_search(self, capsys):
        renderer = TerminalRenderer(color=False)
        plays = [detect_play(parse_hand(t)) for t in ("3", "4", "5")]
        total = renderer.show_search(PlayKind.SOLO, plays, limit=2)
        out = capsys.readouterr().out
        assert total == 3
        assert "1. [单张] 3" in out
        assert "[单张] 5" not in out
        assert "单张: 共 3 种" in out


# ============================================================
#  配置
# ============================================================

class TestSettings:
    """环境变量配置"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DDZ_LOG_LEVEL", raising=False)
        monkeypatch.delenv("NO_COLOR", raising=False)
        settings = load_settings()
        assert settings.log_level == DEFAULT_LOG_LEVEL
        assert settings.color

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DDZ_LOG_LEVEL", "debug")
        monkeypatch.setenv("NO_COLOR", "1")
        settings = load_settings()
        assert settings.log_level == "DEBUG"
        assert not settings.color


# ============================================================
#  命令行
# ============================================================

class TestCli:
    """子命令输出与退出码"""

    def test_classify(self, capsys):
        assert main(["--no-color", "classify", "3 3 3 4"]) == 0
        assert "[三带一] 3 3 3 4" in capsys.readouterr().out

    def test_classify_not_a_play(self, capsys):
        assert main(["--no-color", "classify", "3 4"]) == 1
        assert "不是合法牌型" in capsys.readouterr().out

    def test_bad_input(self, capsys):
        assert main(["--no-color", "classify", "3 X"]) == 2
        assert "输入错误" in capsys.readouterr().err

    def test_too_many_cards(self, capsys):
        assert main(["--no-color", "classify", "大王 大王"]) == 2

    def test_compare(self, capsys):
        assert main(["--no-color", "compare", "3 3", "4 4"]) == 0
        assert "3 3  <  4 4" in capsys.readouterr().out

    def test_compare_incomparable(self, capsys):
        assert main(["--no-color", "compare", "3", "4 4"]) == 0
        assert "无法比较" in capsys.readouterr().out

    def test_search_count(self, capsys):
        assert main(["--no-color", "search", "chain", "--count"]) == 0
        assert capsys.readouterr().out.strip() == "36"

    def test_search_with_hand(self, capsys):
        assert main(["--no-color", "search", "pair", "--hand", "3 3 5 5 5"]) == 0
        out = capsys.readouterr().out
        assert "[对子] 3 3" in out
        assert "[对子] 5 5" in out
        assert "对子: 共 2 种" in out
        assert "搜索对子 (5 张牌)" in out

    def test_search_full_deck_header(self, capsys):
        assert main(["--no-color", "search", "rocket"]) == 0
        out = capsys.readouterr().out
        assert "搜索火箭 🚀 (54 张牌)" in out
        assert "═" * 60 in out

    def test_unknown_kind(self):
        with pytest.raises(SystemExit):
            main(["search", "straight"])
