"""牌型检测器单元测试 - 覆盖14种合法牌型 + 比较逻辑"""

import pytest

from ddz.engine.card import Rank
from ddz.engine.composition import compose
from ddz.engine.guard import Guard
from ddz.engine.hand import Hand
from ddz.engine.hand_type import PlayKind, Play, to_hand, compare_plays, compare_kinds
from ddz.engine.hand_detector import (
    detect_play, detect_as, guess_play, to_play, can_beat, compare_hands,
)
from ddz.engine.builder import hand_of, parse_hand


# ============================================================
#  辅助：快速构造
# ============================================================

def play_of(text: str) -> Guard:
    """从文本识别牌型，断言合法"""
    play = detect_play(parse_hand(text))
    assert play is not None, text
    return play


def bomb(rank: Rank) -> Guard:
    return detect_play(hand_of((rank, 4)))


ROCKET_HAND = hand_of(Rank.BLACK_JOKER, Rank.RED_JOKER)


# ============================================================
#  基础牌型测试
# ============================================================

class TestBasicTypes:
    """单张、对子、三条、炸弹、火箭"""

    def test_solo(self):
        play = detect_play(hand_of(Rank.ACE))
        assert play is not None
        assert play.kind == PlayKind.SOLO
        assert play.main_rank == Rank.ACE

    def test_solo_joker(self):
        play = detect_play(hand_of(Rank.RED_JOKER))
        assert play.kind == PlayKind.SOLO
        assert play.main_rank == Rank.RED_JOKER

    def test_pair(self):
        play = detect_play(hand_of((Rank.KING, 2)))
        assert play.kind == PlayKind.PAIR
        assert play.primal == (Rank.KING,)

    def test_trio(self):
        play = detect_play(hand_of((Rank.SEVEN, 3)))
        assert play.kind == PlayKind.TRIO
        assert play.main_rank == Rank.SEVEN

    def test_bomb(self):
        play = detect_play(hand_of((Rank.ACE, 4)))
        assert play.kind == PlayKind.BOMB
        assert play.main_rank == Rank.ACE

    def test_bomb_matches_no_other_kind(self):
        comp = compose(hand_of((Rank.NINE, 4)))
        matches = [k for k in PlayKind if to_play(comp, k) is not None]
        assert matches == [PlayKind.BOMB]

    def test_rocket(self):
        play = detect_play(ROCKET_HAND)
        assert play.kind == PlayKind.ROCKET
        assert play.primal == ()
        assert play.main_rank == Rank.RED_JOKER

    def test_empty_returns_none(self):
        assert detect_play(Hand.EMPTY) is None

    def test_two_unrelated_solos(self):
        assert detect_play(hand_of(Rank.THREE, Rank.FIVE)) is None

    def test_result_is_guarded(self):
        assert isinstance(detect_play(hand_of(Rank.ACE)), Guard)


# ============================================================
#  带牌类测试
# ============================================================

class TestWithKickers:
    """三带一、三带对、四带二单、四带二对"""

    def test_trio_with_solo(self):
        play = play_of("8 8 8 3")
        assert play.kind == PlayKind.TRIO_WITH_SOLO
        assert play.primal == (Rank.EIGHT,)
        assert play.kickers == (Rank.THREE,)

    def test_trio_with_joker(self):
        play = play_of("8 8 8 大王")
        assert play.kind == PlayKind.TRIO_WITH_SOLO
        assert play.kickers == (Rank.RED_JOKER,)

    def test_trio_with_pair(self):
        play = play_of("J J J 5 5")
        assert play.kind == PlayKind.TRIO_WITH_PAIR
        assert play.primal == (Rank.JACK,)
        assert play.kickers == (Rank.FIVE,)

    def test_four_with_dual_solo(self):
        play = play_of("10 10 10 10 3 5")
        assert play.kind == PlayKind.FOUR_WITH_DUAL_SOLO
        assert play.primal == (Rank.TEN,)
        assert play.kickers == (Rank.THREE, Rank.FIVE)

    def test_four_with_one_joker(self):
        play = play_of("10 10 10 10 3 小王")
        assert play.kind == PlayKind.FOUR_WITH_DUAL_SOLO

    def test_four_with_rocket_rejected(self):
        """两张单牌恰好是大小王时不成牌型"""
        hand = parse_hand("10 10 10 10 小王 大王")
        assert detect_play(hand) is None
        assert detect_as(hand, PlayKind.FOUR_WITH_DUAL_SOLO) is None

    def test_four_with_same_two_solos_is_not_dual_solo(self):
        """四带两张相同的牌在结构上是四带一对，不成牌型"""
        assert detect_play(parse_hand("10 10 10 10 3 3")) is None

    def test_four_with_dual_pair(self):
        play = play_of("Q Q Q Q 3 3 5 5")
        assert play.kind == PlayKind.FOUR_WITH_DUAL_PAIR
        assert play.primal == (Rank.QUEEN,)
        assert play.kickers == (Rank.THREE, Rank.FIVE)


# ============================================================
#  顺子类测试
# ============================================================

class TestChains:
    """顺子、连对"""

    def test_chain_5(self):
        play = play_of("3 4 5 6 7")
        assert play.kind == PlayKind.CHAIN
        assert play.main_rank == Rank.THREE
        assert play.chain_length == 5

    def test_chain_12(self):
        play = play_of("3 4 5 6 7 8 9 10 J Q K A")
        assert play.kind == PlayKind.CHAIN
        assert play.chain_length == 12

    def test_chain_with_two_invalid(self):
        assert detect_play(parse_hand("10 J Q K A 2")) is None

    def test_chain_of_four_invalid(self):
        assert detect_play(parse_hand("3 4 5 6")) is None

    def test_pairs_chain_3(self):
        play = play_of("3 3 4 4 5 5")
        assert play.kind == PlayKind.PAIRS_CHAIN
        assert play.primal == (Rank.THREE, Rank.FOUR, Rank.FIVE)

    def test_two_pairs_invalid(self):
        assert detect_play(parse_hand("3 3 4 4")) is None

    def test_pairs_chain_with_two_invalid(self):
        assert detect_play(parse_hand("K K A A 2 2")) is None


# ============================================================
#  飞机类测试
# ============================================================

class TestAirplanes:
    """飞机不带、飞机带单、飞机带对"""

    def test_airplane_plain(self):
        play = play_of("3 3 3 4 4 4")
        assert play.kind == PlayKind.AIRPLANE
        assert play.chain_length == 2

    def test_airplane_with_two_invalid(self):
        assert detect_play(parse_hand("A A A 2 2 2")) is None

    def test_airplane_with_solos(self):
        play = play_of("3 3 3 4 4 4 5 6")
        assert play.kind == PlayKind.AIRPLANE_WITH_SOLOS
        assert play.primal == (Rank.THREE, Rank.FOUR)
        assert play.kickers == (Rank.FIVE, Rank.SIX)

    def test_airplane_with_one_joker(self):
        play = play_of("3 3 3 4 4 4 5 大王")
        assert play.kind == PlayKind.AIRPLANE_WITH_SOLOS

    def test_airplane_with_rocket_rejected(self):
        """翅膀恰好是大小王时不成牌型"""
        assert detect_play(parse_hand("3 3 3 4 4 4 小王 大王")) is None

    def test_airplane_with_rocket_among_kickers_rejected(self):
        assert detect_play(parse_hand("3 3 3 4 4 4 5 5 5 9 小王 大王")) is None

    def test_airplane_with_pairs(self):
        play = play_of("3 3 3 4 4 4 5 5 6 6")
        assert play.kind == PlayKind.AIRPLANE_WITH_PAIRS
        assert play.kickers == (Rank.FIVE, Rank.SIX)

    def test_airplane_kicker_count_mismatch(self):
        assert detect_play(parse_hand("3 3 3 4 4 4 5")) is None

    def test_airplane_3_groups(self):
        play = play_of("3 3 3 4 4 4 5 5 5")
        assert play.kind == PlayKind.AIRPLANE
        assert play.chain_length == 3


# ============================================================
#  互逆：Play → Hand → Play
# ============================================================

ROUND_TRIP_CASES = [
    "A", "大王", "3 4 5 6 7 8", "K K", "5 5 6 6 7 7", "9 9 9",
    "10 10 10 J J J Q Q Q", "6 6 6 2", "7 7 7 8 8 8 3 大王",
    "4 4 4 A A", "8 8 8 9 9 9 3 3 2 2", "2 2 2 2",
    "5 5 5 5 3 小王", "K K K K 3 3 A A", "小王 大王",
]


class TestRoundTrip:
    """to_hand 后再识别得到原牌型"""

    @pytest.mark.parametrize("text", ROUND_TRIP_CASES)
    def test_round_trip(self, text):
        hand = parse_hand(text)
        play = detect_play(hand)
        assert play is not None
        assert to_hand(play) == hand
        assert detect_play(to_hand(play)) == play

    def test_rocket_to_hand(self):
        assert to_hand(detect_play(ROCKET_HAND)) == ROCKET_HAND

    def test_every_kind_covered(self):
        kinds = {detect_play(parse_hand(t)).kind for t in ROUND_TRIP_CASES}
        assert kinds == set(PlayKind)

    def test_hand_to_play_shortcut(self):
        hand = parse_hand("6 6 6 2")
        assert hand.to_play() == detect_play(hand)


# ============================================================
#  牌型比较测试
# ============================================================

class TestCanBeat:
    """can_beat 与偏序比较"""

    def test_bigger_solo_beats(self):
        ace, king = play_of("A"), play_of("K")
        assert can_beat(ace, king) is True
        assert can_beat(king, ace) is False

    def test_two_beats_ace_and_joker_beats_two(self):
        assert can_beat(play_of("2"), play_of("A"))
        assert can_beat(play_of("小王"), play_of("2"))
        assert can_beat(play_of("大王"), play_of("小王"))

    def test_bomb_beats_solo(self):
        assert can_beat(bomb(Rank.THREE), play_of("A")) is True

    def test_bomb_beats_four_with_kickers(self):
        assert can_beat(bomb(Rank.THREE), play_of("A A A A 3 4"))

    def test_bigger_bomb_beats_smaller(self):
        assert bomb(Rank.THREE) < bomb(Rank.FOUR)
        assert can_beat(bomb(Rank.ACE), bomb(Rank.THREE)) is True
        assert can_beat(bomb(Rank.THREE), bomb(Rank.ACE)) is False

    def test_rocket_beats_every_bomb(self):
        rocket = detect_play(ROCKET_HAND)
        for rank in list(Rank)[:13]:
            assert rocket > bomb(rank)
            assert can_beat(rocket, bomb(rank))
            assert not can_beat(bomb(rank), rocket)

    def test_rocket_equals_rocket(self):
        assert compare_plays(detect_play(ROCKET_HAND), detect_play(ROCKET_HAND)) == 0

    def test_different_kind_incomparable(self):
        solo, pair = play_of("A"), play_of("3 3")
        assert compare_plays(solo, pair) is None
        assert can_beat(solo, pair) is False
        assert can_beat(pair, solo) is False
        assert not solo < pair
        assert not solo > pair
        assert not solo <= pair
        assert not solo >= pair

    def test_different_length_chain_incomparable(self):
        s5 = play_of("3 4 5 6 7")
        s6 = play_of("3 4 5 6 7 8")
        assert compare_plays(s5, s6) is None
        assert can_beat(s6, s5) is False
        assert can_beat(s5, s6) is False

    def test_same_length_chain_comparison(self):
        low = play_of("3 4 5 6 7")
        high = play_of("4 5 6 7 8")
        assert can_beat(high, low) is True
        assert can_beat(low, high) is False

    def test_airplane_with_solos_compares_by_trios(self):
        low = play_of("3 3 3 4 4 4 A 2")
        high = play_of("5 5 5 6 6 6 3 4")
        assert high > low

    def test_kickers_do_not_matter(self):
        a = play_of("9 9 9 3")
        b = play_of("9 9 9 K")
        assert compare_plays(a, b) == 0
        assert a <= b and a >= b
        assert a != b

    def test_compare_kinds(self):
        assert compare_kinds(PlayKind.SOLO, PlayKind.SOLO) == 0
        assert compare_kinds(PlayKind.SOLO, PlayKind.PAIR) is None
        assert compare_kinds(PlayKind.BOMB, PlayKind.CHAIN) == 1
        assert compare_kinds(PlayKind.BOMB, PlayKind.ROCKET) == -1

    def test_compare_hands(self):
        assert compare_hands(parse_hand("3 3"), parse_hand("4 4")) == -1
        assert compare_hands(parse_hand("3 3"), parse_hand("3 5")) is None
        assert compare_hands(parse_hand("2 2 2 2"), parse_hand("3 3")) == 1

    def test_guess_play_on_composition(self):
        comp = compose(parse_hand("7 7 7 7"))
        assert guess_play(comp) == to_play(comp, PlayKind.BOMB)
