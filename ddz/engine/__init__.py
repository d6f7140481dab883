# 规则引擎模块
from .card import Rank, RANK_DISPLAY, rank_from_text
from .errors import HandError, InvalidCountError, WrongLengthError, DuplicateRankError, UnknownRankError
from .guard import Guard
from .hand import Hand
from .builder import hand_of, parse_hand
from .composition import Group, Composition, compose
from .hand_type import PlayKind, Play, to_hand, compare_plays, compare_kinds
from .hand_detector import detect_play, detect_as, guess_play, to_play, can_beat, compare_compositions, compare_hands
from .arithmetic import add, sub, unchecked_add, unchecked_sub, contains
from .search import PlaySpec, search_plays, find_plays, find_all_plays
