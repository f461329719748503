"""
扑克牌相关类型定义.

定义扑克牌的花色、点数枚举，以及对应的名称表和有效性检查函数.
"""

from enum import Enum, IntEnum
from typing import Any, Dict, List


class Suit(IntEnum):
    """
    扑克牌花色枚举.

    数值用于同点数时的比较: 梅花 < 方块 < 红桃 < 黑桃.
    """

    CLUBS = 0       # 梅花
    DIAMONDS = 1    # 方块
    HEARTS = 2      # 红桃
    SPADES = 3      # 黑桃

    @property
    def display_name(self) -> str:
        """返回花色的英文名称，如"Spades"."""
        return SUIT_NAMES[self]

    @property
    def code(self) -> str:
        """返回花色的单字母代码，如"S"."""
        return SUIT_CODES[self]

    @property
    def symbol(self) -> str:
        """返回花色的Unicode符号，如"♠"."""
        return SUIT_SYMBOLS[self]


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    数值越大表示点数越大，A为最大.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def display_name(self) -> str:
        """返回点数的显示名称，如"Ace"或"10"."""
        return RANK_NAMES[self]

    @property
    def code(self) -> str:
        """返回点数的简短代码，如"A"或"10"."""
        return RANK_CODES[self]


RANK_NAMES: Dict[Rank, str] = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "Jack", Rank.QUEEN: "Queen",
    Rank.KING: "King", Rank.ACE: "Ace"
}

RANK_CODES: Dict[Rank, str] = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K", Rank.ACE: "A"
}

SUIT_NAMES: Dict[Suit, str] = {
    Suit.CLUBS: "Clubs", Suit.DIAMONDS: "Diamonds",
    Suit.HEARTS: "Hearts", Suit.SPADES: "Spades"
}

SUIT_CODES: Dict[Suit, str] = {
    Suit.CLUBS: "C", Suit.DIAMONDS: "D",
    Suit.HEARTS: "H", Suit.SPADES: "S"
}

SUIT_SYMBOLS: Dict[Suit, str] = {
    Suit.CLUBS: "♣", Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥", Suit.SPADES: "♠"
}


def _is_enum_value(value: Any, enum_cls: type) -> bool:
    # bool是int的子类，但True/False不是合法的点数或花色
    if isinstance(value, bool):
        return False
    if isinstance(value, enum_cls):
        return True
    # 其他枚举的成员(如把Rank当作Suit传入)一律无效
    if isinstance(value, Enum):
        return False
    if isinstance(value, int):
        return value in enum_cls._value2member_map_
    return False


def is_valid_rank(rank: Any) -> bool:
    """
    判断给定值是否为有效点数.

    Args:
        rank: Rank成员或与其数值相同的整数(2-14)

    Returns:
        bool: 有效返回True，否则返回False
    """
    return _is_enum_value(rank, Rank)


def is_valid_suit(suit: Any) -> bool:
    """
    判断给定值是否为有效花色.

    Args:
        suit: Suit成员或与其数值相同的整数(0-3)

    Returns:
        bool: 有效返回True，否则返回False
    """
    return _is_enum_value(suit, Suit)


def get_all_suits() -> List[Suit]:
    """获取所有花色，按从小到大排列."""
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """获取所有点数，按从小到大排列."""
    return list(Rank)
