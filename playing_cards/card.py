"""
扑克牌数据结构.

定义不可变的Card类，构造时强制校验花色和点数，支持全序比较、哈希和字符串表示.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .exceptions import InvalidValueError
from .types import (
    Rank, Suit, RANK_CODES, SUIT_CODES,
    get_all_ranks, get_all_suits, is_valid_rank, is_valid_suit,
)


# 简短字符串解析表，"T"作为10的别名
_RANK_PARSE_MAP: Dict[str, Rank] = {code: rank for rank, code in RANK_CODES.items()}
_RANK_PARSE_MAP["T"] = Rank.TEN

_SUIT_PARSE_MAP: Dict[str, Suit] = {code: suit for suit, code in SUIT_CODES.items()}


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，包含花色和点数. 两张牌花色和点数相同即相等，可自由共享和复制.
    排序规则: 先按点数升序(2最小，A最大)，点数相同再按花色升序
    (梅花 < 方块 < 红桃 < 黑桃).

    Attributes:
        suit: 花色，默认为梅花
        rank: 点数，默认为2

    Examples:
        >>> card = Card(Suit.SPADES, Rank.ACE)
        >>> str(card)
        'Ace of Spades'
        >>> card.to_short_str()
        'AS'
        >>> Card() == Card(Suit.CLUBS, Rank.TWO)
        True
    """

    suit: Suit = Suit.CLUBS
    rank: Rank = Rank.TWO

    def __post_init__(self) -> None:
        """
        校验并规范化花色和点数.

        与枚举数值相同的整数会被转换为对应的枚举成员.

        Raises:
            InvalidValueError: 当花色或点数不在枚举范围内时
        """
        if not is_valid_suit(self.suit):
            raise InvalidValueError(f"无效的花色: {self.suit!r}")
        if not is_valid_rank(self.rank):
            raise InvalidValueError(f"无效的点数: {self.rank!r}")
        object.__setattr__(self, 'suit', Suit(self.suit))
        object.__setattr__(self, 'rank', Rank(self.rank))

    @classmethod
    def create(cls, suit: Any, rank: Any) -> 'Card':
        """
        创建一张扑克牌.

        Args:
            suit: 花色
            rank: 点数

        Returns:
            Card: 新建的扑克牌

        Raises:
            InvalidValueError: 当花色或点数无效时
        """
        return cls(suit, rank)

    @staticmethod
    def is_valid_rank(rank: Any) -> bool:
        """判断点数是否有效，可在构造前调用."""
        return is_valid_rank(rank)

    @staticmethod
    def is_valid_suit(suit: Any) -> bool:
        """判断花色是否有效，可在构造前调用."""
        return is_valid_suit(suit)

    @classmethod
    def all_cards(cls) -> List['Card']:
        """按标准顺序(先花色后点数)返回全部52张牌."""
        return [cls(suit, rank) for suit in get_all_suits() for rank in get_all_ranks()]

    @property
    def sort_key(self) -> Tuple[Rank, Suit]:
        """排序键: (点数, 花色)."""
        return (self.rank, self.suit)

    def equals(self, other: object) -> bool:
        """
        判断两张牌是否相等.

        Args:
            other: 另一个对象

        Returns:
            bool: 花色和点数都相同时返回True，非Card对象返回False
        """
        if not isinstance(other, Card):
            return False
        return self.suit == other.suit and self.rank == other.rank

    def compare(self, other: 'Card') -> int:
        """
        比较两张牌的大小.

        Args:
            other: 另一张牌

        Returns:
            int: 当前牌较小返回负数，相等返回0，较大返回正数

        Raises:
            TypeError: 当other不是Card时
        """
        if not isinstance(other, Card):
            raise TypeError(f"只能与Card比较，实际: {type(other).__name__}")
        result = int(self.rank) - int(other.rank)
        if result == 0:
            result = int(self.suit) - int(other.suit)
        return result

    def to_string(self) -> str:
        """返回"点数 of 花色"格式的字符串，如"Ace of Spades"."""
        return f"{self.rank.display_name} of {self.suit.display_name}"

    def to_short_str(self) -> str:
        """
        返回卡牌的简短字符串表示.

        Returns:
            str: 格式为"点数花色"的字符串，如"AS"、"10H"
        """
        return f"{self.rank.code}{self.suit.code}"

    def to_display_str(self) -> str:
        """返回使用花色符号的显示字符串，如"A♠"."""
        return f"{self.rank.code}{self.suit.symbol}"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从简短字符串创建扑克牌对象.

        Args:
            card_str: 格式为"点数花色"的字符串，如"AS"、"10h"、"Td"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            InvalidValueError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        text = card_str.strip()
        if len(text) < 2:
            raise InvalidValueError(f"卡牌字符串格式错误: {card_str!r}")

        rank_str, suit_str = text[:-1].upper(), text[-1].upper()
        if rank_str not in _RANK_PARSE_MAP:
            raise InvalidValueError(f"无效的点数: {rank_str!r}")
        if suit_str not in _SUIT_PARSE_MAP:
            raise InvalidValueError(f"无效的花色: {suit_str!r}")

        return cls(_SUIT_PARSE_MAP[suit_str], _RANK_PARSE_MAP[rank_str])

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.suit, self.rank))

    def __lt__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.compare(other) >= 0
