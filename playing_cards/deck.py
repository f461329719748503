"""
扑克牌组管理.

定义Deck类，管理一组互不重复的扑克牌，提供洗牌、发牌等操作.
"""

import logging
import random
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from .card import Card
from .config import DeckConfig
from .exceptions import DuplicateCardError, EmptyDeckError, InvalidValueError

logger = logging.getLogger(__name__)


class Deck:
    """
    表示一副扑克牌.

    内部按"底 -> 顶"的顺序保存卡牌，列表末尾为牌顶，发牌从牌顶取出.
    完整牌组的标准顺序为先花色后点数: 梅花2..A, 方块2..A, 红桃2..A, 黑桃2..A，
    因此未洗牌的新牌组第一张发出黑桃A，最后一张发出梅花2.

    牌组为空后不会自动补牌，需要调用方重新创建牌组.
    使用可注入的随机数生成器以支持确定性测试.

    Attributes:
        _cards: 当前牌组中的牌列表(底 -> 顶)
        _rng: 随机数生成器

    Examples:
        >>> deck = Deck.new_full_deck(random.Random(42))
        >>> deck.shuffle()
        >>> card = deck.deal_card()
        >>> deck.remaining_count
        51
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None,
                 rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.

        Args:
            cards: 初始卡牌(底 -> 顶)。为None时创建标准顺序的完整52张牌
            rng: 随机数生成器，用于洗牌操作。为None时使用新的默认随机数生成器

        Raises:
            InvalidValueError: 当cards中包含非Card对象时
            DuplicateCardError: 当cards中包含重复的牌时
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        self._members: Set[Card] = set()

        for card in (Card.all_cards() if cards is None else cards):
            self._push(card)

        logger.debug(f"[牌组] 创建牌组，共 {len(self._cards)} 张牌")

    @classmethod
    def new_full_deck(cls, rng: Optional[random.Random] = None) -> 'Deck':
        """创建按标准顺序排列的完整52张牌组."""
        return cls(rng=rng)

    @classmethod
    def new_empty_deck(cls, rng: Optional[random.Random] = None) -> 'Deck':
        """创建空牌组，供调用方自行添加卡牌."""
        return cls(cards=(), rng=rng)

    @classmethod
    def from_config(cls, config: DeckConfig) -> 'Deck':
        """
        根据配置创建牌组.

        Args:
            config: 牌组配置

        Returns:
            Deck: 使用配置种子的牌组，按配置决定是否为空、是否洗牌
        """
        rng = config.make_rng()
        deck = cls.new_empty_deck(rng) if config.start_empty else cls.new_full_deck(rng)
        if config.shuffle_on_create:
            deck.shuffle()
        return deck

    def _push(self, card: Card) -> None:
        if not isinstance(card, Card):
            logger.warning(f"[牌组] 拒绝非卡牌对象: {card!r}")
            raise InvalidValueError(f"牌组只能包含Card对象，实际: {type(card).__name__}")
        if card in self._members:
            logger.warning(f"[牌组] 拒绝重复的牌: {card}")
            raise DuplicateCardError(f"牌组中已存在: {card}")
        self._cards.append(card)
        self._members.add(card)

    def add_card(self, card: Card) -> None:
        """
        将一张牌放到牌顶.

        Args:
            card: 要加入的牌

        Raises:
            InvalidValueError: 当card不是Card对象时
            DuplicateCardError: 当牌组中已有这张牌时
        """
        self._push(card)

    def shuffle(self) -> None:
        """
        洗牌.

        使用Fisher-Yates洗牌算法随机打乱剩余牌的顺序，不改变牌的组成.
        """
        if len(self._cards) < 2:
            return
        self._rng.shuffle(self._cards)
        logger.debug(f"[洗牌] 已打乱 {len(self._cards)} 张牌")

    def deal_card(self) -> Card:
        """
        从牌顶发一张牌.

        Returns:
            Card: 发出的牌

        Raises:
            EmptyDeckError: 当牌组为空时
        """
        if not self._cards:
            logger.warning("[发牌] 牌组已空，无法发牌")
            raise EmptyDeckError("牌组已空，无法发牌")

        card = self._cards.pop()
        self._members.discard(card)
        logger.debug(f"[发牌] 发出 {card}，剩余 {len(self._cards)} 张")
        if not self._cards:
            logger.debug("[发牌] 牌组已发完")
        return card

    def deal_cards(self, count: int) -> List[Card]:
        """
        发多张牌.

        Args:
            count: 要发的牌数

        Returns:
            List[Card]: 按发出顺序排列的牌

        Raises:
            ValueError: 当count为负数时
            EmptyDeckError: 当牌组中的牌不足时，此时不会发出任何牌
        """
        if count < 0:
            raise ValueError(f"发牌数量不能为负数: {count}")
        if count > len(self._cards):
            logger.warning(f"[发牌] 请求 {count} 张，但只剩 {len(self._cards)} 张")
            raise EmptyDeckError(f"牌组中只有{len(self._cards)}张牌，无法发{count}张")

        return [self.deal_card() for _ in range(count)]

    @property
    def remaining_count(self) -> int:
        """
        获取剩余牌数.

        Returns:
            int: 牌组中尚未发出的牌数
        """
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """检查牌组是否为空."""
        return len(self._cards) == 0

    @property
    def cards(self) -> Tuple[Card, ...]:
        """返回当前卡牌快照(底 -> 顶)."""
        return tuple(self._cards)

    def peek_top(self) -> Optional[Card]:
        """
        查看顶部的牌但不发出.

        Returns:
            Optional[Card]: 顶部的牌，如果牌组为空则返回None
        """
        return self._cards[-1] if self._cards else None

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        # 按发牌顺序(顶 -> 底)遍历，不修改牌组
        return reversed(list(self._cards))

    def __contains__(self, card: object) -> bool:
        return isinstance(card, Card) and card in self._members

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"
