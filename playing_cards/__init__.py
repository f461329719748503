#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
扑克牌基础组件模块
包含花色点数枚举、不可变卡牌、牌组、配置和异常等基础组件
"""

from .types import Suit, Rank, is_valid_rank, is_valid_suit, get_all_suits, get_all_ranks
from .card import Card
from .deck import Deck
from .config import DeckConfig, LoggingConfig, configure_logging
from .exceptions import (
    PlayingCardError, InvalidValueError, DuplicateCardError,
    EmptyDeckError, DeckConfigError,
)

__version__ = "1.0.0"

__all__ = [
    # 枚举类型
    'Suit', 'Rank', 'is_valid_rank', 'is_valid_suit', 'get_all_suits', 'get_all_ranks',

    # 卡牌相关
    'Card', 'Deck',

    # 配置相关
    'DeckConfig', 'LoggingConfig', 'configure_logging',

    # 异常类型
    'PlayingCardError', 'InvalidValueError', 'DuplicateCardError',
    'EmptyDeckError', 'DeckConfigError',
]
