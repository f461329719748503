"""
pytest配置文件

提供测试共用的fixture和标记注册：
- 固定种子的随机数生成器
- 标准顺序的完整牌组
"""

import random

import pytest

from playing_cards import Deck


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器fixture"""
    return random.Random(42)


@pytest.fixture
def full_deck(seeded_rng):
    """未洗牌的完整牌组fixture"""
    return Deck.new_full_deck(seeded_rng)


def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
