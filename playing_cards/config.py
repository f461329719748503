"""
牌组和日志配置
包含构建牌组的设置以及包日志的初始化
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .exceptions import DeckConfigError

PACKAGE_LOGGER_NAME = "playing_cards"
CONSOLE_HANDLER_NAME = "playing_cards.console"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DeckConfig:
    """
    牌组配置类
    """
    random_seed: Optional[int] = None   # 随机种子，用于可重现的洗牌
    start_empty: bool = False           # 是否创建空牌组
    shuffle_on_create: bool = False     # 创建后是否立即洗牌

    def __post_init__(self):
        """验证配置的有效性"""
        if self.random_seed is not None and (
            isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)
        ):
            raise DeckConfigError(f"随机种子必须是整数或None: {self.random_seed!r}")

        if self.start_empty and self.shuffle_on_create:
            raise DeckConfigError("空牌组无法在创建时洗牌")

    def make_rng(self) -> random.Random:
        """根据种子创建新的随机数生成器"""
        return random.Random(self.random_seed)


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    datefmt: str = '%H:%M:%S'

    def __post_init__(self):
        """规范化并验证日志级别"""
        self.log_level = str(self.log_level).upper()
        if self.log_level not in _VALID_LOG_LEVELS:
            raise DeckConfigError(f"无效的日志级别: {self.log_level}")


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    为包日志记录器配置控制台输出

    重复调用只会替换之前安装的处理器，不会重复输出.

    Args:
        config: 日志配置，为None时使用默认配置

    Returns:
        配置好的包日志记录器
    """
    config = config or LoggingConfig()
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    # 移除之前安装的处理器以避免重复
    for handler in package_logger.handlers[:]:
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.log_format, datefmt=config.datefmt))
    handler.set_name(CONSOLE_HANDLER_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, config.log_level))

    return package_logger
