"""
扑克牌组件异常定义
区分调用方传入的非法值(不可恢复)和空牌组(可恢复)
"""


class PlayingCardError(Exception):
    """扑克牌组件基础异常类"""
    pass


class InvalidValueError(PlayingCardError, ValueError):
    """无效的花色、点数或卡牌值异常"""
    pass


class DuplicateCardError(InvalidValueError):
    """牌组中出现重复卡牌异常"""
    pass


class EmptyDeckError(PlayingCardError, IndexError):
    """牌组已空(或剩余牌数不足)时发牌异常"""
    pass


class DeckConfigError(PlayingCardError, ValueError):
    """牌组或日志配置错误异常"""
    pass
