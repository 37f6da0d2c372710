"""
异常定义
"""


class InvalidArgumentError(ValueError):
    """参数不满足前置条件（空loc、空根URI、空条目集合等）"""
