"""
exceptions - 异常类型

构造路径时的所有前置条件错误都抛出 InvalidInputError。
"""


class BezierPathError(Exception):
    """bezier_path 异常基类。"""


class InvalidInputError(BezierPathError, ValueError):
    """
    输入不满足构造前置条件。

    包括: 路径点少于 2 个、数组形状错误、含非有限值、相邻路径点重合、
    curve_size 为负或非有限值。
    """


__all__ = ["BezierPathError", "InvalidInputError"]
