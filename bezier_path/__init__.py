"""
bezier_path - 圆角 Bézier 路径库

由稀疏的三维路径点构造平滑路径: 在每个拐角处用二次 Bézier 曲线圆角，
拼接为按弧长均匀参数化的曲线，支持位置、切向、坐标系与最近点查询。
"""

from .algorithm import BezierPath, build_path
from .config import DEFAULT_SETTINGS, PathSettings
from .core.frame import Frame
from .core.sections import Section, SectionKind
from .exceptions import BezierPathError, InvalidInputError

__version__ = "0.1.0"
__all__ = [
    "BezierPath",
    "build_path",
    "PathSettings",
    "DEFAULT_SETTINGS",
    "Frame",
    "Section",
    "SectionKind",
    "BezierPathError",
    "InvalidInputError",
]
