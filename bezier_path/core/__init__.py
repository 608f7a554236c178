"""
core - 核心算法模块

包含:
- bezier: 线性插值与二次 Bézier 求值
- waypoints: 路径点校验与圆角点展开
- sections: 分段构造与弧长参数化
- frame: 刚体坐标系
- search: 最近点参数搜索
"""

from .bezier import lerp, quadratic_bezier, quadratic_bezier_derivative
from .frame import Frame
from .search import bracketed_search, narrowing_search
from .sections import Section, SectionKind, build_sections, parameterize_sections
from .waypoints import expand_waypoints, validate_waypoints

__all__ = [
    "lerp",
    "quadratic_bezier",
    "quadratic_bezier_derivative",
    "Frame",
    "narrowing_search",
    "bracketed_search",
    "Section",
    "SectionKind",
    "build_sections",
    "parameterize_sections",
    "expand_waypoints",
    "validate_waypoints",
]
