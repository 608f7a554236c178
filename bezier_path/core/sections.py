"""
sections - 路径分段构造与弧长参数化

将展开后的点序列切分为交替的直线段与二次 Bézier 拐角段，
并为每段分配归一化参数区间 [t_start, t_end) 与累积距离，
从而把段内参数映射为全局的弧长均匀参数 T。
"""

import enum
from dataclasses import dataclass, replace

import numpy as np

from ..utils.integrals import DEFAULT_RESOLUTION, chord_length
from .bezier import lerp, quadratic_bezier, quadratic_bezier_derivative


class SectionKind(enum.Enum):
    """分段类型，决定位置求值公式。"""

    LINEAR = 1
    QUADRATIC = 2


@dataclass(frozen=True, eq=False)
class Section:
    """
    路径的基本单元。

    Attributes:
        kind: 分段类型
        control_points: (3, 3) 控制点；直线段为 {A, B, B}
        length: 近似弧长
        t_start: 全局参数区间起点
        t_end: 全局参数区间终点（不含，最后一段闭合于 1）
        accumulated_distance: 之前所有分段的弧长之和
    """

    kind: SectionKind
    control_points: np.ndarray
    length: float = 0.0
    t_start: float = 0.0
    t_end: float = 0.0
    accumulated_distance: float = 0.0

    @property
    def t_range(self) -> tuple[float, float]:
        return self.t_start, self.t_end

    @property
    def start_point(self) -> np.ndarray:
        return self.control_points[0]

    @property
    def end_point(self) -> np.ndarray:
        if self.kind is SectionKind.LINEAR:
            return self.control_points[1]
        return self.control_points[2]

    @property
    def chord(self) -> np.ndarray:
        """首尾端点连线方向（未归一化）。"""
        return self.end_point - self.start_point

    def position(self, t: float | np.ndarray) -> np.ndarray:
        """在段内参数 t 处求位置。"""
        p0, p1, p2 = self.control_points
        if self.kind is SectionKind.LINEAR:
            return lerp(p0, p1, t)
        return quadratic_bezier(p0, p1, p2, t)

    def derivative(self, t: float | np.ndarray) -> np.ndarray:
        """
        在段内参数 t 处求导数。

        对所有分段类型统一使用二次 Bézier 导数公式。直线段控制点为 {A, B, B}，
        得到的是 2(1-t)(B-A)，其长度随 t 线性衰减，在 t=1 处为零向量。
        """
        p0, p1, p2 = self.control_points
        return quadratic_bezier_derivative(p0, p1, p2, t)

    def local_parameter(self, T: float, path_length: float) -> float:
        """
        将全局参数 T 映射为段内参数。

            t = (T * path_length - accumulated_distance) / length

        T >= 1 时固定返回 1；零长度分段返回 0。
        """
        if T >= 1:
            return 1.0
        if self.length <= 0:
            return 0.0
        return (T * path_length - self.accumulated_distance) / self.length


def _make_section(kind: SectionKind, p0, p1, p2, resolution: int) -> Section:
    control_points = np.array([p0, p1, p2], dtype=float)
    control_points.flags.writeable = False
    section = Section(kind=kind, control_points=control_points)
    return replace(section, length=chord_length(section.position, resolution))


def build_sections(expanded: np.ndarray, resolution: int = DEFAULT_RESOLUTION) -> list[Section]:
    """
    由展开点序列构造交替的直线段与拐角段。

    游标从索引 1 开始，每次取游标前、游标处、游标后三个点:
    直线段取 (E[i-1], E[i], E[i]) 后前进 1；
    拐角段取 (E[i-1], E[i], E[i+1]) 后前进 2。
    分段类型从直线段开始严格交替。

    Args:
        expanded: (M, 3) 展开后的点序列
        resolution: 弧长估计的等分数

    Returns:
        按顺序排列的分段列表（尚未参数化）
    """
    expanded = np.asarray(expanded, dtype=float)
    sections = []

    index = 1
    kind = SectionKind.LINEAR

    while index < len(expanded):
        previous_point = expanded[index - 1]
        point = expanded[index]

        if kind is SectionKind.LINEAR:
            sections.append(_make_section(kind, previous_point, point, point, resolution))
            index += 1
            kind = SectionKind.QUADRATIC
        else:
            next_point = expanded[index + 1]
            sections.append(_make_section(kind, previous_point, point, next_point, resolution))
            index += 2
            kind = SectionKind.LINEAR

    return sections


def total_length(sections: list[Section]) -> float:
    """所有分段弧长之和。"""
    return float(sum(section.length for section in sections))


def parameterize_sections(sections: list[Section], path_length: float) -> tuple[Section, ...]:
    """
    为每个分段分配参数区间与累积距离。

        t_start = Σ(之前分段 length) / path_length
        t_end = t_start + length / path_length
        accumulated_distance = Σ(之前分段 length)

    最后一段的 t_end 固定为 1.0。前置条件: path_length > 0。

    Args:
        sections: build_sections 的输出
        path_length: 路径总弧长

    Returns:
        参数化后的分段（新的不可变实例）
    """
    parameterized = []
    accumulated_t = 0.0
    accumulated_distance = 0.0

    for section in sections:
        portion = section.length / path_length
        parameterized.append(
            replace(
                section,
                t_start=accumulated_t,
                t_end=accumulated_t + portion,
                accumulated_distance=accumulated_distance,
            )
        )
        accumulated_t += portion
        accumulated_distance += section.length

    if parameterized:
        parameterized[-1] = replace(parameterized[-1], t_end=1.0)

    return tuple(parameterized)
