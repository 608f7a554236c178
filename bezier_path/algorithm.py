"""
algorithm - 圆角 Bézier 路径主类

由稀疏的三维路径点构造平滑路径: 在每个内部路径点处用二次 Bézier 曲线圆角，
与直线段拼接成一条按弧长均匀参数化的曲线。参数 T ∈ [0, 1] 与行进距离成正比。

该模块实现 BezierPath 类，构造完成后不可修改，所有查询均为只读。
"""

import numpy as np

from .config import DEFAULT_SETTINGS, PathSettings
from .core.frame import Frame
from .core.search import bracketed_search, narrowing_search
from .core.sections import (
    Section,
    SectionKind,
    build_sections,
    parameterize_sections,
    total_length,
)
from .core.waypoints import expand_waypoints, validate_waypoints
from .exceptions import InvalidInputError
from .utils.geometry import is_degenerate
from .utils.logging_config import get_logger

logger = get_logger(__name__)


def _section_direction(section: Section, t: float) -> np.ndarray:
    """分段在段内参数 t 处的方向；导数退化时取首尾端点连线。"""
    direction = section.derivative(t)
    if is_degenerate(direction):
        return section.end_point - section.start_point
    return direction


class BezierPath:
    """
    圆角 Bézier 路径。

    构造流程: 校验路径点 → 展开圆角点 → 构造分段 → 弧长参数化。

    Attributes:
        waypoints: (N, 3) 输入路径点（只读副本）
        curve_size: 拐角圆角距离
        sections: 按顺序排列的分段
        path_length: 路径总弧长
        settings: 构造与查询参数
    """

    __slots__ = ("waypoints", "curve_size", "sections", "path_length", "settings", "_t_starts")

    def __init__(self, waypoints: np.ndarray, curve_size: float, settings: PathSettings | None = None):
        """
        构造路径。

        Args:
            waypoints: (N, 3) 路径点，N >= 2，相邻点不重合
            curve_size: 拐角圆角距离，非负
            settings: 可调参数，默认 DEFAULT_SETTINGS

        Raises:
            InvalidInputError: 输入不满足前置条件
        """
        settings = settings or DEFAULT_SETTINGS
        points = validate_waypoints(waypoints, curve_size)
        curve_size = float(curve_size)

        expanded = expand_waypoints(points, curve_size)
        sections = build_sections(expanded, settings.sample_resolution)
        path_length = total_length(sections)
        if not path_length > 0:
            raise InvalidInputError("waypoints span zero length")

        sections = parameterize_sections(sections, path_length)
        t_starts = np.array([section.t_start for section in sections])

        points.flags.writeable = False
        t_starts.flags.writeable = False

        _set = object.__setattr__
        _set(self, "waypoints", points)
        _set(self, "curve_size", curve_size)
        _set(self, "sections", sections)
        _set(self, "path_length", path_length)
        _set(self, "settings", settings)
        _set(self, "_t_starts", t_starts)

        logger.debug(
            "Built path: %d waypoints, %d sections, length=%.6g",
            len(points),
            len(sections),
            path_length,
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @staticmethod
    def _clamp(T: float) -> float:
        T = float(T)
        if not np.isfinite(T):
            raise ValueError(f"T must be finite, got {T}")
        return min(max(T, 0.0), 1.0)

    def length(self) -> float:
        """路径总弧长。"""
        return self.path_length

    def section_at(self, T: float) -> Section:
        """
        查找参数 T 所在的分段。

        返回满足 t_start <= T < t_end 的分段；T >= 1 时返回最后一段。
        零长度分段的区间为空，不会被选中。
        """
        T = self._clamp(T)
        index = int(np.searchsorted(self._t_starts, T, side="right")) - 1
        return self.sections[min(max(index, 0), len(self.sections) - 1)]

    def local_parameter(self, T: float) -> tuple[Section, float]:
        """返回 T 所在分段及其段内参数。"""
        T = self._clamp(T)
        section = self.section_at(T)
        return section, section.local_parameter(T, self.path_length)

    def position_at(self, T: float) -> np.ndarray:
        """
        在均匀参数 T 处求位置。

        Args:
            T: 均匀参数，超出 [0, 1] 时截断

        Returns:
            (3,) 位置
        """
        section, t = self.local_parameter(T)
        return section.position(t)

    def tangent_at(self, T: float) -> np.ndarray:
        """
        在均匀参数 T 处求切向量（段内参数导数，未归一化）。

        默认对直线段也使用二次 Bézier 导数公式，结果为 2(1-t)(B-A)，
        在直线段末端趋于零。settings.linear_tangent == "chord" 时直线段返回 B-A。

        Args:
            T: 均匀参数，超出 [0, 1] 时截断

        Returns:
            (3,) 切向量
        """
        section, t = self.local_parameter(T)
        if section.kind is SectionKind.LINEAR and self.settings.linear_tangent == "chord":
            return section.chord
        return section.derivative(t)

    def frame_at(self, T: float) -> Frame:
        """
        在均匀参数 T 处求坐标系: 原点为位置，前向沿切向量。

        切向量退化（如直线段末端）时依次改用:
            1. 所在分段首尾端点连线方向
            2. 最近的非退化前驱分段的末端方向（零长度末段在 T=1 处即属此情形）
            3. 最近的非退化后继分段的起始方向
        全部退化时保持单位朝向。

        Args:
            T: 均匀参数，超出 [0, 1] 时截断

        Returns:
            Frame 对象
        """
        section, t = self.local_parameter(T)
        position = section.position(t)
        direction = self.tangent_at(T)

        if is_degenerate(direction):
            direction = section.end_point - section.start_point
        if is_degenerate(direction):
            logger.debug("Zero-length section at T=%.6g, using neighbouring section direction", T)
            direction = self._neighbour_direction(section)

        return Frame.from_direction(position, direction)

    def _neighbour_direction(self, section: Section) -> np.ndarray:
        index = next(i for i, s in enumerate(self.sections) if s is section)
        for previous in reversed(self.sections[:index]):
            direction = _section_direction(previous, 1.0)
            if not is_degenerate(direction):
                return direction
        for following in self.sections[index + 1 :]:
            direction = _section_direction(following, 0.0)
            if not is_degenerate(direction):
                return direction
        return np.zeros(3)

    def distance_at(self, T: float) -> float:
        """均匀参数 T 对应的行进距离。"""
        return self._clamp(T) * self.path_length

    def position_at_distance(self, distance: float) -> np.ndarray:
        """
        在行进距离 distance 处求位置。

        Args:
            distance: 沿路径的距离，截断到 [0, path_length]

        Returns:
            (3,) 位置
        """
        distance = min(max(float(distance), 0.0), self.path_length)
        return self.position_at(distance / self.path_length)

    def positions_at(self, T_values: np.ndarray) -> np.ndarray:
        """
        批量求位置。

        Args:
            T_values: (K,) 均匀参数数组

        Returns:
            (K, 3) 位置数组
        """
        T_values = np.atleast_1d(np.asarray(T_values, dtype=float))
        return np.array([self.position_at(T) for T in T_values]).reshape(-1, 3)

    def sample_uniform(self, num_points: int) -> tuple[np.ndarray, np.ndarray]:
        """
        沿弧长均匀采样。

        Args:
            num_points: 采样点数

        Returns:
            T_values: (num_points,) 均匀参数
            positions: (num_points, 3) 位置
        """
        T_values = np.linspace(0.0, 1.0, num_points)
        return T_values, self.positions_at(T_values)

    def closest_point(self, position: np.ndarray, max_iterations: int | None = None) -> tuple[Frame, float]:
        """
        寻找路径上距离 position 最近的点。

        采用三分收缩搜索，假定到目标点的距离在 [0, 1] 上单峰；路径回绕靠近自身时
        可能返回局部极小。settings.coarse_samples > 0 时先粗采样括出各候选极小值。

        Args:
            position: (3,) 目标点
            max_iterations: 最大迭代次数，默认 settings.closest_point_iterations

        Returns:
            frame: 最近点处的坐标系
            T: 最近点的均匀参数
        """
        target = np.asarray(position, dtype=float)
        if max_iterations is None:
            max_iterations = self.settings.closest_point_iterations

        def distance_fn(T: float) -> float:
            return float(np.linalg.norm(self.position_at(T) - target))

        if self.settings.coarse_samples:
            T, _ = bracketed_search(
                distance_fn,
                self.settings.coarse_samples,
                max_iterations,
                self.settings.closest_point_precision,
            )
        else:
            T, _ = narrowing_search(distance_fn, max_iterations, self.settings.closest_point_precision)

        return self.frame_at(T), T

    def __len__(self) -> int:
        return len(self.sections)

    def __repr__(self) -> str:
        return (
            f"BezierPath(N={len(self.waypoints)}, sections={len(self.sections)}, "
            f"length={self.path_length:.4f}, curve_size={self.curve_size:g})"
        )


def build_path(waypoints: np.ndarray, curve_size: float, settings: PathSettings | None = None) -> BezierPath:
    """
    由路径点构造 BezierPath。

    Args:
        waypoints: (N, 3) 路径点，N >= 2，相邻点不重合
        curve_size: 拐角圆角距离，非负
        settings: 可调参数

    Returns:
        BezierPath 对象

    Raises:
        InvalidInputError: 输入不满足前置条件
    """
    return BezierPath(waypoints, curve_size, settings)


if __name__ == "__main__":
    from bezier_path.datasets import l_corner_path

    waypoints, curve_size = l_corner_path()

    print("=== 圆角 Bézier 路径测试 ===")
    path = build_path(waypoints, curve_size)
    print(path)

    for section in path.sections:
        print(
            f"  {section.kind.name:9s} length={section.length:.4f} "
            f"t=[{section.t_start:.4f}, {section.t_end:.4f}) acc={section.accumulated_distance:.4f}"
        )

    for T in (0.0, 0.25, 0.5, 0.75, 1.0):
        print(f"T={T:.2f}: position={path.position_at(T)}, tangent={path.tangent_at(T)}")

    frame, T = path.closest_point(np.array([12.0, 1.0, 0.0]))
    print(f"\n最近点: T={T:.6f}, {frame}")
