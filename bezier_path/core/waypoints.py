"""
waypoints - 路径点校验与展开

在每个内部路径点前后各插入一个距离为 curve_size 的圆角点，
供 sections 模块构造直线段与二次 Bézier 拐角段。
"""

import numpy as np

from ..exceptions import InvalidInputError
from ..utils.geometry import DEGENERATE_TOLERANCE, normalize
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


def validate_waypoints(waypoints, curve_size: float) -> np.ndarray:
    """
    校验路径点并返回其 float 副本。

    Args:
        waypoints: (N, 3) 路径点，N >= 2
        curve_size: 拐角圆角距离，非负

    Returns:
        (N, 3) 路径点副本

    Raises:
        InvalidInputError: 输入不满足前置条件
    """
    try:
        points = np.array(waypoints, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"waypoints must be a sequence of 3D points: {exc}") from exc

    if points.ndim != 2 or points.shape[1] != 3:
        raise InvalidInputError(f"waypoints must have shape (N, 3), got {points.shape}")
    if len(points) < 2:
        raise InvalidInputError(f"at least 2 waypoints are required, got {len(points)}")
    if not np.all(np.isfinite(points)):
        raise InvalidInputError("waypoints contain non-finite values")

    try:
        curve_size = float(curve_size)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"curve_size must be a number: {exc}") from exc
    if not np.isfinite(curve_size) or curve_size < 0:
        raise InvalidInputError(f"curve_size must be a non-negative finite number, got {curve_size}")

    legs = np.linalg.norm(np.diff(points, axis=0), axis=1)
    duplicates = np.flatnonzero(legs <= DEGENERATE_TOLERANCE)
    if duplicates.size:
        i = int(duplicates[0])
        raise InvalidInputError(f"waypoints {i} and {i + 1} coincide at {points[i].tolist()}")

    # 内部边两端各有一个圆角点，边长小于 2 * curve_size 时交叠；
    # 首尾边只有一个圆角点，边长小于 curve_size 时越过端点
    if len(points) > 2:
        limits = np.full(len(legs), 2 * curve_size)
        limits[0] = limits[-1] = curve_size
        overlapping = np.flatnonzero(limits > legs)
        if overlapping.size:
            logger.warning(
                "curve_size %.6g too large for leg(s) %s; rounding points overlap",
                curve_size,
                overlapping.tolist(),
            )

    return points


def expand_waypoints(waypoints: np.ndarray, curve_size: float) -> np.ndarray:
    """
    展开路径点。

    首尾点原样保留；每个内部点 W_i 替换为三个点:
        入口点 W_i - unit(W_i - W_{i-1}) * curve_size
        W_i 本身
        出口点 W_i - unit(W_i - W_{i+1}) * curve_size

    前置条件: 相邻路径点不重合（由 validate_waypoints 保证）。

    Args:
        waypoints: (N, 3) 路径点，N >= 2
        curve_size: 圆角距离

    Returns:
        (3N - 4, 3) 展开后的点序列
    """
    waypoints = np.asarray(waypoints, dtype=float)
    interior = waypoints[1:-1]

    entry = interior - normalize(interior - waypoints[:-2]) * curve_size
    exit_ = interior - normalize(interior - waypoints[2:]) * curve_size

    # 每个内部点按 (入口, 原点, 出口) 顺序交错排列
    corners = np.stack([entry, interior, exit_], axis=1).reshape(-1, 3)

    return np.vstack([waypoints[:1], corners, waypoints[-1:]])
