"""
samples - 示例路径点

每个函数返回 (waypoints, curve_size):
- waypoints: (N, 3) 路径点数组
- curve_size: 推荐的拐角圆角距离
"""

import numpy as np


def straight_path() -> tuple[np.ndarray, float]:
    """两点直线路径，长度 5。"""
    waypoints = np.array([[0.0, 0.0, 0.0], [5.0, 0.0, 0.0]])
    return waypoints, 1.0


def l_corner_path() -> tuple[np.ndarray, float]:
    """在 (10, 0, 0) 处左转 90° 的 L 形路径。"""
    waypoints = np.array(
        [
            [0.0, 0.0, 0.0],
            [10.0, 0.0, 0.0],
            [10.0, 10.0, 0.0],
        ]
    )
    return waypoints, 2.0


def square_loop_path(size: float = 10.0, curve_size: float = 2.0) -> tuple[np.ndarray, float]:
    """
    在 xz 平面上逆时针绕行的方形回环，首尾点重合。

    Args:
        size: 边长
        curve_size: 拐角圆角距离

    Returns:
        waypoints: (5, 3) 路径点
        curve_size: 拐角圆角距离
    """
    waypoints = np.array(
        [
            [0.0, 0.0, 0.0],
            [size, 0.0, 0.0],
            [size, 0.0, size],
            [0.0, 0.0, size],
            [0.0, 0.0, 0.0],
        ]
    )
    return waypoints, curve_size


def helix_path(
    turns: float = 2.0,
    points_per_turn: int = 8,
    radius: float = 10.0,
    pitch: float = 5.0,
) -> tuple[np.ndarray, float]:
    """
    绕 y 轴上升的螺旋线采样点。

    圆角距离取相邻采样点间距的 1/4，保证相邻拐角不交叠。

    Args:
        turns: 圈数
        points_per_turn: 每圈采样点数
        radius: 半径
        pitch: 每圈上升高度

    Returns:
        waypoints: (N, 3) 路径点
        curve_size: 拐角圆角距离
    """
    n = int(round(turns * points_per_turn)) + 1
    angles = np.linspace(0.0, 2 * np.pi * turns, n)
    waypoints = np.column_stack(
        [
            radius * np.cos(angles),
            pitch * angles / (2 * np.pi),
            radius * np.sin(angles),
        ]
    )
    spacing = np.min(np.linalg.norm(np.diff(waypoints, axis=0), axis=1))
    return waypoints, spacing / 4
