"""
bezier - 插值基础函数

线性插值、二次 Bézier 曲线求值及其导数。参数 t 可以是标量或 (K,) 数组，
数组输入时返回 (K, 3)。
"""

import numpy as np


def _as_param(t: float | np.ndarray) -> np.ndarray:
    # 末尾加一维以便与 (3,) 控制点广播
    return np.asarray(t, dtype=float)[..., np.newaxis]


def lerp(p0: np.ndarray, p1: np.ndarray, t: float | np.ndarray) -> np.ndarray:
    """
    线性插值 p0 + t (p1 - p0)。

    Args:
        p0: (3,) 起点
        p1: (3,) 终点
        t: 插值参数

    Returns:
        (3,) 或 (K, 3) 插值点
    """
    t = _as_param(t)
    return p0 + t * (p1 - p0)


def quadratic_bezier(p0: np.ndarray, p1: np.ndarray, p2: np.ndarray, t: float | np.ndarray) -> np.ndarray:
    """
    二次 Bézier 曲线求值。

    以中间控制点 p1 为基准的等价形式:
        B(t) = p1 + (1-t)^2 (p0 - p1) + t^2 (p2 - p1)

    Args:
        p0: (3,) 起点
        p1: (3,) 控制点
        p2: (3,) 终点
        t: 曲线参数 [0, 1]

    Returns:
        (3,) 或 (K, 3) 曲线上的点
    """
    t = _as_param(t)
    return p1 + (1 - t) ** 2 * (p0 - p1) + t**2 * (p2 - p1)


def quadratic_bezier_derivative(
    p0: np.ndarray, p1: np.ndarray, p2: np.ndarray, t: float | np.ndarray
) -> np.ndarray:
    """
    二次 Bézier 曲线对参数 t 的一阶导数。

        B'(t) = 2(1-t)(p1 - p0) + 2t(p2 - p1)

    Args:
        p0: (3,) 起点
        p1: (3,) 控制点
        p2: (3,) 终点
        t: 曲线参数 [0, 1]

    Returns:
        (3,) 或 (K, 3) 导数向量
    """
    t = _as_param(t)
    return 2 * (1 - t) * (p1 - p0) + 2 * t * (p2 - p1)


if __name__ == "__main__":
    p0 = np.array([8.0, 0.0, 0.0])
    p1 = np.array([10.0, 0.0, 0.0])
    p2 = np.array([10.0, 2.0, 0.0])

    print("=== 二次 Bézier 测试 ===")
    for t in (0.0, 0.25, 0.5, 0.75, 1.0):
        print(f"t={t:.2f}: B={quadratic_bezier(p0, p1, p2, t)}, B'={quadratic_bezier_derivative(p0, p1, p2, t)}")
