"""
search - 路径参数最近点搜索

在参数区间上寻找使距离函数最小的 T。narrowing_search 每次迭代采样区间端点
与两个三等分点，并向最小值所在的一侧收缩区间。该方法假定距离函数在区间内单峰；
路径自身回绕时可能收敛到局部极小，bracketed_search 先粗采样括出所有候选
极小值再分别细化，以降低这种风险。
"""

from typing import Callable

import numpy as np

from ..utils.logging_config import get_logger

logger = get_logger(__name__)


def narrowing_search(
    distance_fn: Callable[[float], float],
    max_iterations: int = 20,
    precision: float = 1e-6,
    start: float = 0.0,
    end: float = 1.0,
) -> tuple[float, float]:
    """
    三分收缩搜索。

    每次迭代比较 start、m1 = start + w/3、m2 = end - w/3、end 四个采样点的距离:
        1. start 不大于其余三点: 取 start，end ← m2
        2. end 不大于两个内点且严格小于 start: 取 end，start ← m1
        3. m1 不大于 m2: 取 m1，end ← m2
        4. 否则取 m2，start ← m1
    区间宽度小于 precision 或达到 max_iterations 时终止。

    Args:
        distance_fn: 参数 -> 距离
        max_iterations: 最大迭代次数
        precision: 区间宽度终止阈值
        start: 搜索区间起点
        end: 搜索区间终点

    Returns:
        best_t: 整个搜索过程中距离最小的采样参数
        best_distance: 对应距离
    """
    best_t = start
    best_distance = np.inf

    for iteration in range(max_iterations):
        width = end - start
        m1 = start + width / 3
        m2 = end - width / 3

        d_start = distance_fn(start)
        d_m1 = distance_fn(m1)
        d_m2 = distance_fn(m2)
        d_end = distance_fn(end)

        if d_start <= d_m1 and d_start <= d_m2 and d_start <= d_end:
            chosen, chosen_distance = start, d_start
            end = m2
        elif d_end <= d_m1 and d_end <= d_m2 and d_end < d_start:
            chosen, chosen_distance = end, d_end
            start = m1
        elif d_m1 <= d_m2:
            chosen, chosen_distance = m1, d_m1
            end = m2
        else:
            chosen, chosen_distance = m2, d_m2
            start = m1

        if chosen_distance < best_distance:
            best_t, best_distance = chosen, chosen_distance

        if end - start < precision:
            logger.debug("narrowing search converged after %d iterations", iteration + 1)
            break

    return best_t, best_distance


def bracketed_search(
    distance_fn: Callable[[float], float],
    coarse_samples: int,
    max_iterations: int = 20,
    precision: float = 1e-6,
) -> tuple[float, float]:
    """
    粗采样括区间后逐一细化的最近点搜索。

    在 [0, 1] 上均匀采样 coarse_samples 个点，对每个离散局部极小值
    取其相邻采样点构成的区间调用 narrowing_search，返回全局最优结果。

    Args:
        distance_fn: 参数 -> 距离
        coarse_samples: 粗采样点数，>= 2
        max_iterations: 每个区间的最大迭代次数
        precision: 区间宽度终止阈值

    Returns:
        best_t: 距离最小的参数
        best_distance: 对应距离
    """
    if coarse_samples < 2:
        raise ValueError(f"coarse_samples must be >= 2, got {coarse_samples}")

    grid = np.linspace(0.0, 1.0, coarse_samples)
    distances = np.array([distance_fn(t) for t in grid])

    # 离散局部极小: 不大于左右相邻采样
    padded = np.concatenate([[np.inf], distances, [np.inf]])
    minima = np.flatnonzero((distances <= padded[:-2]) & (distances <= padded[2:]))
    logger.debug("bracketed search refining %d candidate minima", len(minima))

    best_index = int(np.argmin(distances))
    best_t, best_distance = float(grid[best_index]), float(distances[best_index])

    for i in minima:
        lo = grid[max(i - 1, 0)]
        hi = grid[min(i + 1, coarse_samples - 1)]
        t, d = narrowing_search(distance_fn, max_iterations, precision, lo, hi)
        if d < best_distance:
            best_t, best_distance = t, d

    return best_t, best_distance
