"""
integrals - 弧长数值估计

用固定分辨率的弦长求和近似参数曲线在 [0, 1] 上的弧长。
该方法不是精确弧长，误差随采样数增加而减小，并受曲线局部曲率影响。
"""

from typing import Callable

import numpy as np

# 默认采样分辨率（区间 [0, 1] 等分数）
DEFAULT_RESOLUTION = 100


def chord_length_table(
    curve: Callable[[np.ndarray], np.ndarray],
    resolution: int = DEFAULT_RESOLUTION,
) -> tuple[np.ndarray, np.ndarray]:
    """
    计算参数-累积弦长对应表。

    将参数区间 [0, 1] 均匀分成 resolution 段，对相邻采样点之间的弦长累加。

    Args:
        curve: 曲线函数，接受 (K,) 参数数组，返回 (K, n) 点数组
        resolution: 等分段数

    Returns:
        t_samples: (resolution + 1,) 参数值
        l_samples: (resolution + 1,) 对应的累积弦长
    """
    if resolution < 1:
        raise ValueError(f"resolution must be >= 1, got {resolution}")

    t_samples = np.linspace(0.0, 1.0, resolution + 1)
    points = curve(t_samples)
    chords = np.linalg.norm(np.diff(points, axis=0), axis=1)

    l_samples = np.zeros(resolution + 1)
    l_samples[1:] = np.cumsum(chords)

    return t_samples, l_samples


def chord_length(
    curve: Callable[[np.ndarray], np.ndarray],
    resolution: int = DEFAULT_RESOLUTION,
) -> float:
    """
    计算参数曲线在 [0, 1] 上的近似弧长。

    Args:
        curve: 曲线函数，接受 (K,) 参数数组，返回 (K, n) 点数组
        resolution: 等分段数

    Returns:
        近似弧长
    """
    _, l_samples = chord_length_table(curve, resolution)
    return float(l_samples[-1])


if __name__ == "__main__":
    print("=== 弦长估计测试 ===")

    def quarter_circle(t):
        # 参数化: x = cos(πt/2), y = sin(πt/2)
        return np.column_stack([np.cos(np.pi * t / 2), np.sin(np.pi * t / 2)])

    exact = np.pi / 2
    for n in (10, 100, 1000):
        approx = chord_length(quarter_circle, n)
        print(f"resolution={n:5d}: {approx:.10f}  误差: {abs(approx - exact):.2e}")
