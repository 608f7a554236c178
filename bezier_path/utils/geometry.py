"""
geometry - 几何计算工具函数

提供向量归一化、点间距离、折线长度等基础几何操作。
"""

import numpy as np

EPSILON = 1e-16

# 判定向量退化（零长度）的阈值
DEGENERATE_TOLERANCE = 1e-12


def normalize(vectors: np.ndarray) -> np.ndarray:
    """
    将向量归一化为单位向量。

    Args:
        vectors: 单个向量 (n,) 或向量数组 (m, n)

    Returns:
        归一化后的单位向量，与输入形状相同
    """
    vectors = np.asarray(vectors, dtype=float)
    if vectors.ndim == 1:
        norm = np.linalg.norm(vectors)
        return vectors / (norm + EPSILON)
    norm = np.linalg.norm(vectors, axis=-1, keepdims=True)
    return vectors / (norm + EPSILON)


def is_degenerate(vector: np.ndarray, tol: float = DEGENERATE_TOLERANCE) -> bool:
    """判断向量长度是否可视为零。"""
    return bool(np.linalg.norm(vector) <= tol)


def distance(p: np.ndarray, q: np.ndarray) -> float:
    """两点间的欧氏距离。"""
    return float(np.linalg.norm(np.asarray(p, dtype=float) - np.asarray(q, dtype=float)))


def polyline_length(points: np.ndarray) -> float:
    """
    计算折线总长度（相邻点弦长之和）。

    Args:
        points: (M, n) 按顺序排列的点

    Returns:
        折线长度，少于两个点时为 0
    """
    points = np.asarray(points, dtype=float)
    if len(points) < 2:
        return 0.0
    return float(np.sum(np.linalg.norm(np.diff(points, axis=0), axis=1)))


if __name__ == "__main__":
    print("=== 几何工具测试 ===")

    v = np.array([3.0, 4.0, 0.0])
    print(f"normalize({v}) = {normalize(v)}")

    pts = np.array([[0.0, 0.0, 0.0], [3.0, 4.0, 0.0], [3.0, 4.0, 12.0]])
    print(f"折线长度: {polyline_length(pts):.4f}")
