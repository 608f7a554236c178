"""
datasets - 示例路径点数据

包含:
- samples: 直线、L 形拐角、方形回环、螺旋线等示例路径点
"""

from .samples import helix_path, l_corner_path, square_loop_path, straight_path

__all__ = [
    "straight_path",
    "l_corner_path",
    "square_loop_path",
    "helix_path",
]
