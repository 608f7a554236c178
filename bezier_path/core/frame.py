"""
frame - 刚体坐标系

由原点和前向（观察）方向构造的刚体坐标系。旋转矩阵的三列依次为
右向量、上向量和后向量（前向量取负），即前向为局部 -Z 轴，世界 +Y 为默认上方向。
"""

from dataclasses import dataclass

import numpy as np
from scipy.spatial.transform import Rotation

from ..utils.geometry import DEGENERATE_TOLERANCE, is_degenerate, normalize

WORLD_UP = np.array([0.0, 1.0, 0.0])
# 前向与 WORLD_UP 平行时改用的上方向
SECONDARY_UP = np.array([0.0, 0.0, 1.0])


def look_rotation(forward: np.ndarray, up: np.ndarray = WORLD_UP) -> Rotation:
    """
    构造使局部 -Z 轴指向 forward 的旋转。

    Args:
        forward: (3,) 前向方向，非零
        up: (3,) 参考上方向

    Returns:
        scipy Rotation 对象
    """
    forward = normalize(forward)
    right = np.cross(forward, up)
    if np.linalg.norm(right) <= DEGENERATE_TOLERANCE:
        right = np.cross(forward, SECONDARY_UP)
    right = normalize(right)
    true_up = np.cross(right, forward)

    matrix = np.column_stack([right, true_up, -forward])
    return Rotation.from_matrix(matrix)


@dataclass(frozen=True, eq=False)
class Frame:
    """
    位置 + 朝向。

    Attributes:
        position: (3,) 原点
        rotation: 局部到世界的旋转
    """

    position: np.ndarray
    rotation: Rotation

    @classmethod
    def identity(cls, position: np.ndarray) -> "Frame":
        return cls(np.asarray(position, dtype=float), Rotation.identity())

    @classmethod
    def look_at(cls, position: np.ndarray, target: np.ndarray, up: np.ndarray = WORLD_UP) -> "Frame":
        """构造位于 position、前向指向 target 的坐标系。"""
        position = np.asarray(position, dtype=float)
        return cls.from_direction(position, np.asarray(target, dtype=float) - position, up)

    @classmethod
    def from_direction(cls, position: np.ndarray, direction: np.ndarray, up: np.ndarray = WORLD_UP) -> "Frame":
        """
        构造位于 position、前向沿 direction 的坐标系。

        direction 为零向量时方向无定义，返回单位朝向。
        """
        position = np.asarray(position, dtype=float)
        direction = np.asarray(direction, dtype=float)
        if is_degenerate(direction):
            return cls.identity(position)
        return cls(position, look_rotation(direction, up))

    @property
    def look_vector(self) -> np.ndarray:
        return -self.rotation.as_matrix()[:, 2]

    @property
    def right_vector(self) -> np.ndarray:
        return self.rotation.as_matrix()[:, 0]

    @property
    def up_vector(self) -> np.ndarray:
        return self.rotation.as_matrix()[:, 1]

    def as_matrix(self) -> np.ndarray:
        """(4, 4) 齐次变换矩阵。"""
        matrix = np.eye(4)
        matrix[:3, :3] = self.rotation.as_matrix()
        matrix[:3, 3] = self.position
        return matrix

    def to_world(self, local_points: np.ndarray) -> np.ndarray:
        """将局部坐标点变换到世界坐标。支持 (3,) 与 (K, 3) 输入。"""
        return self.rotation.apply(local_points) + self.position

    def to_local(self, world_points: np.ndarray) -> np.ndarray:
        """将世界坐标点变换到局部坐标。支持 (3,) 与 (K, 3) 输入。"""
        return self.rotation.inv().apply(np.asarray(world_points, dtype=float) - self.position)

    def __repr__(self) -> str:
        p = np.round(self.position, 6).tolist()
        look = np.round(self.look_vector, 6).tolist()
        return f"Frame(position={p}, look={look})"
