"""
config - 路径构造与查询参数
"""

from dataclasses import dataclass

LINEAR_TANGENT_MODES = ("bezier", "chord")


@dataclass(frozen=True)
class PathSettings:
    """路径构造与查询的可调参数"""

    sample_resolution: int = 100  # 每段弧长估计的等分数
    closest_point_iterations: int = 20  # 最近点搜索的默认最大迭代次数
    closest_point_precision: float = 1e-6  # 搜索区间宽度低于此值时提前终止
    # 直线段切向量: "bezier" 沿用二次 Bézier 导数公式 2(1-t)(B-A)，"chord" 返回 B-A
    linear_tangent: str = "bezier"
    coarse_samples: int = 0  # >0 时最近点搜索先粗采样再分别细化各局部极小

    def __post_init__(self):
        if self.sample_resolution < 1:
            raise ValueError(f"sample_resolution must be >= 1, got {self.sample_resolution}")
        if self.closest_point_iterations < 1:
            raise ValueError(
                f"closest_point_iterations must be >= 1, got {self.closest_point_iterations}"
            )
        if not self.closest_point_precision > 0:
            raise ValueError(
                f"closest_point_precision must be positive, got {self.closest_point_precision}"
            )
        if self.linear_tangent not in LINEAR_TANGENT_MODES:
            raise ValueError(
                f"linear_tangent must be one of {LINEAR_TANGENT_MODES}, got {self.linear_tangent!r}"
            )
        if self.coarse_samples < 0 or self.coarse_samples == 1:
            raise ValueError(f"coarse_samples must be 0 or >= 2, got {self.coarse_samples}")


DEFAULT_SETTINGS = PathSettings()
