"""
utils - 工具函数模块

包含:
- geometry: 几何计算工具
- integrals: 弦长求和弧长估计
- logging_config: 日志配置
"""

from .geometry import normalize, distance, polyline_length
from .integrals import chord_length, chord_length_table
from .logging_config import get_logger, reset_logging, setup_logging

__all__ = [
    "normalize",
    "distance",
    "polyline_length",
    "chord_length",
    "chord_length_table",
    "get_logger",
    "setup_logging",
    "reset_logging",
]
