"""
utils 模块单元测试
"""

import numpy as np
import pytest

from bezier_path.utils.geometry import (
    distance,
    is_degenerate,
    normalize,
    polyline_length,
)
from bezier_path.utils.integrals import (
    chord_length,
    chord_length_table,
)


def quarter_circle(t):
    # 四分之一单位圆: x = cos(πt/2), y = sin(πt/2)
    return np.column_stack([np.cos(np.pi * t / 2), np.sin(np.pi * t / 2)])


class TestGeometry:
    """几何工具函数测试"""

    def test_normalize_single_vector(self):
        """测试单向量归一化"""
        v = np.array([3.0, 4.0, 0.0])
        result = normalize(v)
        assert np.isclose(np.linalg.norm(result), 1.0)
        np.testing.assert_allclose(result, [0.6, 0.8, 0.0])

    def test_normalize_batch(self):
        """测试批量向量归一化"""
        vectors = np.array([[3.0, 4.0, 0.0], [0.0, 0.0, 5.0]])
        result = normalize(vectors)
        norms = np.linalg.norm(result, axis=1)
        np.testing.assert_allclose(norms, [1.0, 1.0])

    def test_normalize_zero_vector_is_finite(self):
        """测试零向量归一化不产生 NaN"""
        result = normalize(np.zeros(3))
        assert np.all(np.isfinite(result))

    def test_is_degenerate(self):
        """测试退化向量判定"""
        assert is_degenerate(np.zeros(3))
        assert is_degenerate(np.array([1e-14, 0.0, 0.0]))
        assert not is_degenerate(np.array([1e-6, 0.0, 0.0]))

    def test_distance(self):
        """测试两点距离"""
        assert np.isclose(distance([0, 0, 0], [1, 2, 2]), 3.0)

    def test_polyline_length(self):
        """测试折线长度"""
        pts = np.array([[0.0, 0.0, 0.0], [3.0, 4.0, 0.0], [3.0, 4.0, 12.0]])
        assert np.isclose(polyline_length(pts), 17.0)

    def test_polyline_length_single_point(self):
        """测试单点折线长度为 0"""
        assert polyline_length(np.array([[1.0, 2.0, 3.0]])) == 0.0


class TestIntegrals:
    """弦长估计测试"""

    def test_chord_length_line(self):
        """测试直线长度精确"""

        def line(t):
            # 从 (0,0,0) 到 (1,1,1) 的直线
            return np.outer(t, [1.0, 1.0, 1.0])

        assert np.isclose(chord_length(line), np.sqrt(3))

    def test_chord_length_circle(self):
        """测试圆弧长度"""
        approx = chord_length(quarter_circle, 1000)
        assert np.isclose(approx, np.pi / 2, rtol=1e-5)

    def test_chord_length_converges_from_below(self):
        """测试弦长随分辨率提高单调逼近真实弧长"""
        coarse = chord_length(quarter_circle, 10)
        medium = chord_length(quarter_circle, 100)
        fine = chord_length(quarter_circle, 1000)
        assert coarse <= medium <= fine <= np.pi / 2

    def test_chord_length_table(self):
        """测试累积弦长表"""
        t_samples, l_samples = chord_length_table(quarter_circle, 50)
        assert len(t_samples) == 51
        assert len(l_samples) == 51
        assert t_samples[0] == 0.0 and t_samples[-1] == 1.0
        assert l_samples[0] == 0.0
        assert np.all(np.diff(l_samples) > 0)

    def test_invalid_resolution(self):
        """测试非法分辨率"""
        with pytest.raises(ValueError):
            chord_length(quarter_circle, 0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
