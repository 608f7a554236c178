"""
waypoints 模块单元测试
"""

import logging

import numpy as np
import pytest

from bezier_path.core.waypoints import expand_waypoints, validate_waypoints
from bezier_path.exceptions import InvalidInputError


class TestExpandWaypoints:
    """路径点展开测试"""

    def test_l_corner(self):
        """测试 L 形拐角插入入口点和出口点"""
        waypoints = np.array([[0.0, 0.0, 0.0], [10.0, 0.0, 0.0], [10.0, 10.0, 0.0]])
        expanded = expand_waypoints(waypoints, 2.0)
        np.testing.assert_allclose(
            expanded,
            [
                [0.0, 0.0, 0.0],
                [8.0, 0.0, 0.0],
                [10.0, 0.0, 0.0],
                [10.0, 2.0, 0.0],
                [10.0, 10.0, 0.0],
            ],
            atol=1e-12,
        )

    def test_two_waypoints_unchanged(self):
        """测试两点路径不插入圆角点"""
        waypoints = np.array([[0.0, 0.0, 0.0], [5.0, 0.0, 0.0]])
        np.testing.assert_array_equal(expand_waypoints(waypoints, 3.0), waypoints)

    def test_expanded_count(self):
        """测试展开后点数为 3N - 4"""
        waypoints = np.random.default_rng(0).random((7, 3)) * 10
        assert len(expand_waypoints(waypoints, 0.1)) == 3 * 7 - 4

    def test_rounding_points_at_curve_size(self):
        """测试圆角点与原路径点的距离等于 curve_size，且位于相邻边上"""
        waypoints = np.array([[0.0, 0.0, 0.0], [3.0, 4.0, 0.0], [3.0, 4.0, 10.0]])
        expanded = expand_waypoints(waypoints, 1.5)
        entry, corner, exit_ = expanded[1:4]
        np.testing.assert_allclose(corner, waypoints[1])
        assert np.isclose(np.linalg.norm(entry - corner), 1.5)
        assert np.isclose(np.linalg.norm(exit_ - corner), 1.5)
        np.testing.assert_allclose(entry, [3.0 - 0.9, 4.0 - 1.2, 0.0], atol=1e-12)
        np.testing.assert_allclose(exit_, [3.0, 4.0, 1.5], atol=1e-12)

    def test_zero_curve_size(self):
        """测试 curve_size 为 0 时圆角点与原路径点重合"""
        waypoints = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 1.0, 0.0]])
        expanded = expand_waypoints(waypoints, 0.0)
        np.testing.assert_allclose(expanded[1], waypoints[1])
        np.testing.assert_allclose(expanded[3], waypoints[1])


class TestValidateWaypoints:
    """路径点校验测试"""

    def test_returns_float_copy(self):
        """测试返回独立的 float 副本"""
        original = [[0, 0, 0], [1, 2, 3]]
        points = validate_waypoints(original, 1)
        assert points.dtype == np.float64
        original[0][0] = 99
        assert points[0, 0] == 0.0

    @pytest.mark.parametrize(
        "waypoints",
        [
            [[0.0, 0.0, 0.0]],
            [],
            [[0.0, 0.0], [1.0, 1.0]],
            [[0.0, 0.0, 0.0], [1.0, 2.0]],
            [[0.0, 0.0, 0.0], [np.nan, 0.0, 0.0]],
            [[0.0, 0.0, 0.0], [np.inf, 0.0, 0.0]],
            [["a", "b", "c"], [1.0, 2.0, 3.0]],
        ],
    )
    def test_invalid_shapes_and_values(self, waypoints):
        """测试形状错误、点数不足、非有限值"""
        with pytest.raises(InvalidInputError):
            validate_waypoints(waypoints, 1.0)

    def test_duplicate_consecutive_waypoints(self):
        """测试相邻重合点"""
        waypoints = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 0.0, 0.0], [2.0, 0.0, 0.0]]
        with pytest.raises(InvalidInputError, match="coincide"):
            validate_waypoints(waypoints, 0.1)

    def test_non_consecutive_duplicates_allowed(self):
        """测试首尾重合（闭合回路）允许"""
        waypoints = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 1.0, 0.0], [0.0, 0.0, 0.0]]
        assert validate_waypoints(waypoints, 0.1).shape == (4, 3)

    @pytest.mark.parametrize("curve_size", [-1.0, np.nan, np.inf, "big"])
    def test_invalid_curve_size(self, curve_size):
        """测试非法 curve_size"""
        with pytest.raises(InvalidInputError):
            validate_waypoints([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], curve_size)

    def test_invalid_input_is_value_error(self):
        """测试 InvalidInputError 是 ValueError 子类"""
        with pytest.raises(ValueError):
            validate_waypoints([[0.0, 0.0, 0.0]], 1.0)


class TestOverlapWarning:
    """圆角交叠警告测试"""

    def _warnings(self, caplog, waypoints, curve_size):
        with caplog.at_level(logging.WARNING, logger="bezier_path"):
            validate_waypoints(waypoints, curve_size)
        return [r for r in caplog.records if r.levelno == logging.WARNING]

    def test_interior_leg_overlap_warns(self, caplog):
        """测试中间边短于 2 * curve_size 时警告"""
        waypoints = [[0.0, 0.0, 0.0], [5.0, 0.0, 0.0], [5.0, 2.0, 0.0], [10.0, 2.0, 0.0]]
        records = self._warnings(caplog, waypoints, 1.5)
        assert len(records) == 1
        assert "overlap" in records[0].getMessage()
        assert "[1]" in records[0].getMessage()

    def test_end_leg_shorter_than_curve_size_warns(self, caplog):
        """测试首边短于 curve_size 时警告"""
        waypoints = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 5.0, 0.0]]
        records = self._warnings(caplog, waypoints, 1.5)
        assert len(records) == 1
        assert "[0]" in records[0].getMessage()

    def test_end_legs_within_curve_size_silent(self, caplog):
        """测试首尾边仅需容纳一个圆角点，不足 2 * curve_size 也不警告"""
        waypoints = [[0.0, 0.0, 0.0], [3.0, 0.0, 0.0], [3.0, 10.0, 0.0]]
        assert self._warnings(caplog, waypoints, 2.0) == []

    def test_end_leg_equal_to_curve_size_silent(self, caplog):
        """测试首尾边恰等于 curve_size 时不警告"""
        waypoints = [[0.0, 0.0, 0.0], [2.0, 0.0, 0.0], [2.0, 2.0, 0.0]]
        assert self._warnings(caplog, waypoints, 2.0) == []

    def test_two_waypoints_never_warn(self, caplog):
        """测试两点路径没有拐角，不警告"""
        assert self._warnings(caplog, [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], 5.0) == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
