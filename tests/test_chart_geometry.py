import math

import pytest

from kakeibo.charts.geometry import normalize_range, polar_to_cartesian, scale_to_axis


def test_polar_minus_90_points_straight_up():
    x, y = polar_to_cartesian((100, 100), 50, -90)
    assert x == pytest.approx(100)
    assert y == pytest.approx(50)


def test_polar_runs_clockwise_in_screen_coordinates():
    # 0 degrees is 3 o'clock, 90 degrees is 6 o'clock (y grows downwards)
    assert polar_to_cartesian((0, 0), 10, 0) == pytest.approx((10, 0))
    assert polar_to_cartesian((0, 0), 10, 90) == pytest.approx((0, 10))
    assert polar_to_cartesian((0, 0), 10, 180) == pytest.approx((-10, 0))


def test_polar_zero_radius_is_center():
    assert polar_to_cartesian((3, 4), 0, 123) == pytest.approx((3, 4))


def test_normalize_range_regular_series():
    assert normalize_range([100, 200, 150, 400, 50, 300]) == (50, 400, 350)


def test_normalize_range_flat_series_forces_range_one():
    lo, hi, span = normalize_range([10, 10, 10, 10])
    assert (lo, hi) == (10, 10)
    assert span == 1


def test_normalize_range_accepts_generators():
    assert normalize_range(v for v in (3.0, 1.0)) == (1.0, 3.0, 2.0)


def test_scale_to_axis_is_linear():
    assert scale_to_axis(50, 0, 100, 220) == pytest.approx(110)
    assert scale_to_axis(0, 0, 100, 220) == 0
    assert scale_to_axis(100, 0, 100, 220) == pytest.approx(220)


def test_scale_to_axis_with_forced_range():
    assert scale_to_axis(10, 10, 1, 220) == 0
    assert not math.isnan(scale_to_axis(10, 10, 1, 220))
