import math

import numpy as np
import pytest

from cctag.distance import (
    distance_point_ellipse,
    distance_points_2d,
    distances_point_ellipse,
)
from cctag.ellipse import Ellipse
from cctag.point import Point2d


def _ellipse():
    return Ellipse(Point2d(16.0, -4.0), 5.0, 3.0, 0.7)


def _on_ellipse(theta):
    x, y = 5.0 * math.cos(theta), 3.0 * math.sin(theta)
    c, s = math.cos(0.7), math.sin(0.7)
    return Point2d(x * c - y * s + 16.0, x * s + y * c - 4.0)


def test_distance_between_points():
    assert distance_points_2d(Point2d(0.0, 0.0), Point2d(3.0, 4.0)) == pytest.approx(5.0)


def test_distance_between_points_symmetric_and_zero():
    a = Point2d(1.5, -2.0)
    b = Point2d(-7.0, 9.25)
    assert distance_points_2d(a, b) == distance_points_2d(b, a)
    assert distance_points_2d(a, a) == 0.0


def test_point_on_ellipse_has_zero_distance():
    ellipse = _ellipse()
    for k in range(10):
        assert distance_point_ellipse(_on_ellipse(k * 0.6), ellipse) < 1e-12


def test_point_off_ellipse_has_positive_distance():
    ellipse = _ellipse()
    assert distance_point_ellipse(Point2d(30.0, 10.0), ellipse) > 0.0


def test_distance_grows_away_from_ellipse():
    ellipse = Ellipse(Point2d(0.0, 0.0), 5.0, 5.0, 0.0)
    near = distance_point_ellipse(Point2d(5.5, 0.0), ellipse)
    far = distance_point_ellipse(Point2d(8.0, 0.0), ellipse)
    assert 0.0 < near < far


def test_homogeneous_vector_accepted():
    ellipse = _ellipse()
    p = Point2d(20.0, 1.0)
    assert distance_point_ellipse(np.array([20.0, 1.0, 1.0]), ellipse) == pytest.approx(
        distance_point_ellipse(p, ellipse))


def test_batch_matches_single():
    ellipse = _ellipse()
    pts = [Point2d(float(i), float(-i) / 2) for i in range(11)] + [_on_ellipse(1.0)]
    batch = distances_point_ellipse(pts, ellipse)
    assert len(batch) == len(pts)
    for p, d in zip(pts, batch):
        assert d == pytest.approx(distance_point_ellipse(p, ellipse))


def test_batch_of_nothing_is_empty():
    assert distances_point_ellipse([], _ellipse()) == []