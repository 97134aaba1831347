import numpy as np
import pytest

from cctag.point import DirectedPoint2d, Point2d


def test_as_vector_has_unit_weight():
    p = Point2d(3.5, -2.0)
    assert np.allclose(p.as_vector(), [3.5, -2.0, 1.0])


def test_from_homogeneous_normalizes():
    p = Point2d.from_homogeneous([4.0, -6.0, 2.0])
    assert p.x == pytest.approx(2.0)
    assert p.y == pytest.approx(-3.0)
    assert p.w == 1.0


def test_round_trip_through_vector():
    p = Point2d(7.25, 0.5)
    assert Point2d.from_homogeneous(p.as_vector()) == p


def test_scaled_homogeneous_vector_gives_same_point():
    p = Point2d(1.5, -4.0)
    assert Point2d.from_homogeneous(p.as_vector() * 3.0) == p


def test_point_at_infinity_raises():
    with pytest.raises(ValueError):
        Point2d.from_homogeneous([1.0, 2.0, 0.0])


def test_directed_point_gradient():
    p = DirectedPoint2d(10.0, 20.0, 0.25, -0.75)
    assert np.allclose(p.gradient, [0.25, -0.75])
    assert np.allclose(p.as_vector(), [10.0, 20.0, 1.0])


def test_directed_point_default_gradient_is_zero():
    p = DirectedPoint2d(1.0, 2.0)
    assert np.array_equal(p.gradient, np.zeros(2))


def test_directed_point_from_homogeneous():
    p = DirectedPoint2d.from_homogeneous([2.0, 4.0, 2.0])
    assert isinstance(p, DirectedPoint2d)
    assert (p.x, p.y) == (1.0, 2.0)
    assert np.array_equal(p.gradient, np.zeros(2))