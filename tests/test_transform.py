import math

import numpy as np
import pytest

from cctag.ellipse import Ellipse
from cctag.point import Point2d
from cctag.transform import projective_transform


def _ellipse():
    return Ellipse(Point2d(16.0, -4.0), 5.0, 3.0, 0.4)


def test_identity_keeps_conic():
    ellipse = _ellipse()
    before = ellipse.matrix
    projective_transform(np.eye(3), ellipse)
    assert np.allclose(ellipse.matrix, before)


def test_matches_ellipse_transform():
    ellipse = _ellipse()
    tr = np.array([[1.0, 0.2, 3.0], [-0.1, 0.9, -2.0], [0.0, 0.0, 1.0]])
    expected = ellipse.transform(tr)
    projective_transform(tr, ellipse)
    assert np.allclose(ellipse.matrix, expected.matrix)
    assert ellipse.a == pytest.approx(expected.a)
    assert ellipse.b == pytest.approx(expected.b)


def test_translation_moves_center():
    ellipse = _ellipse()
    tx, ty = 7.0, -11.0
    center = ellipse.center
    tr = np.array([[1.0, 0.0, -tx], [0.0, 1.0, -ty], [0.0, 0.0, 1.0]])
    projective_transform(tr, ellipse)
    assert ellipse.center.x == pytest.approx(center.x + tx)
    assert ellipse.center.y == pytest.approx(center.y + ty)


def test_transformed_points_lie_on_new_conic():
    ellipse = _ellipse()
    tr = np.array([[0.8, -0.3, 2.0], [0.4, 1.1, 5.0], [0.0, 0.0, 1.0]])
    inv = np.linalg.inv(tr)
    t = np.arange(8) * math.pi / 4
    x, y = 5.0 * np.cos(t), 3.0 * np.sin(t)
    c, s = math.cos(0.4), math.sin(0.4)
    original = np.vstack([x * c - y * s + 16.0, x * s + y * c - 4.0, np.ones(8)])
    projective_transform(tr, ellipse)
    m = np.asarray(ellipse.matrix, dtype=float)
    q = inv @ original
    residuals = np.einsum("ij,ik,kj->j", q, m, q)
    assert residuals.shape == (8,)
    assert np.max(np.abs(residuals)) < 1e-6


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        projective_transform(np.eye(2), _ellipse())