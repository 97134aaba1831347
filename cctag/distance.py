"""Distances between points, and between points and ellipses."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from cctag.ellipse import Ellipse
from cctag.point import Point2d


def _homogeneous(point) -> np.ndarray:
    if isinstance(point, Point2d):
        return point.as_vector()
    return np.asarray(point, dtype=float).reshape(3)


def distance_points_2d(p1, p2) -> float:
    """Euclidean distance between two points having ``x`` and ``y``."""
    return math.hypot(float(p2.x) - float(p1.x), float(p2.y) - float(p1.y))


def _polar_distance(pts: np.ndarray, q: np.ndarray) -> np.ndarray:
    x, y, w = pts[:, 0], pts[:, 1], pts[:, 2]
    tmp1 = x * q[0, 0] + y * q[0, 1] + w * q[0, 2]
    tmp2 = x * q[0, 1] + y * q[1, 1] + w * q[1, 2]
    denom = tmp1 * tmp1 + tmp2 * tmp2
    dot = (x * x * q[0, 0] + 2 * x * y * q[0, 1] + 2 * x * q[0, 2]
           + y * y * q[1, 1] + 2 * y * q[1, 2] + q[2, 2])
    with np.errstate(divide="ignore", invalid="ignore"):
        return dot * dot / denom


def distance_point_ellipse(point, ellipse: Ellipse) -> float:
    """Point-polar distance between a point and an ellipse's conic.

    ``point`` is a Point2d or a homogeneous 3-vector.
    """
    pts = _homogeneous(point).reshape(1, 3)
    return float(_polar_distance(pts, ellipse.matrix)[0])


def distances_point_ellipse(points: Iterable, ellipse: Ellipse) -> list[float]:
    """Point-polar distances from each point to the ellipse, in order."""
    vectors = [_homogeneous(p) for p in points]
    if not vectors:
        return []
    return [float(d) for d in _polar_distance(np.vstack(vectors), ellipse.matrix)]