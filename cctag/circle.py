"""Circles as a special case of ellipses."""

from __future__ import annotations

import math

import numpy as np

from cctag.ellipse import Ellipse
from cctag.point import Point2d


class Circle(Ellipse):
    """A circle of the given radius, centred at ``center`` (the origin by default)."""

    def __init__(self, radius: float, center: Point2d | None = None):
        if center is None:
            center = Point2d(0.0, 0.0)
        super().__init__(center, radius, radius, 0.0)

    @classmethod
    def through_points(cls, p1: Point2d, p2: Point2d, p3: Point2d) -> "Circle":
        """Return the circle passing through three points.

        Raises ValueError when the points are collinear.
        """
        x1, y1 = float(p1.x), float(p1.y)
        x2, y2 = float(p2.x), float(p2.y)
        x3, y3 = float(p3.x), float(p3.y)

        det = (x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)
        if det == 0:
            raise ValueError("Cannot fit a circle through collinear points")

        system = np.array([[x2 - x1, y2 - y1],
                           [x3 - x1, y3 - y1]])
        rhs = np.array([
            (x1 + x2) / 2 * (x2 - x1) + (y1 + y2) / 2 * (y2 - y1),
            (x1 + x3) / 2 * (x3 - x1) + (y1 + y3) / 2 * (y3 - y1),
        ])
        xc, yc = (float(v) for v in np.linalg.solve(system, rhs))
        radius = math.hypot(x1 - xc, y1 - yc)
        return cls(radius, Point2d(xc, yc))