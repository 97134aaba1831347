"""Sampling, projecting onto and rasterizing points of an ellipse."""

from __future__ import annotations

import math

import numpy as np

from cctag.ellipse import Ellipse
from cctag.point import Point2d


def _round(value: float) -> int:
    """Round half away from zero."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def extract_ellipse_point_at_angle(ellipse: Ellipse, theta: float) -> Point2d:
    """Return the point of the ellipse at parametric angle ``theta``."""
    x = ellipse.a * math.cos(theta)
    y = ellipse.b * math.sin(theta)
    c = math.cos(ellipse.angle)
    s = math.sin(ellipse.angle)
    return Point2d(x * c - y * s + ellipse.center.x,
                   x * s + y * c + ellipse.center.y)


def point_on_ellipse(ellipse: Ellipse, point: Point2d) -> Point2d:
    """Project ``point`` onto the ellipse along the ray from its center.

    Raises ValueError when the point coincides with the center.
    """
    c = math.cos(ellipse.angle)
    s = math.sin(ellipse.angle)
    x = point.x - ellipse.center.x
    y = point.y - ellipse.center.y

    u = x * c + y * s
    v = -x * s + y * c
    cs = math.sqrt(u * u / (ellipse.a * ellipse.a) + v * v / (ellipse.b * ellipse.b))
    if cs == 0:
        raise ValueError("Cannot project the ellipse center onto the ellipse")
    u /= cs
    v /= cs
    return Point2d(u * c - v * s + ellipse.center.x,
                   u * s + v * c + ellipse.center.y)


def ellipse_points(ellipse: Ellipse, count: int, phi1: float | None = None,
                   phi2: float | None = None) -> list[Point2d]:
    """Sample the ellipse at angles from ``phi1`` to ``phi2`` inclusive.

    The step is ``2*pi / count``. By default sampling starts one step past
    zero and ends at ``2*pi``.
    """
    if count <= 0:
        raise ValueError("Number of points must be positive")
    step = 2.0 * math.pi / count
    start = step if phi1 is None else float(phi1)
    stop = 2.0 * math.pi if phi2 is None else float(phi2)

    result = []
    k = 0
    while (theta := start + k * step) <= stop:
        result.append(extract_ellipse_point_at_angle(ellipse, theta))
        k += 1
    return result


def ellipse_point(ellipse: Ellipse, theta: float) -> np.ndarray:
    """Return the homogeneous vector ``[x, y, 1]`` of the point at ``theta``."""
    p = extract_ellipse_point_at_angle(ellipse, theta)
    return np.array([p.x, p.y, 1.0])


def compute_intermediate_points(ellipse: Ellipse) -> tuple[Point2d, Point2d, Point2d, Point2d]:
    """Return the four integer points ``(pt11, pt12, pt21, pt22)`` that split
    the ellipse into arcs for rasterization."""
    c = math.cos(ellipse.angle)
    s = math.sin(ellipse.angle)

    a = -ellipse.b * s - ellipse.b * c
    b = -ellipse.a * c + ellipse.a * s
    t11 = math.atan2(-a, b)
    t12 = t11 + math.pi

    a = -ellipse.b * s + ellipse.b * c
    b = -ellipse.a * c - ellipse.a * s
    t21 = math.atan2(-a, b)
    t22 = t21 + math.pi

    def rounded(theta: float) -> Point2d:
        v = ellipse_point(ellipse, theta)
        return Point2d(_round(v[0]), _round(v[1]))

    return rounded(t11), rounded(t12), rounded(t21), rounded(t22)


def intersect_ellipse_with_line(ellipse: Ellipse, value: float, horizontal: bool) -> list[float]:
    """Intersect the ellipse with the line ``y = value`` (``horizontal``) or
    ``x = value`` (otherwise).

    Returns the other coordinate of the 0, 1 or 2 intersections, ascending
    when the leading coefficient is positive.
    """
    m = ellipse.matrix
    y = float(value)
    if horizontal:
        a = m[0, 0]
        b = 2 * (y * m[0, 1] + m[0, 2])
        c = m[1, 1] * y * y + 2 * y * m[2, 1] + m[2, 2]
    else:
        a = m[1, 1]
        b = 2 * (y * m[0, 1] + m[1, 2])
        c = m[0, 0] * y * y + 2 * y * m[0, 2] + m[2, 2]
    a, b, c = float(a), float(b), float(c)

    discriminant = b * b / 4.0 - a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        return [(-b / 2.0 - root) / a, (-b / 2.0 + root) / a]
    if discriminant == 0:
        return [-b / (2.0 * a)]
    return []


def rasterize_elliptical_arc(ellipse: Ellipse, pt1: Point2d, pt2: Point2d,
                             intersection_index: int) -> list[Point2d]:
    """Rasterize the arc strictly between ``pt1`` and ``pt2``.

    The arc is walked along its longer extent; where a line cuts the
    ellipse twice, ``intersection_index`` (0 or 1) picks the intersection.
    """
    mx = abs(pt2.x - pt1.x)
    my = abs(pt2.y - pt1.y)
    result = []

    if mx > my:
        lo, hi = int(min(pt1.x, pt2.x)), int(max(pt1.x, pt2.x))
        for x in range(lo + 1, hi):
            hits = intersect_ellipse_with_line(ellipse, x, False)
            if len(hits) == 2:
                result.append(Point2d(x, _round(hits[intersection_index])))
            elif len(hits) == 1:
                result.append(Point2d(x, _round(hits[0])))
    else:
        lo, hi = int(min(pt1.y, pt2.y)), int(max(pt1.y, pt2.y))
        for y in range(lo + 1, hi):
            hits = intersect_ellipse_with_line(ellipse, y, True)
            if len(hits) == 2:
                result.append(Point2d(_round(hits[intersection_index]), y))
            elif len(hits) == 1:
                result.append(Point2d(_round(hits[0]), y))
    return result


def rasterize_ellipse(ellipse: Ellipse) -> list[Point2d]:
    """Return integer points covering the whole ellipse.

    The four intermediate points come first, followed by the four arcs.
    """
    pt11, pt12, pt21, pt22 = compute_intermediate_points(ellipse)
    if pt11.x > pt12.x:
        pt11, pt12 = pt12, pt11
    if pt21.y > pt22.y:
        pt21, pt22 = pt22, pt21

    result = [pt11, pt12, pt21, pt22]
    result += rasterize_elliptical_arc(ellipse, pt11, pt22, 1)
    result += rasterize_elliptical_arc(ellipse, pt22, pt12, 1)
    result += rasterize_elliptical_arc(ellipse, pt11, pt21, 0)
    result += rasterize_elliptical_arc(ellipse, pt21, pt12, 0)
    return result


def rasterize_ellipse_perimeter(ellipse: Ellipse) -> int:
    """Return the perimeter of the ellipse in pixels."""
    pt11, pt12, _pt21, pt22 = compute_intermediate_points(ellipse)
    diff1 = float(max(abs(pt22.x - pt11.x), abs(pt22.y - pt11.y)))
    diff2 = float(max(abs(pt12.x - pt22.x), abs(pt12.y - pt22.y)))
    return int((diff1 + diff2) * 2.0)