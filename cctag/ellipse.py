"""Ellipses as conics and as center, semi-axes and orientation."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from cctag.point import Point2d


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _as_matrix(matrix) -> np.ndarray:
    m = np.array(matrix, dtype=float)
    if m.shape != (3, 3):
        raise ValueError("Ellipse matrix must be 3x3")
    return m


class Ellipse:
    """An ellipse centred at ``center`` with semi-axes ``a`` and ``b``,
    rotated by ``angle`` radians with respect to the x-axis.

    The conic matrix and the parameters are kept consistent: changing
    one recomputes the other. When recovered from a matrix, the
    representation with the major axis along the y-axis is chosen.
    """

    def __init__(self, center: Point2d, a: float, b: float, angle: float):
        self._matrix = np.zeros((3, 3))
        self._center = Point2d(0.0, 0.0)
        self._a = 0.0
        self._b = 0.0
        self._angle = 0.0
        self.set_parameters(center, a, b, angle)

    @classmethod
    def from_matrix(cls, matrix) -> "Ellipse":
        """Build an ellipse from its 3x3 conic matrix."""
        ellipse = cls.__new__(cls)
        ellipse._matrix = np.zeros((3, 3))
        ellipse._center = Point2d(0.0, 0.0)
        ellipse._a = 0.0
        ellipse._b = 0.0
        ellipse._angle = 0.0
        ellipse.set_matrix(matrix)
        return ellipse

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix.copy()

    @matrix.setter
    def matrix(self, value) -> None:
        self.set_matrix(value)

    @property
    def center(self) -> Point2d:
        return self._center

    @center.setter
    def center(self, value: Point2d) -> None:
        self._center = Point2d(float(value.x), float(value.y))
        self._compute_matrix()

    @property
    def a(self) -> float:
        return self._a

    @a.setter
    def a(self, value: float) -> None:
        if value < 0:
            raise ValueError("Semi axes must be real positive!")
        self._a = float(value)
        self._compute_matrix()

    @property
    def b(self) -> float:
        return self._b

    @b.setter
    def b(self, value: float) -> None:
        if value < 0:
            raise ValueError("Semi axes must be real positive!")
        self._b = float(value)
        self._compute_matrix()

    @property
    def angle(self) -> float:
        return self._angle

    @angle.setter
    def angle(self, value: float) -> None:
        self._angle = float(value)
        self._compute_matrix()

    def set_matrix(self, matrix) -> None:
        """Replace the conic matrix and recompute the parameters."""
        self._matrix = _as_matrix(matrix)
        self._compute_parameters()

    def set_parameters(self, center: Point2d, a: float, b: float, angle: float) -> None:
        """Replace all parameters and recompute the conic matrix."""
        if a < 0 or b < 0:
            raise ValueError("Semi axes must be real positive!")
        self._center = Point2d(float(center.x), float(center.y))
        self._a = float(a)
        self._b = float(b)
        self._angle = float(angle)
        self._compute_matrix()

    def transform(self, mT) -> "Ellipse":
        """Return the ellipse with conic matrix ``mT.T @ C @ mT``."""
        t = _as_matrix(mT)
        return Ellipse.from_matrix(t.T @ self._matrix @ t)

    def canonic_form(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(canonic, primal, dual)``.

        ``canonic`` is the conic in canonical (centred, axis-aligned) form,
        ``primal`` the transformation relating it to this conic and
        ``dual`` its inverse.
        """
        m = self._matrix
        q1, q2, q3 = m[0, 0], m[0, 1], m[0, 2]
        q4, q5, q6 = m[1, 1], m[1, 2], m[2, 2]

        par1, par2, par3, par4, par5 = q1, 2 * q2, q4, 2 * q3, 2 * q5

        theta = 0.5 * math.atan2(par2, par1 - par3)
        cost = math.cos(theta)
        sint = math.sin(theta)
        sin_sq = sint * sint
        cos_sq = cost * cost
        cos_sin = sint * cost

        au = par4 * cost + par5 * sint
        av = -par4 * sint + par5 * cost
        auu = par1 * cos_sq + par3 * sin_sq + par2 * cos_sin
        avv = par1 * sin_sq + par3 * cos_sq - par2 * cos_sin

        with np.errstate(divide="ignore", invalid="ignore"):
            tu = -np.float64(au) / (2 * np.float64(auu))
            tv = -np.float64(av) / (2 * np.float64(avv))

        uc = tu * cost - tv * sint
        vc = tu * sint + tv * cost

        qt1 = cost * (cost * q1 + q2 * sint) + sint * (cost * q2 + q4 * sint)
        qt2 = cost * (cost * q2 + q4 * sint) - sint * (cost * q1 + q2 * sint)
        qt3 = cost * q3 + q5 * sint + uc * (cost * q1 + q2 * sint) + vc * (cost * q2 + q4 * sint)
        qt4 = cost * (cost * q4 - q2 * sint) - sint * (cost * q2 - q1 * sint)
        qt5 = cost * q5 - q3 * sint + uc * (cost * q2 - q1 * sint) + vc * (cost * q4 - q2 * sint)
        qt6 = (q6 + uc * (q3 + q1 * uc + q2 * vc) + vc * (q5 + q2 * uc + q4 * vc)
               + q3 * uc + q5 * vc)

        canonic = np.array([[qt1, qt2, qt3],
                            [qt2, qt4, qt5],
                            [qt3, qt5, qt6]], dtype=float)
        primal = np.array([[cost, sint, -cost * uc - sint * vc],
                           [-sint, cost, sint * uc - cost * vc],
                           [0.0, 0.0, cost * cost + sint * sint]], dtype=float)
        dual = np.array([[cost, -sint, uc],
                         [sint, cost, vc],
                         [0.0, 0.0, 1.0]], dtype=float)
        return canonic, primal, dual

    def __str__(self) -> str:
        rows = " ; ".join(" ".join(f"{v:g}" for v in row) for row in self._matrix)
        return f"e = [ {rows} ] "

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(center={self._center!r}, a={self._a!r}, "
                f"b={self._b!r}, angle={self._angle!r})")

    def _compute_parameters(self) -> None:
        m = self._matrix
        p0 = m[0, 0]
        p1 = 2.0 * m[0, 1]
        p2 = m[1, 1]
        p3 = 2.0 * m[0, 2]
        p4 = 2.0 * m[1, 2]
        p5 = m[2, 2]

        theta = 0.5 * math.atan2(p1, p0 - p2)
        cost = math.cos(theta)
        sint = math.sin(theta)
        sin_sq = sint * sint
        cos_sq = cost * cost
        cos_sin = sint * cost

        ao = p5
        au = p3 * cost + p4 * sint
        av = -p3 * sint + p4 * cost
        auu = p0 * cos_sq + p2 * sin_sq + p1 * cos_sin
        avv = p0 * sin_sq + p2 * cos_sq - p1 * cos_sin

        if auu == 0 or avv == 0:
            self._center = Point2d(0.0, 0.0)
            self._a = 0.0
            self._b = 0.0
            self._angle = 0.0
            return

        tu = -au / (2.0 * auu)
        tv = -av / (2.0 * avv)
        wc = ao - auu * tu * tu - avv * tv * tv

        center = Point2d(tu * cost - tv * sint, tu * sint + tv * cost)

        ru = -wc / auu
        rv = -wc / avv
        a_aux = math.sqrt(abs(ru)) * _sign(ru)
        b_aux = math.sqrt(abs(rv)) * _sign(rv)
        if a_aux < 0 or b_aux < 0:
            raise ValueError("Semi axes must be real positive!")

        self._center = center
        self._a = float(a_aux)
        self._b = float(b_aux)
        self._angle = float(theta)

    def _compute_matrix(self) -> None:
        c = math.cos(self._angle)
        s = math.sin(self._angle)
        tmp = np.array([[c, -s, self._center.x],
                        [s, c, self._center.y],
                        [0.0, 0.0, 1.0]])
        try:
            inv = np.linalg.inv(tmp)
        except np.linalg.LinAlgError as exc:
            raise ValueError("Singular matrix!") from exc
        with np.errstate(divide="ignore", invalid="ignore"):
            diag = np.diag([np.float64(1.0) / np.float64(self._a * self._a),
                            np.float64(1.0) / np.float64(self._b * self._b),
                            -1.0])
            self._matrix = inv.T @ (diag @ inv)


def scale(ellipse: Ellipse, factor: float) -> Ellipse:
    """Return a copy of ``ellipse`` with center and semi-axes scaled by ``factor``."""
    center = Point2d(ellipse.center.x * factor, ellipse.center.y * factor)
    return Ellipse(center, ellipse.a * factor, ellipse.b * factor, ellipse.angle)


def get_sorted_outer_points(ellipse: Ellipse, points: Sequence[Point2d],
                            requested_size: int) -> list:
    """Sort ``points`` by angle around the ellipse center and sample them.

    At most ``min(requested_size, len(points))`` points are returned,
    taken at a uniform step through the angular ordering.
    """
    cx, cy = ellipse.center.x, ellipse.center.y
    order = sorted((math.atan2(p.y - cy, p.x - cx), i) for i, p in enumerate(points))

    n_outer = min(requested_size, len(points))
    if n_outer == 1:
        return [points[order[0][1]]]
    step = max(1.0, len(points) / (n_outer - 1)) if n_outer > 1 else 1.0

    result = []
    k = 0
    while (index := int(k * step)) < len(order):
        result.append(points[order[index][1]])
        k += 1
    return result