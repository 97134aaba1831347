"""Two-dimensional points in normalized homogeneous form."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point2d:
    """A 2D point ``[x, y, 1]`` whose homogeneous weight is always one."""

    x: float = 0.0
    y: float = 0.0

    @property
    def w(self) -> float:
        """The homogeneous weight, always 1 for a stored point."""
        return 1.0

    @classmethod
    def from_homogeneous(cls, vector) -> "Point2d":
        """Build a point from homogeneous coordinates ``(x, y, w)``.

        Raises ValueError for a point at infinity (``w == 0``).
        """
        x, y, w = (float(v) for v in np.asarray(vector, dtype=float).reshape(3))
        if w == 0:
            raise ValueError("Normalization of an infinite point !")
        return cls(x / w, y / w)

    def as_vector(self) -> np.ndarray:
        """Return the homogeneous vector ``[x, y, 1]``."""
        return np.array([self.x, self.y, 1.0])


@dataclass(frozen=True)
class DirectedPoint2d(Point2d):
    """A 2D point together with the image gradient at that point."""

    dx: float = 0.0
    dy: float = 0.0

    @property
    def gradient(self) -> np.ndarray:
        """The gradient ``[dx, dy]`` at this point."""
        return np.array([self.dx, self.dy])