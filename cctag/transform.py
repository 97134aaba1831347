"""Projective transformations applied to conics."""

from __future__ import annotations

import numpy as np

from cctag.ellipse import Ellipse


def projective_transform(tr, ellipse: Ellipse) -> None:
    """Replace the conic of ``ellipse`` in place with ``tr.T @ C @ tr``."""
    t = np.asarray(tr, dtype=float)
    if t.shape != (3, 3):
        raise ValueError("Transformation must be a 3x3 matrix")
    ellipse.set_matrix(t.T @ ellipse.matrix @ t)