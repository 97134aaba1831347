"""Conic geometry, ellipse rasterisation and edge detection for concentric circle tags."""

__version__ = "0.1.0"

__all__ = [
    "canny",
    "circle",
    "colors",
    "distance",
    "ellipse",
    "ellipse_points",
    "matrix3",
    "point",
    "transform",
]