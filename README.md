# cctag

Geometry and image-filtering building blocks for detecting concentric
circle tags. The package covers points, ellipses held as conics, circles,
distances from points to ellipses, sampling and rasterising ellipses, a
small 3x3 matrix type, RGBA colours, and a Canny edge detector that also
returns the image derivatives.

## Installation

```
pip install .
```

Only `numpy` is required.

## Modules

- `cctag.point`: `Point2d`, an immutable normalised 2D point. Build one
  from homogeneous coordinates with `Point2d.from_homogeneous` (a point
  with `w == 0` raises `ValueError`) and get `[x, y, 1]` back with
  `as_vector`. `DirectedPoint2d` also carries `dx` and `dy`, returned
  together by its `gradient` property.
- `cctag.ellipse`: `Ellipse`, kept both as parameters (`center`, semi-axes
  `a` and `b`, `angle`) and as a 3x3 conic `matrix`; setting either side
  recomputes the other. Negative semi-axes raise `ValueError`. Build one
  from parameters or with `Ellipse.from_matrix`; when recovered from a
  matrix the representation with the major axis along the y-axis is
  chosen. `transform(mT)` returns the ellipse with conic `mT.T @ C @ mT`,
  and `canonic_form()` returns the `(canonic, primal, dual)` matrices.
  The module also has `scale(ellipse, factor)`, which returns a scaled
  copy, and `get_sorted_outer_points(ellipse, points, requested_size)`,
  which orders points by angle around the center and samples at most
  `requested_size` of them.
- `cctag.circle`: `Circle(radius, center=None)`, an `Ellipse` with equal
  semi-axes centred at the origin by default, and
  `Circle.through_points(p1, p2, p3)`, which raises `ValueError` for
  collinear points.
- `cctag.transform`: `projective_transform(tr, ellipse)` replaces the
  ellipse's conic in place with `tr.T @ C @ tr`.
- `cctag.distance`: `distance_points_2d` (Euclidean distance),
  `distance_point_ellipse` (point-polar distance to a conic, for a
  `Point2d` or a homogeneous 3-vector) and `distances_point_ellipse`
  (the same for many points, in order).
- `cctag.ellipse_points`: points on an ellipse
  (`extract_ellipse_point_at_angle`, `ellipse_point`, `ellipse_points`,
  `point_on_ellipse`), line intersections (`intersect_ellipse_with_line`)
  and pixel rasterisation (`compute_intermediate_points`,
  `rasterize_elliptical_arc`, `rasterize_ellipse`,
  `rasterize_ellipse_perimeter`).
- `cctag.matrix3`: an immutable `Matrix3x3` indexed as `m[row, col]`,
  with `identity()`, `det()`, `inverse()` (raises `ValueError` when
  singular), `transposed()` and `@` products.
- `cctag.colors`: an immutable RGBA `Color` and the constants
  `COLOR_WHITE`, `COLOR_RED`, `COLOR_GREEN` and `COLOR_BLUE`.
- `cctag.canny`: `derivatives(gray)` computes the int16 x and y gradients
  of an 8-bit grayscale image with a 9x9 Gaussian-derivative kernel and
  replicated borders. `recoded_canny(gray, low_thresh, high_thresh,
  aperture_size)` runs non-maximum suppression and hysteresis on them and
  returns a `CannyResult` of `edges` (0 or 255), `dx` and `dy`. The
  aperture size must be odd and between 3 and 7; OR it with
  `L2_GRADIENT` to use the Euclidean gradient magnitude.

## Example

```python
import math

from cctag.point import Point2d
from cctag.ellipse import Ellipse
from cctag.distance import distance_point_ellipse
from cctag.ellipse_points import rasterize_ellipse

ellipse = Ellipse(Point2d(16.0, -4.0), 5.0, 3.0, math.pi / 6)
print(ellipse)

print(distance_point_ellipse(Point2d(21.0, -4.0), ellipse))

pixels = rasterize_ellipse(ellipse)
print(len(pixels))
```

Edge detection on an 8-bit grayscale image held in a numpy array:

```python
import numpy as np

from cctag.canny import recoded_canny

gray = np.zeros((64, 64), dtype=np.uint8)
gray[16:48, 16:48] = 255
edges, dx, dy = recoded_canny(gray, 10.0, 30.0, 3)
```

## What the package does not do

This is a library of building blocks only. It has no command-line tool
and no complete detection pipeline: it does not read images from files,
fit ellipses to edge points, find tag candidates, sample image signals
along cuts, or identify tags. Those steps have to be built on top of the
modules above.

## Running the tests

```
pip install .[test]
pytest
```