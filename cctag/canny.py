"""Canny edge detection with wide derivative-of-Gaussian gradients.

The image gradients come from a 9x9 derivative-of-Gaussian kernel with
replicated borders. Non-maximum suppression and hysteresis then follow the
classic integer Canny scheme.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

L2_GRADIENT = 1 << 31
"""Flag to OR into ``aperture_size`` to use the Euclidean gradient norm."""

_CANNY_SHIFT = 15
_TG22 = int(0.4142135623730950488016887242097 * (1 << _CANNY_SHIFT) + 0.5)

# Half rows (outermost to innermost column) of the x-derivative kernel, top half.
_HALF_ROWS = (
    (0.000000143284235, 0.000003558691641, 0.000028902492951, 0.000064765993382),
    (0.000004744922188, 0.000117847682078, 0.000957119116802, 0.002144755142391),
    (0.000057804985902, 0.001435678675203, 0.011660097860113, 0.026128466569370),
    (0.000259063973527, 0.006434265427174, 0.052256933138740, 0.117099663048638),
    (0.000427124283626, 0.010608310271112, 0.086157117207395, 0.193064705260108),
)


def _build_kernel() -> np.ndarray:
    rows = [
        [-v for v in half] + [0.0] + list(reversed(half))
        for half in _HALF_ROWS + tuple(reversed(_HALF_ROWS[:-1]))
    ]
    return np.array(rows, dtype=np.float32).astype(np.float64)


_KERNEL_DX = _build_kernel()


class CannyResult(NamedTuple):
    """Edge map (0 or 255) and the x and y gradients it was computed from."""

    edges: np.ndarray
    dx: np.ndarray
    dy: np.ndarray


def _check_gray(gray) -> np.ndarray:
    img = np.asarray(gray)
    if img.ndim != 2 or img.dtype != np.uint8:
        raise TypeError("Expected an 8-bit single-channel image")
    if img.size == 0:
        raise ValueError("Image is empty")
    return img


def _to_int16(values: np.ndarray) -> np.ndarray:
    return np.clip(np.rint(values), -32768, 32767).astype(np.int16)


def derivatives(gray) -> tuple[np.ndarray, np.ndarray]:
    """Return the ``(dx, dy)`` gradients of an 8-bit image as int16 arrays.

    The x kernel is applied by correlation with replicated borders; the y
    kernel is its transpose.
    """
    img = _check_gray(gray)
    h, w = img.shape
    radius = _KERNEL_DX.shape[0] // 2
    padded = np.pad(img.astype(np.float64), radius, mode="edge")

    dx = np.zeros((h, w))
    dy = np.zeros((h, w))
    for (i, j), kx in np.ndenumerate(_KERNEL_DX):
        ky = _KERNEL_DX[j, i]
        if kx == 0.0 and ky == 0.0:
            continue
        window = padded[i:i + h, j:j + w]
        if kx:
            dx += kx * window
        if ky:
            dy += ky * window
    return _to_int16(dx), _to_int16(dy)


def _suppression_masks(dx: np.ndarray, dy: np.ndarray, l2: bool,
                       low: int, high: int) -> tuple[np.ndarray, np.ndarray]:
    x = dx.astype(np.int64)
    y = dy.astype(np.int64)
    if l2:
        xf = x.astype(np.float32)
        yf = y.astype(np.float32)
        mag = np.rint(np.sqrt(xf * xf + yf * yf)).astype(np.int64)
    else:
        mag = np.abs(x) + np.abs(y)

    h, w = mag.shape
    padded = np.zeros((h + 2, w + 2), dtype=np.int64)
    padded[1:-1, 1:-1] = mag

    left, right = padded[1:-1, :-2], padded[1:-1, 2:]
    up, down = padded[:-2, 1:-1], padded[2:, 1:-1]
    up_left, up_right = padded[:-2, :-2], padded[:-2, 2:]
    down_left, down_right = padded[2:, :-2], padded[2:, 2:]

    ax = np.abs(x)
    ay = np.abs(y)
    tg22x = ax * _TG22
    tg67x = tg22x + ((ax + ax) << _CANNY_SHIFT)
    yy = ay << _CANNY_SHIFT

    horizontal = yy < tg22x
    vertical = ~horizontal & (yy > tg67x)
    negative = (x ^ y) < 0
    diagonal_max = np.where(negative,
                            (mag > up_right) & (mag > down_left),
                            (mag > up_left) & (mag > down_right))
    local_max = (mag > low) & np.select(
        [horizontal, vertical],
        [(mag > left) & (mag >= right), (mag > up) & (mag >= down)],
        default=diagonal_max,
    )
    return local_max, mag > high


def recoded_canny(gray, low_thresh: float, high_thresh: float,
                  aperture_size: int) -> CannyResult:
    """Detect edges in an 8-bit image.

    ``aperture_size`` must be odd and between 3 and 7; OR it with
    ``L2_GRADIENT`` to use the Euclidean gradient magnitude instead of the
    sum of absolute values. The thresholds may be given in either order.
    """
    img = _check_gray(gray)
    flags = int(aperture_size)
    low_thresh, high_thresh = sorted((float(low_thresh), float(high_thresh)))

    aperture = flags & 0x7FFFFFFF
    if aperture % 2 == 0 or aperture < 3 or aperture > 7:
        raise ValueError("Aperture size must be 3, 5 or 7")

    dx, dy = derivatives(img)
    low = math.floor(low_thresh)
    high = math.floor(high_thresh)
    local_max, strong = _suppression_masks(dx, dy, bool(flags & L2_GRADIENT), low, high)

    h, w = img.shape
    step = w + 2
    # 0: may be an edge, 1: cannot be an edge, 2: is an edge.
    edge_map = bytearray(b"\x01" * ((h + 2) * step))
    stack: list[int] = []

    for r, (max_row, strong_row) in enumerate(zip(local_max.tolist(), strong.tolist())):
        prev_flag = False
        base = (r + 1) * step + 1
        for c, (is_max, is_strong) in enumerate(zip(max_row, strong_row)):
            idx = base + c
            if is_max:
                if is_strong and not prev_flag and edge_map[idx - step] != 2:
                    edge_map[idx] = 2
                    stack.append(idx)
                    prev_flag = True
                else:
                    edge_map[idx] = 0
            else:
                prev_flag = False
                edge_map[idx] = 1

    offsets = (-1, 1, -step - 1, -step, -step + 1, step - 1, step, step + 1)
    while stack:
        p = stack.pop()
        for offset in offsets:
            q = p + offset
            if edge_map[q] == 0:
                edge_map[q] = 2
                stack.append(q)

    full = np.frombuffer(bytes(edge_map), dtype=np.uint8).reshape(h + 2, step)
    inner = full[1:-1, 1:-1]
    edges = np.where((inner >> 1) != 0, 255, 0).astype(np.uint8)
    return CannyResult(edges, dx, dy)