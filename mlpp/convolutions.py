"""Two-dimensional convolution, pooling and simple image-gradient tools.

Images are square grids of numbers, given as nested sequences or numpy
arrays. A multi-channel image is a sequence of such grids.

Sliding windows follow one fixed placement rule. Along each axis the first
window starts at 0, and window ``i`` for ``i > 0`` starts at
``i + stride - 1``. With a stride of 1 this is the usual dense placement.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Sequence, Union

import numpy as np

__all__ = [
    "PoolKind",
    "PREWITT_HORIZONTAL",
    "PREWITT_VERTICAL",
    "SOBEL_HORIZONTAL",
    "SOBEL_VERTICAL",
    "SCHARR_HORIZONTAL",
    "SCHARR_VERTICAL",
    "ROBERTS_HORIZONTAL",
    "ROBERTS_VERTICAL",
    "convolve",
    "pool",
    "global_pool",
    "gaussian_2d",
    "gaussian_filter_2d",
    "dx",
    "dy",
    "grad_magnitude",
    "grad_orientation",
    "compute_m",
    "harris_corner_detection",
]

Grid = Union[Sequence, np.ndarray]

PREWITT_HORIZONTAL = ((1, 1, 1), (0, 0, 0), (-1, -1, -1))
PREWITT_VERTICAL = ((1, 0, -1), (1, 0, -1), (1, 0, -1))
SOBEL_HORIZONTAL = ((1, 2, 1), (0, 0, 0), (-1, -2, -1))
SOBEL_VERTICAL = ((-1, 0, 1), (-2, 0, 2), (-1, 0, 1))
SCHARR_HORIZONTAL = ((3, 10, 3), (0, 0, 0), (-3, -10, -3))
SCHARR_VERTICAL = ((3, 0, -3), (10, 0, -10), (3, 0, -3))
ROBERTS_HORIZONTAL = ((0, 1), (-1, 0))
ROBERTS_VERTICAL = ((1, 0), (0, -1))

_HARRIS_K = 0.05
_GAUSSIAN_SIGMA = 1.0
_GAUSSIAN_SIZE = 3


class PoolKind(str, Enum):
    """Reductions used by pooling; any other kind name means maximum."""

    AVERAGE = "Average"
    MIN = "Min"
    MAX = "Max"


def _window_start(i: int, stride: int) -> int:
    return 0 if i == 0 else i + stride - 1


def _map_size(extent: int, stride: int) -> int:
    if stride < 1:
        raise ValueError("stride must be at least 1")
    # Truncation toward zero, as integer division of the size formula.
    return int(extent / stride) + 1


def _check_window(start: int, size: int, limit: int) -> None:
    if start + size > limit:
        raise ValueError(
            f"window at {start} of size {size} runs past the edge ({limit})"
        )


def _windows(height: int, width: int, size: int, stride: int, map_size: int):
    """Yield (i, j, row, col) for each window of the output map."""
    for i in range(map_size):
        row = _window_start(i, stride)
        _check_window(row, size, height)
        for j in range(map_size):
            col = _window_start(j, stride)
            _check_window(col, size, width)
            yield i, j, row, col


def _pad(channels: np.ndarray, padding: int) -> np.ndarray:
    n = channels.shape[1]
    padded = np.zeros((channels.shape[0], n + 2 * padding, n + 2 * padding))
    region = channels[:, : n + padding, : n + padding]
    padded[:, padding : padding + region.shape[1], padding : padding + region.shape[2]] = region
    return padded


def convolve(image: Grid, kernel: Grid, stride: int = 1, padding: int = 0) -> np.ndarray:
    """Slide ``kernel`` over ``image`` and take dot products.

    A 2-D image with a 2-D kernel gives a 2-D feature map. A 3-D image of
    ``c`` channels with a 3-D stack of kernels gives one output channel for
    every ``c`` kernels; each output channel uses its own group of kernels
    across all input channels. ``padding`` adds that many rows and columns
    of zeros on every side.
    """
    arr = np.asarray(image, dtype=float)
    ker = np.asarray(kernel, dtype=float)
    if arr.ndim != ker.ndim or arr.ndim not in (2, 3):
        raise ValueError("image and kernel must both be 2-D or both be 3-D")
    if padding < 0:
        raise ValueError("padding must not be negative")
    flat = arr.ndim == 2
    if flat:
        arr = arr[None]
        ker = ker[None]

    n = arr.shape[1]
    f = ker.shape[1]
    map_size = _map_size(n - f + 2 * padding, stride)
    in_channels = arr.shape[0]
    out_channels = ker.shape[0] // in_channels

    if padding:
        arr = _pad(arr, padding)

    result = np.zeros((out_channels, max(map_size, 0), max(map_size, 0)))
    if map_size > 0 and out_channels > 0:
        groups = [
            ker[c * in_channels : (c + 1) * in_channels].ravel()
            for c in range(out_channels)
        ]
        for i, j, row, col in _windows(arr.shape[1], arr.shape[2], f, stride, map_size):
            window = arr[:, row : row + f, col : col + f].ravel()
            for c, weights in enumerate(groups):
                result[c, i, j] = float(np.dot(window, weights[: window.size]))
    return result[0] if flat else result


def _reduce(values: np.ndarray, kind: str) -> float:
    if kind == PoolKind.AVERAGE.value:
        return float(np.mean(values))
    if kind == PoolKind.MIN.value:
        return float(np.min(values))
    return float(np.max(values))


def _kind_name(kind: Union[str, PoolKind]) -> str:
    return kind.value if isinstance(kind, PoolKind) else str(kind)


def pool(image: Grid, size: int, stride: int, kind: Union[str, PoolKind] = PoolKind.MAX) -> np.ndarray:
    """Pool ``size``-by-``size`` windows with "Average", "Min" or maximum.

    A 3-D image is pooled channel by channel.
    """
    arr = np.asarray(image, dtype=float)
    if arr.ndim == 3:
        return np.array([pool(channel, size, stride, kind) for channel in arr])
    if arr.ndim != 2:
        raise ValueError("image must be 2-D or 3-D")
    name = _kind_name(kind)
    map_size = _map_size(arr.shape[0] - size, stride)
    result = np.zeros((max(map_size, 0), max(map_size, 0)))
    if map_size > 0:
        for i, j, row, col in _windows(arr.shape[0], arr.shape[1], size, stride, map_size):
            result[i, j] = _reduce(arr[row : row + size, col : col + size], name)
    return result


def global_pool(image: Grid, kind: Union[str, PoolKind] = PoolKind.MAX) -> Union[float, np.ndarray]:
    """Reduce a whole 2-D image to one number, or a 3-D image to one per channel."""
    arr = np.asarray(image, dtype=float)
    name = _kind_name(kind)
    if arr.ndim == 3:
        return np.array([_reduce(channel, name) for channel in arr])
    if arr.ndim != 2:
        raise ValueError("image must be 2-D or 3-D")
    return _reduce(arr, name)


def gaussian_2d(x: float, y: float, std: float) -> float:
    """Kernel weight 1/(2*pi*std**2) * exp(-(x**2 + y**2) / 2 * std**2)."""
    std_sq = std * std
    return 1.0 / (2.0 * math.pi * std_sq) * math.exp(-(x * x + y * y) / 2.0 * std_sq)


def gaussian_filter_2d(size: int, std: float) -> np.ndarray:
    """A ``size``-by-``size`` Gaussian kernel centred on the middle cell."""
    half = (size - 1) // 2
    return np.array(
        [[gaussian_2d(i - half, half - j, std) for j in range(size)] for i in range(size)],
        dtype=float,
    ).reshape(size, size)


def dx(image: Grid) -> np.ndarray:
    """Horizontal central difference, right minus left, zero beyond the edges."""
    arr = np.asarray(image, dtype=float)
    padded = np.pad(arr, ((0, 0), (1, 1)))
    return padded[:, 2:] - padded[:, :-2]


def dy(image: Grid) -> np.ndarray:
    """Vertical central difference, upper minus lower, zero beyond the edges."""
    arr = np.asarray(image, dtype=float)
    padded = np.pad(arr, ((1, 1), (0, 0)))
    return padded[:-2] - padded[2:]


def grad_magnitude(image: Grid) -> np.ndarray:
    """Length of the gradient (dx, dy) at every pixel."""
    return np.sqrt(dx(image) ** 2 + dy(image) ** 2)


def grad_orientation(image: Grid) -> np.ndarray:
    """Angle atan2(dy, dx) of the gradient at every pixel."""
    return np.arctan2(dy(image), dx(image))


def compute_m(image: Grid) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Gaussian-smoothed products dx*dx, dy*dy and dx*dy of the image."""
    x_deriv = dx(image)
    y_deriv = dy(image)
    n = x_deriv.shape[0]
    padding = int(((n - 1) + _GAUSSIAN_SIZE - n) / 2)
    gaussian = gaussian_filter_2d(_GAUSSIAN_SIZE, _GAUSSIAN_SIGMA)
    xx = convolve(x_deriv * x_deriv, gaussian, 1, padding)
    yy = convolve(y_deriv * y_deriv, gaussian, 1, padding)
    xy = convolve(x_deriv * y_deriv, gaussian, 1, padding)
    return xx, yy, xy


def harris_corner_detection(image: Grid) -> list[list[str]]:
    """Label each pixel "C" (corner), "E" (edge) or "N" (neither).

    The Harris response det(M) - 0.05 * trace(M)**2 is positive at corners
    and negative at edges.
    """
    xx, yy, xy = compute_m(image)
    det = xx * yy - xy * xy
    trace = xx + yy
    response = det - _HARRIS_K * trace * trace
    return [
        ["C" if r > 0 else "E" if r < 0 else "N" for r in row]
        for row in response
    ]