# CoordinateMapper.py

import math
from typing import Any, Iterable, Tuple

import numpy as np

from LivePoints.Geometry import LogicalRange, PixelBounds, Point

# Qt paints with 32-bit ints; far out-of-range points are pinned to these.
_PIXEL_MIN = -(2 ** 31)
_PIXEL_MAX = 2 ** 31 - 1


def _fraction(value: Any, low: float, high: float) -> Any:
    # Works for floats and numpy arrays. A range wider than float max is
    # measured in halves so the span stays finite.
    span = high - low
    if math.isinf(span):
        return (value / 2 - low / 2) / (high / 2 - low / 2)
    return (value - low) / span


def _pixel_offset(fraction: float, span: int) -> int:
    if span <= 0:
        return 0
    value = fraction * span
    if math.isnan(value):
        return 0
    return int(round(min(max(value, _PIXEL_MIN), _PIXEL_MAX)))


def _pixel_offsets(fractions: np.ndarray, span: int) -> np.ndarray:
    if span <= 0:
        return np.zeros(len(fractions))
    values = np.nan_to_num(fractions * span, nan=0.0, posinf=_PIXEL_MAX, neginf=_PIXEL_MIN)
    return np.rint(np.clip(values, _PIXEL_MIN, _PIXEL_MAX))


def to_screen_x(x: float, logical_range: LogicalRange, bounds: PixelBounds) -> int:
    fraction = _fraction(x, logical_range.min_x, logical_range.max_x)
    return bounds.padding + _pixel_offset(fraction, bounds.drawable_width)


def to_screen_y(y: float, logical_range: LogicalRange, bounds: PixelBounds) -> int:
    # Logical Y grows upward, screen Y grows downward.
    fraction = _fraction(y, logical_range.min_y, logical_range.max_y)
    return bounds.height - bounds.padding - _pixel_offset(fraction, bounds.drawable_height)


def to_screen(point: Any, logical_range: LogicalRange, bounds: PixelBounds) -> Tuple[int, int]:
    x, y = point
    return to_screen_x(x, logical_range, bounds), to_screen_y(y, logical_range, bounds)


def map_points(points: Iterable[Any], logical_range: LogicalRange, bounds: PixelBounds) -> np.ndarray:
    """
    Vectorised form of `to_screen` for a whole snapshot.
    Returns an (n, 2) integer array of pixel positions, rounded half to even
    exactly like the scalar functions.
    """
    arr = np.asarray(list(points), dtype=float).reshape(-1, 2)
    if arr.size == 0:
        return np.empty((0, 2), dtype=int)

    with np.errstate(over="ignore", invalid="ignore"):
        fx = _fraction(arr[:, 0], logical_range.min_x, logical_range.max_x)
        fy = _fraction(arr[:, 1], logical_range.min_y, logical_range.max_y)
        sx = bounds.padding + _pixel_offsets(fx, bounds.drawable_width)
        sy = bounds.height - bounds.padding - _pixel_offsets(fy, bounds.drawable_height)
    return np.column_stack((sx, sy)).astype(int)


class CoordinateMapper:
    """
    Holds the current logical range for a view. Bounds are passed on every call
    so a resized surface only needs to hand in its new size.
    """

    def __init__(self, logical_range: LogicalRange) -> None:
        self._range: LogicalRange = logical_range

    @property
    def range(self) -> LogicalRange:
        return self._range

    def set_range(self, logical_range: LogicalRange) -> None:
        self._range = logical_range

    def to_screen_x(self, x: float, bounds: PixelBounds) -> int:
        return to_screen_x(x, self._range, bounds)

    def to_screen_y(self, y: float, bounds: PixelBounds) -> int:
        return to_screen_y(y, self._range, bounds)

    def to_screen(self, point: Point, bounds: PixelBounds) -> Tuple[int, int]:
        return to_screen(point, self._range, bounds)

    def map_points(self, points: Iterable[Any], bounds: PixelBounds) -> np.ndarray:
        return map_points(points, self._range, bounds)
