# Geometry.py

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, NamedTuple

from LivePoints.Errors import InvalidConfiguration


class Point(NamedTuple):
    x: float
    y: float

    @classmethod
    def coerce(cls, value: Any) -> "Point":
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))


def require_real(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidConfiguration(f"{name} must be a real number, got {value!r}", field=name)
    value = float(value)
    if not math.isfinite(value):
        raise InvalidConfiguration(f"{name} must be finite, got {value!r}", field=name)
    return value


def require_int(name: str, value: Any, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}", field=name)
    if value < minimum:
        relation = "positive" if minimum == 1 else f">= {minimum}"
        raise InvalidConfiguration(f"{name} must be {relation}, got {value}", field=name)
    return int(value)


@dataclass(frozen=True)
class LogicalRange:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self) -> None:
        for name in ("min_x", "max_x", "min_y", "max_y"):
            object.__setattr__(self, name, require_real(name, getattr(self, name)))
        if self.min_x >= self.max_x:
            raise InvalidConfiguration(
                f"min_x ({self.min_x}) must be less than max_x ({self.max_x})", field="min_x"
            )
        if self.min_y >= self.max_y:
            raise InvalidConfiguration(
                f"min_y ({self.min_y}) must be less than max_y ({self.max_y})", field="min_y"
            )

    @property
    def span_x(self) -> float:
        return self.max_x - self.min_x

    @property
    def span_y(self) -> float:
        return self.max_y - self.min_y

    def contains(self, point: Point) -> bool:
        x, y = point
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def __str__(self) -> str:
        return f"X[{self.min_x:.1f}, {self.max_x:.1f}] Y[{self.min_y:.1f}, {self.max_y:.1f}]"


@dataclass(frozen=True)
class PixelBounds:
    width: int
    height: int
    padding: int = 20

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", require_int("width", self.width, 1))
        object.__setattr__(self, "height", require_int("height", self.height, 1))
        object.__setattr__(self, "padding", require_int("padding", self.padding, 0))

    @property
    def drawable_width(self) -> int:
        return max(0, self.width - 2 * self.padding)

    @property
    def drawable_height(self) -> int:
        return max(0, self.height - 2 * self.padding)
