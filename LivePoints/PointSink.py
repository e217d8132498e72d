# PointSink.py

from typing import Callable, Optional

from LivePoints.Geometry import Point
from LivePoints.PointBuffer import PointBuffer


class PointSink:
    """
    Receives points from a PointSource.
    Kept as a plain base class (not an ABC) so Qt widgets can mix it in
    without a metaclass conflict.
    """

    def on_point(self, point: Point) -> None:
        raise NotImplementedError(f"{type(self).__name__} must implement on_point()")


class BufferedSink(PointSink):
    def __init__(self, capacity: int, request_redraw: Optional[Callable[[], None]] = None) -> None:
        self.buffer: PointBuffer = PointBuffer(capacity, request_redraw=request_redraw)

    def on_point(self, point: Point) -> None:
        self.buffer.append(point)
