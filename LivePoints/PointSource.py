# PointSource.py

import logging
import threading
from typing import Any, Callable, List, Optional, Tuple

import numpy as np

from LivePoints.Geometry import LogicalRange, Point
from LivePoints.PointSink import PointSink

logger = logging.getLogger(__name__)

Driver = Callable[[LogicalRange], Tuple[float, float]]


class PointSource:
    def __init__(
        self,
        logical_range: LogicalRange,
        *,
        driver: Optional[Driver] = None,
        seed: Optional[int] = None,
    ) -> None:
        self._range: LogicalRange = logical_range
        self._driver: Optional[Driver] = driver
        self._rng: np.random.Generator = np.random.default_rng(seed)
        self._sinks: List[PointSink] = []
        self._lock = threading.Lock()

    @property
    def range(self) -> LogicalRange:
        return self._range

    def set_range(self, logical_range: LogicalRange) -> None:
        # Rebinding is atomic; points already delivered keep their values.
        self._range = logical_range
        logger.info("Source range set to %s", logical_range)

    def subscribe(self, sink: PointSink) -> None:
        with self._lock:
            if any(s is sink for s in self._sinks):
                return
            self._sinks.append(sink)
        logger.info("Subscribed %s", type(sink).__name__)

    def unsubscribe(self, sink: PointSink) -> None:
        with self._lock:
            before = len(self._sinks)
            self._sinks = [s for s in self._sinks if s is not sink]
            removed = len(self._sinks) != before
        if removed:
            logger.info("Unsubscribed %s", type(sink).__name__)

    def subscribers(self) -> List[PointSink]:
        with self._lock:
            return list(self._sinks)

    def generate_point(self) -> Point:
        logical_range = self._range
        if self._driver is not None:
            point = Point.coerce(self._driver(logical_range))
        else:
            point = Point(
                float(self._rng.uniform(logical_range.min_x, logical_range.max_x)),
                float(self._rng.uniform(logical_range.min_y, logical_range.max_y)),
            )
        return self.publish(point)

    def publish(self, point: Any) -> Point:
        """
        Deliver a point to every subscribed sink, in subscription order.
        - Iterates over a copy of the registration list so a sink may
          subscribe or unsubscribe while being notified.
        - Returns only after every sink has been called.
        - A failing sink is logged and its exception propagates to the caller.
        """
        point = Point.coerce(point)
        for sink in self.subscribers():
            try:
                sink.on_point(point)
            except Exception:
                logger.exception("Sink %s failed on %s", type(sink).__name__, point)
                raise
        return point
