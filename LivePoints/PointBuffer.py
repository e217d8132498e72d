# PointBuffer.py

import logging
import threading
from collections import deque
from typing import Any, Callable, Deque, Optional, Tuple

import numpy as np
from PyQt5.QtCore import QObject, pyqtSignal

from LivePoints.Geometry import Point, require_int

logger = logging.getLogger(__name__)


class PointBuffer(QObject):
    """
    Fixed-capacity FIFO of the most recent points.

    Appends may come from any thread (a timer or a worker loop) while the UI
    thread reads snapshots. One lock guards the deque and is released before
    `data_updated` is emitted and before `request_redraw` runs, so a slow
    repaint never blocks the producer.
    """

    data_updated = pyqtSignal()

    def __init__(self, capacity: int, request_redraw: Optional[Callable[[], None]] = None) -> None:
        capacity = require_int("capacity", capacity, 1)
        super().__init__()
        self._capacity: int = capacity
        self._points: Deque[Point] = deque(maxlen=self._capacity)
        self._lock = threading.Lock()
        self._request_redraw: Optional[Callable[[], None]] = request_redraw

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, point: Any) -> None:
        point = Point.coerce(point)
        with self._lock:
            # deque(maxlen=...) drops index 0 when full
            self._points.append(point)
        logger.debug("Appended %s", point)
        self._notify()

    def snapshot(self) -> Tuple[Point, ...]:
        with self._lock:
            return tuple(self._points)

    def as_array(self) -> np.ndarray:
        snap = self.snapshot()
        if not snap:
            return np.empty((0, 2), dtype=float)
        return np.asarray(snap, dtype=float)

    def clear(self) -> None:
        with self._lock:
            self._points.clear()
        self._notify()

    def size(self) -> int:
        with self._lock:
            return len(self._points)

    def __len__(self) -> int:
        return self.size()

    def _notify(self) -> None:
        self.data_updated.emit()
        if self._request_redraw is not None:
            self._request_redraw()
