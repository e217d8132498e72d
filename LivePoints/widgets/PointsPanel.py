# widgets/PointsPanel.py

from typing import Optional, Tuple

import numpy as np
from PyQt5 import QtCore, QtGui, QtWidgets

from LivePoints.CoordinateMapper import CoordinateMapper
from LivePoints.Geometry import LogicalRange, PixelBounds, Point
from LivePoints.PointBuffer import PointBuffer
from LivePoints.PointSink import PointSink

POINT_SIZE = 6
POINT_COLOR = QtGui.QColor(0, 120, 215)
BACKGROUND_COLOR = QtGui.QColor("white")
FRAME_COLOR = QtGui.QColor("lightgray")
TEXT_COLOR = QtGui.QColor("darkgray")


class PointsPanel(QtWidgets.QWidget, PointSink):
    """
    Paints the last N points it was sent. Owns its PointBuffer; the buffer's
    `data_updated` signal schedules the repaint, so `on_point` may be called
    from any thread.
    """

    def __init__(
        self,
        logical_range: LogicalRange,
        capacity: int,
        *,
        width: int = 600,
        height: int = 400,
        padding: int = 20,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        # Build the buffer first so a bad capacity fails before any widget exists.
        buffer = PointBuffer(capacity)
        preferred = PixelBounds(width, height, padding)
        super().__init__(parent)

        self._preferred: PixelBounds = preferred

        self.buffer: PointBuffer = buffer
        self.mapper: CoordinateMapper = CoordinateMapper(logical_range)
        self._padding: int = padding

        self.setAutoFillBackground(True)
        palette = self.palette()
        palette.setColor(QtGui.QPalette.Window, BACKGROUND_COLOR)
        self.setPalette(palette)

        self.buffer.data_updated.connect(self.update)

    def sizeHint(self) -> QtCore.QSize:
        return QtCore.QSize(self._preferred.width, self._preferred.height)

    def on_point(self, point: Point) -> None:
        self.buffer.append(point)

    def set_val(self, x: float, y: float) -> None:
        self.on_point(Point(x, y))

    def set_range(self, logical_range: LogicalRange) -> None:
        self.mapper.set_range(logical_range)
        self.update()

    def get_points(self) -> Tuple[Point, ...]:
        return self.buffer.snapshot()

    def pixel_bounds(self) -> Optional[PixelBounds]:
        if self.width() <= 0 or self.height() <= 0:
            return None
        return PixelBounds(self.width(), self.height(), self._padding)

    def screen_positions(self) -> np.ndarray:
        """Pixel centres of the finite buffered points for the current widget size."""
        bounds = self.pixel_bounds()
        data = self.buffer.as_array()
        if bounds is None or data.size == 0:
            return np.empty((0, 2), dtype=int)
        data = data[np.all(np.isfinite(data), axis=1)]
        return self.mapper.map_points(data, bounds)

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        bounds = self.pixel_bounds()
        if bounds is None:
            return

        painter = QtGui.QPainter(self)
        try:
            painter.setRenderHint(QtGui.QPainter.Antialiasing, True)

            painter.setPen(QtGui.QPen(QtGui.QColor("black"), 1))
            painter.drawRect(0, 0, bounds.width - 1, bounds.height - 1)

            painter.setPen(FRAME_COLOR)
            painter.drawRect(bounds.padding, bounds.padding, bounds.drawable_width, bounds.drawable_height)

            # One snapshot per frame; the buffer lock is not held while painting.
            positions = self.screen_positions()
            painter.setPen(QtCore.Qt.NoPen)
            painter.setBrush(POINT_COLOR)
            for sx, sy in positions:
                painter.drawEllipse(int(sx) - POINT_SIZE // 2, int(sy) - POINT_SIZE // 2, POINT_SIZE, POINT_SIZE)

            painter.setPen(TEXT_COLOR)
            painter.setFont(QtGui.QFont("Monospace", 8))
            painter.drawText(5, 15, f"Range: {self.mapper.range}")
            painter.drawText(5, bounds.height - 5, f"Points: {self.buffer.size()}/{self.buffer.capacity}")
        finally:
            painter.end()
