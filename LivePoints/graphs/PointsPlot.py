# graphs/PointsPlot.py

from typing import Any, Optional, Tuple

import numpy as np
import pyqtgraph as pg

from LivePoints.Geometry import LogicalRange, Point
from LivePoints.PointBuffer import PointBuffer
from LivePoints.PointSink import PointSink


class PointsPlot(PointSink):
    """
    pyqtgraph layer showing a PointBuffer as a scatter. The view box is
    pinned to the logical range; pyqtgraph does its own pixel mapping.
    """

    def __init__(
        self,
        logical_range: LogicalRange,
        capacity: int,
        *,
        base_marker_size: int = 6,
        color: str = "#0078d7",
        name: Optional[str] = None,
        z: int = 10,
    ) -> None:
        self.buffer: PointBuffer = PointBuffer(capacity)
        self._range: LogicalRange = logical_range
        self._base_marker_size = max(1, base_marker_size)
        self.color = color
        self.name = name
        self._z = z

        self._plot_item = None
        self._view_box = None
        self._scatter = None

        self.buffer.data_updated.connect(self._update_plot)
        self._connected = True

    def on_point(self, point: Point) -> None:
        self.buffer.append(point)

    def add_to(self, plot_item: Any, view_box: Any) -> None:
        self._plot_item = plot_item
        self._view_box = view_box
        self._scatter = pg.ScatterPlotItem(pen=None, size=self._base_marker_size)
        self._scatter.setZValue(self._z)
        self._plot_item.addItem(self._scatter)
        self._apply_view_range()
        self._update_plot()

    def remove_from(self, plot_item: Any) -> None:
        if self._scatter is not None and self._scatter.scene() is not None:
            plot_item.removeItem(self._scatter)
        self._scatter = None
        self._plot_item = None
        self._view_box = None

    def set_range(self, logical_range: LogicalRange) -> None:
        self._range = logical_range
        self._apply_view_range()

    def bounds(self) -> Tuple[float, float, float, float]:
        r = self._range
        return (r.min_x, r.max_x, r.min_y, r.max_y)

    def close(self) -> None:
        if self._connected:
            self.buffer.data_updated.disconnect(self._update_plot)
            self._connected = False

    def _apply_view_range(self) -> None:
        if self._view_box is None:
            return
        x0, x1, y0, y1 = self.bounds()
        self._view_box.setRange(xRange=(x0, x1), yRange=(y0, y1), padding=0)
        self._view_box.disableAutoRange()

    def _update_plot(self) -> None:
        if self._scatter is None:
            return
        data = self.buffer.as_array()
        if data.size:
            data = data[np.all(np.isfinite(data), axis=1)]
        self._scatter.setData(
            x=data[:, 0],
            y=data[:, 1],
            brush=self.color,
            size=self._base_marker_size,
        )
