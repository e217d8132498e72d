# widgets/PointsWindow.py

import logging
from typing import Any, Optional

import pyqtgraph as pg
from PyQt5 import QtCore, QtWidgets

from LivePoints.Config import PanelConfig
from LivePoints.Geometry import LogicalRange
from LivePoints.PointSource import PointSource
from LivePoints.graphs.PointsPlot import PointsPlot
from LivePoints.widgets.PointsPanel import PointsPanel

logger = logging.getLogger(__name__)

VIEW_PANEL = "panel"
VIEW_PLOT = "plot"

START_TEXT = "Start auto-generation"
STOP_TEXT = "Stop auto-generation"


class PointsWindow(QtWidgets.QWidget):
    """
    Host window: one view subscribed to a PointSource, a button that emits a
    single point and a toggle that drives the source from a QTimer.
    """

    def __init__(
        self,
        config: PanelConfig,
        *,
        source: Optional[PointSource] = None,
        interval_ms: int = 1000,
        view: str = VIEW_PANEL,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Points Panel")
        self.config = config
        self.source: PointSource = source if source is not None else PointSource(config.logical_range)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        if view == VIEW_PANEL:
            self.view: Any = PointsPanel(
                config.logical_range,
                config.capacity,
                width=config.pixel_width,
                height=config.pixel_height,
                padding=config.padding,
                parent=self,
            )
            layout.addWidget(self.view, 1)
        elif view == VIEW_PLOT:
            self.plot_widget = pg.PlotWidget()
            self.plot_widget.setMinimumSize(config.pixel_width, config.pixel_height)
            self.view = PointsPlot(config.logical_range, config.capacity, name="points")
            self.view.add_to(self.plot_widget.getPlotItem(), self.plot_widget.getViewBox())
            layout.addWidget(self.plot_widget, 1)
        else:
            raise ValueError(f"Unknown view {view!r}; expected {VIEW_PANEL!r} or {VIEW_PLOT!r}")

        self.source.subscribe(self.view)

        controls = QtWidgets.QWidget(self)
        hbox = QtWidgets.QHBoxLayout(controls)
        self.generate_button = QtWidgets.QPushButton("Generate point", controls)
        self.generate_button.clicked.connect(lambda _=False: self.source.generate_point())
        hbox.addWidget(self.generate_button)

        self.auto_button = QtWidgets.QPushButton(START_TEXT, controls)
        self.auto_button.setCheckable(True)
        self.auto_button.toggled.connect(self.set_auto_generate)
        hbox.addWidget(self.auto_button)
        layout.addWidget(controls)

        self.timer = QtCore.QTimer(self)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self.source.generate_point)

    def set_auto_generate(self, enabled: bool) -> None:
        if self.auto_button.isChecked() != enabled:
            # toggled re-enters this method with the new state
            self.auto_button.setChecked(enabled)
            return
        if enabled:
            self.timer.start()
            self.auto_button.setText(STOP_TEXT)
        else:
            self.timer.stop()
            self.auto_button.setText(START_TEXT)
        logger.info("Auto-generation %s", "started" if enabled else "stopped")

    def set_range(self, logical_range: LogicalRange) -> None:
        # New points come from the new range; buffered points keep their values
        # and are redrawn against it.
        self.source.set_range(logical_range)
        self.view.set_range(logical_range)

    def closeEvent(self, event: Any) -> None:
        self.timer.stop()
        self.source.unsubscribe(self.view)
        if isinstance(self.view, PointsPlot):
            self.view.close()
        super().closeEvent(event)
