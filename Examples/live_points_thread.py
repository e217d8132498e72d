import os
import sys
import threading
import time

from PyQt5 import QtWidgets

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from LivePoints import PanelConfig, PointSource
from LivePoints.logging_config import setup_logging
from LivePoints.widgets.PointsWindow import PointsWindow


# Producer thread; the panel repaints on the UI thread via data_updated
def run_update_loop(source, stop_event):
    while not stop_event.is_set():
        source.generate_point()
        time.sleep(0.05)


if __name__ == "__main__":
    setup_logging()
    config = PanelConfig(capacity=50)
    source = PointSource(config.logical_range, seed=0)

    # Standard Qt application
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])

    window = PointsWindow(config, source=source)
    window.show()

    # Start background thread
    stop_event = threading.Event()
    thread = threading.Thread(
        target=run_update_loop,
        args=(source, stop_event),
        daemon=True,
    )
    thread.start()

    # Run Qt event loop
    app.exec()

    # Clean shutdown
    stop_event.set()
    thread.join(timeout=1.0)
