# app.py

import argparse
import logging
import sys
from typing import List, Optional

from PyQt5 import QtWidgets

from LivePoints.Config import (
    DEFAULT_CAPACITY,
    DEFAULT_HEIGHT,
    DEFAULT_MAX,
    DEFAULT_MIN,
    DEFAULT_PADDING,
    DEFAULT_WIDTH,
    PanelConfig,
)
from LivePoints.Errors import InvalidConfiguration
from LivePoints.PointSource import PointSource
from LivePoints.logging_config import setup_logging
from LivePoints.widgets.PointsWindow import VIEW_PANEL, VIEW_PLOT, PointsWindow

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="livepoints",
        description="Show the last N randomly generated points on a fixed-size panel.",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="panel width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="panel height in pixels")
    parser.add_argument("--min-x", type=float, default=DEFAULT_MIN)
    parser.add_argument("--max-x", type=float, default=DEFAULT_MAX)
    parser.add_argument("--min-y", type=float, default=DEFAULT_MIN)
    parser.add_argument("--max-y", type=float, default=DEFAULT_MAX)
    parser.add_argument("--points", type=int, default=DEFAULT_CAPACITY, help="number of points kept (N)")
    parser.add_argument("--padding", type=int, default=DEFAULT_PADDING, help="margin in pixels")
    parser.add_argument("--interval-ms", type=int, default=1000, help="auto-generation period")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible points")
    parser.add_argument("--auto", action="store_true", help="start auto-generation immediately")
    parser.add_argument("--view", choices=[VIEW_PANEL, VIEW_PLOT], default=VIEW_PANEL)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="also log to this file, rotated at 1 MB")
    return parser


def config_from_args(args: argparse.Namespace) -> PanelConfig:
    return PanelConfig(
        pixel_width=args.width,
        pixel_height=args.height,
        min_x=args.min_x,
        max_x=args.max_x,
        min_y=args.min_y,
        max_y=args.max_y,
        capacity=args.points,
        padding=args.padding,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        config = config_from_args(args)
        if args.interval_ms <= 0:
            raise InvalidConfiguration(f"interval_ms must be positive, got {args.interval_ms}", field="interval_ms")
    except InvalidConfiguration as e:
        logger.error("Invalid configuration: %s", e)
        parser.error(str(e))

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv[:1])

    source = PointSource(config.logical_range, seed=args.seed)
    window = PointsWindow(config, source=source, interval_ms=args.interval_ms, view=args.view)
    window.show()
    if args.auto:
        window.set_auto_generate(True)
    logger.info("Points panel started: %dx%d, %s, N=%d",
                config.pixel_width, config.pixel_height, config.logical_range, config.capacity)

    return app.exec()
