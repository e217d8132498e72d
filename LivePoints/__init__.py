from .Errors import InvalidConfiguration
from .Geometry import LogicalRange, PixelBounds, Point
from .CoordinateMapper import CoordinateMapper, map_points, to_screen, to_screen_x, to_screen_y
from .PointBuffer import PointBuffer
from .PointSink import BufferedSink, PointSink
from .PointSource import PointSource
from .Config import PanelConfig

__all__ = [
    "InvalidConfiguration",
    "Point",
    "LogicalRange",
    "PixelBounds",
    "CoordinateMapper",
    "to_screen_x",
    "to_screen_y",
    "to_screen",
    "map_points",
    "PointBuffer",
    "PointSink",
    "BufferedSink",
    "PointSource",
    "PanelConfig",
]
