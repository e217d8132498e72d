# Config.py

from dataclasses import dataclass, fields
from typing import Any, Mapping

from LivePoints.Errors import InvalidConfiguration
from LivePoints.Geometry import LogicalRange, PixelBounds, require_int

# Defaults of the entry dialog
DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 400
DEFAULT_MIN = 0.0
DEFAULT_MAX = 100.0
DEFAULT_CAPACITY = 10
DEFAULT_PADDING = 20


@dataclass(frozen=True)
class PanelConfig:
    pixel_width: int = DEFAULT_WIDTH
    pixel_height: int = DEFAULT_HEIGHT
    min_x: float = DEFAULT_MIN
    max_x: float = DEFAULT_MAX
    min_y: float = DEFAULT_MIN
    max_y: float = DEFAULT_MAX
    capacity: int = DEFAULT_CAPACITY
    padding: int = DEFAULT_PADDING

    def __post_init__(self) -> None:
        require_int("pixel_width", self.pixel_width, 1)
        require_int("pixel_height", self.pixel_height, 1)
        require_int("capacity", self.capacity, 1)
        require_int("padding", self.padding, 0)
        # Range checks (finite, min < max) live on LogicalRange.
        LogicalRange(self.min_x, self.max_x, self.min_y, self.max_y)

    @property
    def logical_range(self) -> LogicalRange:
        return LogicalRange(self.min_x, self.max_x, self.min_y, self.max_y)

    @property
    def pixel_bounds(self) -> PixelBounds:
        return PixelBounds(self.pixel_width, self.pixel_height, self.padding)

    @classmethod
    def from_strings(cls, values: Mapping[str, Any]) -> "PanelConfig":
        """
        Build a config from raw text input, e.g. the fields of an entry dialog.
        Missing keys fall back to the defaults. Unparsable numbers raise
        InvalidConfiguration naming the field.

        Library helper for dialog-based hosts; the bundled CLI parses its
        options with argparse and builds PanelConfig directly.
        """
        kwargs = {}
        for f in fields(cls):
            if f.name not in values:
                continue
            raw = values[f.name]
            text = str(raw).strip()
            try:
                kwargs[f.name] = int(text) if f.type in (int, "int") else float(text)
            except ValueError:
                raise InvalidConfiguration(f"{f.name}: invalid number format {raw!r}", field=f.name) from None
        return cls(**kwargs)
