"""Configuration constants, label modes, and per-axis settings."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional

import pandas as pd

from aligned_date_axis.core.errors import ConfigurationError
from aligned_date_axis.ticks.tick_unit import DateTickUnit
from aligned_date_axis.utils.geometry import RectangleInsets

# A label may overflow the data area by this many pixels and still be drawn.
# Larger overflows hide the label; this mostly affects the last tick's label
# once it has been shifted into the middle of its interval.
LABEL_OVERFLOW_TOLERANCE = 5.0

# Gap between the cursor and the tick label anchor, added to the label insets
LABEL_ANCHOR_GAP = 2.0


class LabelPositionMode(Enum):
    """Where tick labels sit relative to their tick."""

    INTERVAL_START = "interval_start"  # under/beside the tick itself
    INTERVAL_MIDDLE = "interval_middle"  # shifted towards the next tick

    @classmethod
    def parse(cls, value) -> "LabelPositionMode":
        """Coerce a mode or its name ("interval_middle", "INTERVAL_START") to a mode."""
        if isinstance(value, LabelPositionMode):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigurationError(f"Unknown label position mode: {value!r}") from None


# Default display settings
class DEFAULTS:
    """Default configuration values."""

    # Image dimensions
    PLOT_WIDTH = 800
    PLOT_HEIGHT = 400

    # Margins
    MARGIN_LEFT = 80
    MARGIN_RIGHT = 40
    MARGIN_TOP = 40
    MARGIN_BOTTOM = 60

    # Labels
    LABEL_POSITION = LabelPositionMode.INTERVAL_START
    TICK_LABEL_FONT_SIZE = 12
    TICK_LABEL_INSETS = RectangleInsets(top=2.0, left=4.0, bottom=2.0, right=4.0)
    TICK_LABELS_VISIBLE = True
    VERTICAL_TICK_LABELS = False
    TIME_ZONE = "UTC"

    # Tick marks (lengths in pixels)
    TICK_MARKS_VISIBLE = True
    MINOR_TICK_MARKS_VISIBLE = False
    TICK_MARK_INSIDE_LENGTH = 0.0
    TICK_MARK_OUTSIDE_LENGTH = 2.0
    MINOR_TICK_MARK_INSIDE_LENGTH = 0.0
    MINOR_TICK_MARK_OUTSIDE_LENGTH = 2.0
    TICK_MARK_WIDTH = 1

    # Axis line
    AXIS_LINE_VISIBLE = True
    AXIS_LINE_WIDTH = 1

    # Colors (RGBA tuples)
    BACKGROUND_COLOR = (255, 255, 255, 255)
    AXIS_COLOR = (136, 136, 136, 255)
    TICK_COLOR = (136, 136, 136, 255)
    LABEL_COLOR = (64, 64, 64, 255)
    DATA_AREA_COLOR = (245, 245, 245, 255)


@dataclass
class AxisConfig:
    """Style and behaviour settings of one date axis.

    Set before a render pass and read by it; changes must not overlap with a
    pass in flight.
    """

    label_position: LabelPositionMode = DEFAULTS.LABEL_POSITION
    tick_unit: Optional[DateTickUnit] = None
    time_zone: str = DEFAULTS.TIME_ZONE

    tick_labels_visible: bool = DEFAULTS.TICK_LABELS_VISIBLE
    vertical_tick_labels: bool = DEFAULTS.VERTICAL_TICK_LABELS
    tick_label_font: Any = None  # PIL font; None = get_font(tick_label_font_size)
    tick_label_font_size: int = DEFAULTS.TICK_LABEL_FONT_SIZE
    tick_label_insets: RectangleInsets = field(default_factory=lambda: DEFAULTS.TICK_LABEL_INSETS)
    label_overflow_tolerance: float = LABEL_OVERFLOW_TOLERANCE

    tick_marks_visible: bool = DEFAULTS.TICK_MARKS_VISIBLE
    minor_tick_marks_visible: bool = DEFAULTS.MINOR_TICK_MARKS_VISIBLE
    tick_mark_inside_length: float = DEFAULTS.TICK_MARK_INSIDE_LENGTH
    tick_mark_outside_length: float = DEFAULTS.TICK_MARK_OUTSIDE_LENGTH
    minor_tick_mark_inside_length: float = DEFAULTS.MINOR_TICK_MARK_INSIDE_LENGTH
    minor_tick_mark_outside_length: float = DEFAULTS.MINOR_TICK_MARK_OUTSIDE_LENGTH
    tick_mark_width: int = DEFAULTS.TICK_MARK_WIDTH

    axis_line_visible: bool = DEFAULTS.AXIS_LINE_VISIBLE
    axis_line_width: int = DEFAULTS.AXIS_LINE_WIDTH

    axis_color: tuple = DEFAULTS.AXIS_COLOR
    tick_color: tuple = DEFAULTS.TICK_COLOR
    label_color: tuple = DEFAULTS.LABEL_COLOR

    def __post_init__(self):
        self.label_position = LabelPositionMode.parse(self.label_position)
        self.validate()

    def validate(self) -> None:
        """Check the settings are consistent.

        Raises:
            ConfigurationError: If a setting is out of range or settings conflict
        """
        if self.label_position is LabelPositionMode.INTERVAL_MIDDLE and self.tick_unit is None:
            raise ConfigurationError("INTERVAL_MIDDLE label position requires a tick unit")
        try:
            pd.Timestamp(0, tz=self.time_zone)
        except (KeyError, ValueError, TypeError) as e:
            raise ConfigurationError(f"Unknown time zone: {self.time_zone!r}") from e
        lengths = {
            "tick_mark_inside_length": self.tick_mark_inside_length,
            "tick_mark_outside_length": self.tick_mark_outside_length,
            "minor_tick_mark_inside_length": self.minor_tick_mark_inside_length,
            "minor_tick_mark_outside_length": self.minor_tick_mark_outside_length,
        }
        for name, value in lengths.items():
            if value < 0:
                raise ConfigurationError(f"{name} must not be negative, got {value}")
        if self.label_overflow_tolerance < 0:
            raise ConfigurationError(
                f"label_overflow_tolerance must not be negative, got {self.label_overflow_tolerance}"
            )
        if self.tick_label_font_size <= 0:
            raise ConfigurationError(f"tick_label_font_size must be positive, got {self.tick_label_font_size}")

    def updated(self, **changes) -> "AxisConfig":
        """Return a validated copy with the given settings changed."""
        return replace(self, **changes)
