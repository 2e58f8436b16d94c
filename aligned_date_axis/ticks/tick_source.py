"""Date tick generation and label formatting.

Produces the chronological tick sequence for the visible time range: major
ticks on tick-unit boundaries, optional evenly spaced minor ticks between
them, and label text/anchors suited to the edge the axis is drawn on.
"""

import math
from typing import Optional

import numpy as np
import pandas as pd

from aligned_date_axis.core.edge import Edge
from aligned_date_axis.core.errors import ConfigurationError
from aligned_date_axis.ticks.tick import TextAnchor, Tick, TickType
from aligned_date_axis.ticks.tick_unit import DateTickUnit, DateTickUnitType

# Refuse to generate absurd numbers of ticks for a too-fine unit
MAX_MAJOR_TICKS = 2000

DATE_FORMATS = {
    DateTickUnitType.YEAR: "%Y",
    DateTickUnitType.MONTH: "%b-%Y",
    DateTickUnitType.DAY: "%d-%b",
    DateTickUnitType.HOUR: "%d %H:%M",
    DateTickUnitType.MINUTE: "%H:%M",
    DateTickUnitType.SECOND: "%H:%M:%S",
    DateTickUnitType.MILLISECOND: "%H:%M:%S.%f",
}


def format_tick_label(date: pd.Timestamp, unit: DateTickUnit, date_format: Optional[str] = None) -> str:
    """Format a tick date for display.

    Automatically selects a pattern based on the tick unit unless one is given.

    Args:
        date: The tick date to format
        unit: Tick unit the axis steps by
        date_format: strftime pattern overriding the per-unit default

    Returns:
        Formatted string for the tick label
    """
    pattern = date_format or DATE_FORMATS[unit.unit]
    text = date.strftime(pattern)
    if pattern.endswith("%f"):
        # microseconds -> milliseconds
        text = text[:-3]
    return text


def label_anchors(edge: Edge, vertical_labels: bool) -> tuple[TextAnchor, TextAnchor, float]:
    """Default text anchor, rotation anchor and angle for labels on an edge.

    Args:
        edge: Edge the axis is drawn along
        vertical_labels: If True, labels are rotated a quarter turn

    Returns:
        Tuple of (text_anchor, rotation_anchor, angle in radians)
    """
    if edge.is_top_or_bottom:
        if vertical_labels:
            angle = math.pi / 2 if edge is Edge.TOP else -math.pi / 2
            return TextAnchor.CENTER_RIGHT, TextAnchor.CENTER_RIGHT, angle
        if edge is Edge.TOP:
            return TextAnchor.BOTTOM_CENTER, TextAnchor.BOTTOM_CENTER, 0.0
        return TextAnchor.TOP_CENTER, TextAnchor.TOP_CENTER, 0.0

    if vertical_labels:
        angle = -math.pi / 2 if edge is Edge.LEFT else math.pi / 2
        return TextAnchor.BOTTOM_CENTER, TextAnchor.BOTTOM_CENTER, angle
    if edge is Edge.LEFT:
        return TextAnchor.CENTER_RIGHT, TextAnchor.CENTER_RIGHT, 0.0
    return TextAnchor.CENTER_LEFT, TextAnchor.CENTER_LEFT, 0.0


def _to_ms(date: pd.Timestamp) -> float:
    return date.value / 1_000_000


class DateTickSource:
    """Generates date ticks for a visible time range.

    Usage:
        source = DateTickSource(DateTickUnit(DateTickUnitType.DAY), time_zone="Europe/Prague")
        ticks = source.refresh_ticks(lower_ms, upper_ms, Edge.BOTTOM)
    """

    def __init__(
        self,
        tick_unit: DateTickUnit,
        time_zone: str = "UTC",
        date_format: Optional[str] = None,
        minor_tick_count: int = 0,
        vertical_labels: bool = False,
    ):
        """Initialize the tick source.

        Args:
            tick_unit: Step between major ticks
            time_zone: Time zone tick boundaries and labels are computed in
            date_format: strftime pattern for labels (default depends on unit)
            minor_tick_count: Number of sub-intervals between major ticks;
                0 or 1 disables minor ticks
            vertical_labels: Rotate labels a quarter turn
        """
        if minor_tick_count < 0:
            raise ConfigurationError(f"minor_tick_count must not be negative, got {minor_tick_count}")
        self.tick_unit = tick_unit
        self.time_zone = time_zone
        self.date_format = date_format
        self.minor_tick_count = minor_tick_count
        self.vertical_labels = vertical_labels

    def major_dates(self, lower: float, upper: float) -> list[pd.Timestamp]:
        """Tick-unit boundaries inside [lower, upper], in chronological order."""
        lower_date = pd.Timestamp(lower, unit="ms", tz="UTC").tz_convert(self.time_zone)
        date = self.tick_unit.truncate(lower_date, self.time_zone)
        if _to_ms(date) < lower:
            date = self.tick_unit.add_to_date(date, self.time_zone)

        dates = []
        while _to_ms(date) <= upper:
            if len(dates) >= MAX_MAJOR_TICKS:
                raise ConfigurationError(
                    f"Tick unit {self.tick_unit} produces more than {MAX_MAJOR_TICKS} ticks for the range"
                )
            dates.append(date)
            date = self.tick_unit.add_to_date(date, self.time_zone)
        return dates

    def _minor_values(self, start: float, end: float) -> np.ndarray:
        return np.linspace(start, end, self.minor_tick_count + 1)[1:-1]

    def refresh_ticks(self, lower: float, upper: float, edge: Edge) -> list[Tick]:
        """Generate ticks for the visible range.

        Args:
            lower: Range start in epoch milliseconds
            upper: Range end in epoch milliseconds
            edge: Edge the axis is drawn along (selects label anchors)

        Returns:
            Ticks sorted by value, majors and minors interleaved
        """
        edge = Edge.parse(edge)
        text_anchor, rotation_anchor, angle = label_anchors(edge, self.vertical_labels)
        majors = self.major_dates(lower, upper)

        ticks = []
        for date in majors:
            ticks.append(
                Tick.from_date(
                    date,
                    text=format_tick_label(date, self.tick_unit, self.date_format),
                    tick_type=TickType.MAJOR,
                    text_anchor=text_anchor,
                    rotation_anchor=rotation_anchor,
                    angle=angle,
                )
            )

        if self.minor_tick_count > 1:
            if majors:
                bounds = [self.tick_unit.previous_date(majors[0], self.time_zone)] + majors
                bounds.append(self.tick_unit.add_to_date(majors[-1], self.time_zone))
            else:
                start = self.tick_unit.truncate(
                    pd.Timestamp(lower, unit="ms", tz="UTC"), self.time_zone
                )
                bounds = [start, self.tick_unit.add_to_date(start, self.time_zone)]
            for prev, nxt in zip(bounds, bounds[1:]):
                for value in self._minor_values(_to_ms(prev), _to_ms(nxt)):
                    if lower <= value <= upper:
                        ticks.append(
                            Tick(
                                value=float(value),
                                tick_type=TickType.MINOR,
                                text_anchor=text_anchor,
                                rotation_anchor=rotation_anchor,
                                angle=angle,
                            )
                        )

        ticks.sort(key=lambda tick: tick.value)
        return ticks
