"""Tick label anchor calculation.

The label position mode picks one of two anchor strategies:

- IntervalStartAnchor puts the label right under (or beside) its tick, the
  way a conventional date axis does.
- IntervalMiddleAnchor starts from the same point and moves it along the
  axis, a quarter of the way towards the next tick, so the label reads as
  belonging to the interval the tick opens.

Only the coordinate along the axis is ever shifted; the coordinate across the
axis always comes from the baseline calculation.
"""

from typing import Optional

from aligned_date_axis.core.config import LABEL_ANCHOR_GAP, LabelPositionMode
from aligned_date_axis.core.edge import Edge
from aligned_date_axis.core.errors import ConfigurationError
from aligned_date_axis.ticks.tick import Tick
from aligned_date_axis.ticks.tick_unit import DateTickUnit
from aligned_date_axis.utils.coordinate_transform import CoordinateTransform
from aligned_date_axis.utils.geometry import Point, Rect, RectangleInsets

# Fraction of the distance to the next tick a mid-interval label moves by
MID_INTERVAL_SHIFT_FRACTION = 0.25


class IntervalStartAnchor:
    """Places labels directly under/beside their tick."""

    def __init__(self, transform: CoordinateTransform, insets: RectangleInsets):
        self.transform = transform
        self.insets = insets

    def anchor(self, tick: Tick, cursor: float, data_area: Rect, edge: Edge) -> Point:
        """Compute the label anchor for a tick.

        Args:
            tick: Tick whose label is placed
            cursor: Current distance into the margin
            data_area: Rectangle the data is plotted in
            edge: Edge the axis is drawn along

        Returns:
            Anchor point in screen coordinates
        """
        v = self.transform.value_to_pixel(tick.value, data_area, edge)
        if edge is Edge.TOP:
            return Point(v, cursor - self.insets.bottom - LABEL_ANCHOR_GAP)
        if edge is Edge.BOTTOM:
            return Point(v, cursor + self.insets.top + LABEL_ANCHOR_GAP)
        if edge is Edge.LEFT:
            return Point(cursor - self.insets.left - LABEL_ANCHOR_GAP, v)
        if edge is Edge.RIGHT:
            return Point(cursor + self.insets.right + LABEL_ANCHOR_GAP, v)
        raise ConfigurationError(f"Unsupported axis edge: {edge!r}")


class IntervalMiddleAnchor(IntervalStartAnchor):
    """Shifts labels a quarter of the way towards the next tick."""

    def __init__(
        self,
        transform: CoordinateTransform,
        insets: RectangleInsets,
        tick_unit: DateTickUnit,
        time_zone: Optional[str] = None,
    ):
        super().__init__(transform, insets)
        if tick_unit is None:
            raise ConfigurationError("INTERVAL_MIDDLE label position requires a tick unit")
        self.tick_unit = tick_unit
        self.time_zone = time_zone

    def anchor(self, tick: Tick, cursor: float, data_area: Rect, edge: Edge) -> Point:
        base = super().anchor(tick, cursor, data_area, edge)

        # The next tick is always derived from the calendar, even past the
        # visible range, so the last label is shifted like the others.
        tick_date = tick.resolve_date(self.time_zone)
        next_date = self.tick_unit.add_to_date(tick_date, self.time_zone)
        next_pixel = self.transform.value_to_pixel(next_date.value / 1_000_000, data_area, edge)

        if edge.is_top_or_bottom:
            shift = (next_pixel - base.x) * MID_INTERVAL_SHIFT_FRACTION
            return Point(base.x + shift, base.y)
        shift = (next_pixel - base.y) * MID_INTERVAL_SHIFT_FRACTION
        return Point(base.x, base.y + shift)


def anchor_strategy(
    mode: LabelPositionMode,
    transform: CoordinateTransform,
    insets: RectangleInsets,
    tick_unit: Optional[DateTickUnit] = None,
    time_zone: Optional[str] = None,
) -> IntervalStartAnchor:
    """Build the anchor strategy for a label position mode.

    Raises:
        ConfigurationError: If INTERVAL_MIDDLE is requested without a tick unit
    """
    mode = LabelPositionMode.parse(mode)
    if mode is LabelPositionMode.INTERVAL_MIDDLE:
        return IntervalMiddleAnchor(transform, insets, tick_unit, time_zone)
    return IntervalStartAnchor(transform, insets)


def compute_anchor(
    tick: Tick,
    cursor: float,
    data_area: Rect,
    edge: Edge,
    mode: LabelPositionMode,
    tick_unit: Optional[DateTickUnit],
    time_zone: Optional[str],
    transform: CoordinateTransform,
    insets: RectangleInsets = RectangleInsets(),
) -> Point:
    """One-shot anchor calculation for a single tick."""
    strategy = anchor_strategy(mode, transform, insets, tick_unit, time_zone)
    return strategy.anchor(tick, cursor, data_area, Edge.parse(edge))
