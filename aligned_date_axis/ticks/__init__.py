"""Date ticks: tick values, calendar tick units, and tick generation."""

from aligned_date_axis.ticks.tick import TextAnchor, Tick, TickType
from aligned_date_axis.ticks.tick_unit import STANDARD_TICK_UNITS, DateTickUnit, DateTickUnitType, select_tick_unit
from aligned_date_axis.ticks.tick_source import DateTickSource, format_tick_label, label_anchors

__all__ = [
    "DateTickSource",
    "DateTickUnit",
    "DateTickUnitType",
    "STANDARD_TICK_UNITS",
    "TextAnchor",
    "Tick",
    "TickType",
    "format_tick_label",
    "label_anchors",
    "select_tick_unit",
]
