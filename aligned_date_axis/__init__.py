"""
aligned-date-axis: Date axis tick label placement for PIL-rendered charts.

Tick labels can sit under their tick or be shifted into the interval the
tick opens, with labels that would overflow the data area hidden.
"""

__version__ = "0.1.0"

from aligned_date_axis.core import (
    AxisConfig,
    AxisEvent,
    AxisRenderState,
    ConfigurationError,
    Edge,
    LabelPositionMode,
)
from aligned_date_axis.axis import DateAxis
from aligned_date_axis.ticks import DateTickUnit, DateTickUnitType, Tick, TickType

__all__ = [
    "AxisConfig",
    "AxisEvent",
    "AxisRenderState",
    "ConfigurationError",
    "DateAxis",
    "DateTickUnit",
    "DateTickUnitType",
    "Edge",
    "LabelPositionMode",
    "Tick",
    "TickType",
    "__version__",
]
