"""Core modules for aligned-date-axis: configuration, state, events, and errors."""

from aligned_date_axis.core.config import DEFAULTS, LABEL_OVERFLOW_TOLERANCE, AxisConfig, LabelPositionMode
from aligned_date_axis.core.edge import Edge
from aligned_date_axis.core.errors import ConfigurationError
from aligned_date_axis.core.events import AxisEvent, EventBus
from aligned_date_axis.core.state import AxisRenderState, LabelPlacement

__all__ = [
    "AxisConfig",
    "AxisEvent",
    "AxisRenderState",
    "ConfigurationError",
    "DEFAULTS",
    "Edge",
    "EventBus",
    "LABEL_OVERFLOW_TOLERANCE",
    "LabelPlacement",
    "LabelPositionMode",
]
