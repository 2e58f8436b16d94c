"""Rendering modules for date axes: anchors, label filtering, text, and the render pass."""

from aligned_date_axis.rendering.anchor import (
    IntervalMiddleAnchor,
    IntervalStartAnchor,
    anchor_strategy,
    compute_anchor,
)
from aligned_date_axis.rendering.axis_renderer import DateAxisRenderer
from aligned_date_axis.rendering.label_filter import label_within_tolerance, should_draw
from aligned_date_axis.rendering.text import TextMetrics, TextRenderer, get_font

__all__ = [
    "DateAxisRenderer",
    "IntervalMiddleAnchor",
    "IntervalStartAnchor",
    "TextMetrics",
    "TextRenderer",
    "anchor_strategy",
    "compute_anchor",
    "get_font",
    "label_within_tolerance",
    "should_draw",
]
