"""Decides whether a tick label fits the data area well enough to be drawn."""

from aligned_date_axis.core.config import LABEL_OVERFLOW_TOLERANCE
from aligned_date_axis.core.edge import Edge
from aligned_date_axis.rendering.text import TextRenderer
from aligned_date_axis.ticks.tick import TextAnchor
from aligned_date_axis.utils.geometry import Point, Rect


def label_within_tolerance(
    label_bounds: Rect,
    data_area: Rect,
    edge: Edge,
    tolerance: float = LABEL_OVERFLOW_TOLERANCE,
) -> bool:
    """Check a label's far end against the far end of the data area.

    Only the end the labels run towards is checked: max x for top/bottom
    axes, max y for left/right axes.

    Args:
        label_bounds: Bounding rectangle of the label as drawn
        data_area: Rectangle the data is plotted in
        edge: Edge the axis is drawn along
        tolerance: Pixels the label may overflow by and still be drawn

    Returns:
        True if the label should be drawn
    """
    if edge.is_top_or_bottom:
        return label_bounds.max_x - tolerance <= data_area.max_x
    # Time runs upward on vertical axes, so shifted labels overflow at min y;
    # only max y is compared and those labels are always drawn.
    return label_bounds.max_y - tolerance <= data_area.max_y


def should_draw(
    text: str,
    anchor: Point,
    font,
    angle: float,
    text_anchor: TextAnchor,
    rotation_anchor: TextAnchor,
    data_area: Rect,
    edge: Edge,
    text_renderer: TextRenderer | None = None,
    tolerance: float = LABEL_OVERFLOW_TOLERANCE,
) -> bool:
    """Measure a label at its anchor and decide whether to draw it."""
    renderer = text_renderer or TextRenderer()
    bounds = renderer.rotated_bounds(text, font, anchor.x, anchor.y, text_anchor, angle, rotation_anchor)
    return label_within_tolerance(bounds, data_area, edge, tolerance)
