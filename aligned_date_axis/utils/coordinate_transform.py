"""Coordinate transformation utilities for time value <-> pixel conversion."""

import numpy as np

from aligned_date_axis.core.edge import Edge
from aligned_date_axis.core.errors import ConfigurationError
from aligned_date_axis.utils.geometry import Rect


class CoordinateTransform:
    """Maps time values (epoch milliseconds) onto a data area edge.

    Handles transformation between:
    - Time values along the axis range
    - Screen pixel coordinates inside the data area

    Takes into account:
    - Which edge the axis is drawn along (horizontal vs vertical)
    - Screen y growing downward (later times are drawn higher up)
    - Inverted axes
    """

    def __init__(self, lower: float, upper: float, inverted: bool = False):
        """Initialize transformer.

        Args:
            lower: Lower bound of the visible range in epoch milliseconds
            upper: Upper bound of the visible range in epoch milliseconds
            inverted: If True, the range runs from the far end back

        Raises:
            ConfigurationError: If the range has zero or negative width
        """
        if not upper > lower:
            raise ConfigurationError(f"Axis range must have positive width, got [{lower}, {upper}]")
        self.lower = float(lower)
        self.upper = float(upper)
        self.inverted = inverted

    @property
    def length(self) -> float:
        """Width of the visible range in milliseconds."""
        return self.upper - self.lower

    def _pixel_span(self, data_area: Rect, edge: Edge) -> tuple[float, float]:
        if edge.is_top_or_bottom:
            start, end = data_area.x, data_area.max_x
        elif edge.is_left_or_right:
            start, end = data_area.max_y, data_area.y
        else:
            raise ConfigurationError(f"Unsupported axis edge: {edge!r}")
        if self.inverted:
            return end, start
        return start, end

    def value_to_pixel(self, value: float, data_area: Rect, edge: Edge) -> float:
        """Convert a time value to a pixel coordinate along the edge.

        Args:
            value: Time value in epoch milliseconds
            data_area: Rectangle the data is plotted in
            edge: Edge the axis is drawn along

        Returns:
            x coordinate for top/bottom edges, y coordinate for left/right edges
        """
        start, end = self._pixel_span(data_area, edge)
        return start + (value - self.lower) / self.length * (end - start)

    def values_to_pixels(self, values, data_area: Rect, edge: Edge) -> np.ndarray:
        """Vectorised value_to_pixel for a sequence of time values."""
        start, end = self._pixel_span(data_area, edge)
        values = np.asarray(values, dtype=float)
        return start + (values - self.lower) / self.length * (end - start)

    def pixel_to_value(self, pixel: float, data_area: Rect, edge: Edge) -> float:
        """Convert a pixel coordinate along the edge back to a time value.

        Args:
            pixel: x coordinate (top/bottom edges) or y coordinate (left/right)
            data_area: Rectangle the data is plotted in
            edge: Edge the axis is drawn along

        Returns:
            Time value in epoch milliseconds
        """
        start, end = self._pixel_span(data_area, edge)
        return self.lower + (pixel - start) / (end - start) * self.length
