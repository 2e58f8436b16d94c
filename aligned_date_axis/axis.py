"""Host-facing date axis: range, settings, change events, and drawing."""

from typing import Optional

import pandas as pd
from PIL import Image
from loguru import logger

from aligned_date_axis.core.config import AxisConfig, LabelPositionMode
from aligned_date_axis.core.edge import Edge
from aligned_date_axis.core.errors import ConfigurationError
from aligned_date_axis.core.events import AxisEvent, EventBus
from aligned_date_axis.core.state import AxisRenderState
from aligned_date_axis.rendering.axis_renderer import DateAxisRenderer
from aligned_date_axis.rendering.text import TextRenderer
from aligned_date_axis.ticks.tick import Tick
from aligned_date_axis.ticks.tick_source import DateTickSource
from aligned_date_axis.ticks.tick_unit import DateTickUnit, select_tick_unit
from aligned_date_axis.utils.coordinate_transform import CoordinateTransform
from aligned_date_axis.utils.geometry import Rect


def to_millis(value, time_zone: Optional[str] = None) -> float:
    """Convert a timestamp, datetime, date string or epoch-ms number to epoch ms.

    Naive timestamps are read as wall-clock time in time_zone (default UTC).
    """
    if isinstance(value, (int, float)):
        return float(value)
    ts = pd.Timestamp(value)
    if ts.tzinfo is None:
        ts = ts.tz_localize(time_zone or "UTC", ambiguous=True, nonexistent="shift_forward")
    return ts.value / 1_000_000


def _check_range(lower: float, upper: float) -> None:
    if not upper > lower:
        raise ConfigurationError(f"Axis range end must be after its start, got [{lower}, {upper}]")


class DateAxis:
    """A date axis whose tick labels sit at, or between, their ticks.

    Settings are changed through the setters (or configure()), which validate
    the new configuration and emit AxisEvent.AXIS_CHANGED so the host can
    redraw. Settings must not change while draw() is running.

    Example usage:
        axis = DateAxis("2024-01-01", "2024-02-01", label_position=LabelPositionMode.INTERVAL_MIDDLE,
                        tick_unit=DateTickUnit(DateTickUnitType.DAY, 7))
        axis.events.subscribe(AxisEvent.AXIS_CHANGED, lambda **kw: chart.redraw())
        state = axis.draw(canvas, cursor=data_area.max_y, data_area=data_area, edge=Edge.BOTTOM)
    """

    def __init__(
        self,
        lower,
        upper,
        config: Optional[AxisConfig] = None,
        inverted: bool = False,
        date_format: Optional[str] = None,
        minor_tick_count: int = 0,
        text_renderer: Optional[TextRenderer] = None,
        **settings,
    ):
        """Initialize the axis.

        Args:
            lower: Start of the visible range (timestamp, string or epoch ms)
            upper: End of the visible range
            config: Axis settings; individual settings may also be passed as
                keyword arguments and override those in config
            inverted: Run the axis from the far end back
            date_format: strftime pattern for labels (default depends on unit)
            minor_tick_count: Sub-intervals between major ticks (0 = none)
            text_renderer: Label measuring/drawing backend

        Raises:
            ConfigurationError: If the range or settings are invalid
        """
        config = config or AxisConfig()
        self._config = config.updated(**settings) if settings else config
        self._lower = to_millis(lower, self._config.time_zone)
        self._upper = to_millis(upper, self._config.time_zone)
        self._inverted = inverted
        _check_range(self._lower, self._upper)
        self.date_format = date_format
        self.minor_tick_count = minor_tick_count
        self.text_renderer = text_renderer or TextRenderer()
        self.events = EventBus()

    # ========== CONFIGURATION ==========

    @property
    def config(self) -> AxisConfig:
        return self._config

    def configure(self, **changes) -> None:
        """Change one or more settings at once.

        Raises:
            ConfigurationError: If the resulting configuration is invalid;
                the axis keeps its previous settings
        """
        self._config = self._config.updated(**changes)
        logger.debug(f"Axis settings changed: {sorted(changes)}")
        self.events.emit(AxisEvent.AXIS_CHANGED, axis=self, changes=changes)

    @property
    def label_position(self) -> LabelPositionMode:
        return self._config.label_position

    @label_position.setter
    def label_position(self, value) -> None:
        self.configure(label_position=LabelPositionMode.parse(value))

    @property
    def tick_unit(self) -> Optional[DateTickUnit]:
        return self._config.tick_unit

    @tick_unit.setter
    def tick_unit(self, value: Optional[DateTickUnit]) -> None:
        self.configure(tick_unit=value)

    @property
    def time_zone(self) -> str:
        return self._config.time_zone

    @time_zone.setter
    def time_zone(self, value: str) -> None:
        self.configure(time_zone=value)

    # ========== RANGE ==========

    @property
    def range(self) -> tuple[float, float]:
        """Visible range as (lower, upper) epoch milliseconds."""
        return self._lower, self._upper

    def set_range(self, lower, upper) -> None:
        """Change the visible time range.

        Raises:
            ConfigurationError: If upper is not after lower
        """
        lower, upper = to_millis(lower, self.time_zone), to_millis(upper, self.time_zone)
        _check_range(lower, upper)
        self._lower, self._upper = lower, upper
        self.events.emit(AxisEvent.RANGE_CHANGED, axis=self, lower=lower, upper=upper)

    def transform(self) -> CoordinateTransform:
        return CoordinateTransform(self._lower, self._upper, self._inverted)

    # ========== TICKS & RENDERING ==========

    def effective_tick_unit(self) -> DateTickUnit:
        """The configured tick unit, or one picked to suit the visible range."""
        if self._config.tick_unit is not None:
            return self._config.tick_unit
        return select_tick_unit(self._upper - self._lower)

    def refresh_ticks(self, edge: Edge) -> list[Tick]:
        """Generate the ticks for the visible range."""
        source = DateTickSource(
            self.effective_tick_unit(),
            time_zone=self._config.time_zone,
            date_format=self.date_format,
            minor_tick_count=self.minor_tick_count,
            vertical_labels=self._config.vertical_tick_labels,
        )
        return source.refresh_ticks(self._lower, self._upper, edge)

    def renderer(self) -> DateAxisRenderer:
        """Build the render pass for the current settings and range."""
        config = self._config
        if config.tick_unit is None:
            config = config.updated(tick_unit=self.effective_tick_unit())
        return DateAxisRenderer(config, self.transform(), self.text_renderer)

    def reserve_space(self, edge) -> float:
        """Margin the tick labels will need, without drawing anything."""
        edge = Edge.parse(edge)
        return self.renderer().reserve_space(self.refresh_ticks(edge), edge)

    def draw(self, canvas: Image.Image, cursor: float, data_area: Rect, edge) -> AxisRenderState:
        """Draw the axis onto the canvas.

        Args:
            canvas: PIL Image to draw on
            cursor: Distance into the margin already consumed
            data_area: Rectangle the data is plotted in
            edge: Edge the axis is drawn along

        Returns:
            AxisRenderState for this pass
        """
        edge = Edge.parse(edge)
        if data_area.width <= 0 or data_area.height <= 0:
            raise ConfigurationError(f"Data area must not be empty, got {data_area}")
        ticks = self.refresh_ticks(edge)
        return self.renderer().draw_tick_marks_and_labels(canvas, ticks, cursor, data_area, edge)
