"""Render pass for date axes: axis line, tick marks, and tick labels."""

from PIL import Image, ImageDraw
from loguru import logger

from aligned_date_axis.core.config import AxisConfig
from aligned_date_axis.core.edge import Edge
from aligned_date_axis.core.errors import ConfigurationError
from aligned_date_axis.core.state import AxisRenderState, LabelPlacement
from aligned_date_axis.rendering.anchor import anchor_strategy
from aligned_date_axis.rendering.label_filter import label_within_tolerance
from aligned_date_axis.rendering.text import TextRenderer, get_font
from aligned_date_axis.ticks.tick import Tick, TickType
from aligned_date_axis.utils.coordinate_transform import CoordinateTransform
from aligned_date_axis.utils.geometry import Line, Rect

# Sample string for the height of one line of label text
_LINE_SAMPLE = "ABCxyz"


class DateAxisRenderer:
    """Draws one date axis along an edge of the data area.

    Each call to draw_tick_marks_and_labels is a self-contained pass: it reads
    the configuration, draws onto the canvas, and returns a fresh
    AxisRenderState with the advanced cursor. Nothing is kept between passes.
    """

    def __init__(
        self,
        config: AxisConfig,
        transform: CoordinateTransform,
        text_renderer: TextRenderer | None = None,
    ):
        """Initialize the renderer.

        Args:
            config: Axis style and behaviour settings
            transform: Time value to pixel mapping for the visible range
            text_renderer: Label measuring/drawing backend

        Raises:
            ConfigurationError: If the configuration is inconsistent
        """
        config.validate()
        self.config = config
        self.transform = transform
        self.text_renderer = text_renderer or TextRenderer()
        self.font = config.tick_label_font or get_font(config.tick_label_font_size)
        self.anchors = anchor_strategy(
            config.label_position,
            transform,
            config.tick_label_insets,
            config.tick_unit,
            config.time_zone,
        )

    def draw_tick_marks_and_labels(
        self,
        canvas: Image.Image,
        ticks: list[Tick],
        cursor: float,
        data_area: Rect,
        edge: Edge,
    ) -> AxisRenderState:
        """Draw the axis line, labels and tick marks, and reserve label space.

        Args:
            canvas: PIL Image to draw on
            ticks: Ticks for the visible range, in chronological order
            cursor: Distance into the margin already consumed
            data_area: Rectangle the data is plotted in
            edge: Edge the axis is drawn along

        Returns:
            AxisRenderState with the label placements, the tick marks drawn,
            and the cursor moved past the labels
        """
        edge = Edge.parse(edge)
        config = self.config
        draw = ImageDraw.Draw(canvas)
        state = AxisRenderState(cursor=cursor, ticks=list(ticks))

        if config.axis_line_visible:
            self.draw_axis_line(draw, cursor, data_area, edge)

        for tick in state.ticks:
            if config.tick_labels_visible and tick.text:
                state.labels.append(self._draw_label(canvas, tick, cursor, data_area, edge))

            mark = self.tick_mark(tick, cursor, data_area, edge)
            if mark is not None:
                draw.line(mark.as_xy(), fill=config.tick_color, width=config.tick_mark_width)
                state.tick_marks.append(mark)

        if config.tick_labels_visible:
            used = self.reserve_space(state.ticks, edge)
            state.reserved = used
            if edge is Edge.LEFT:
                state.cursor_left(used)
            elif edge is Edge.RIGHT:
                state.cursor_right(used)
            elif edge is Edge.TOP:
                state.cursor_up(used)
            else:
                state.cursor_down(used)

        logger.debug(
            f"Rendered {edge.value} axis: {len(state.ticks)} ticks, "
            f"{len(state.drawn_labels)}/{len(state.labels)} labels drawn, cursor {cursor} -> {state.cursor}"
        )
        return state

    def _draw_label(self, canvas, tick: Tick, cursor: float, data_area: Rect, edge: Edge) -> LabelPlacement:
        anchor = self.anchors.anchor(tick, cursor, data_area, edge)
        bounds = self.text_renderer.rotated_bounds(
            tick.text, self.font, anchor.x, anchor.y, tick.text_anchor, tick.angle, tick.rotation_anchor
        )
        drawn = label_within_tolerance(bounds, data_area, edge, self.config.label_overflow_tolerance)
        if drawn:
            self.text_renderer.draw_rotated(
                canvas,
                tick.text,
                self.font,
                anchor.x,
                anchor.y,
                tick.text_anchor,
                tick.angle,
                tick.rotation_anchor,
                fill=self.config.label_color,
            )
        else:
            logger.debug(f"Hiding label {tick.text!r}: overflows data area at {bounds}")
        return LabelPlacement(tick=tick, anchor=anchor, bounds=bounds, drawn=drawn)

    def draw_axis_line(self, draw: ImageDraw.ImageDraw, cursor: float, data_area: Rect, edge: Edge) -> Line:
        """Draw the axis line along the edge at the cursor."""
        if edge.is_top_or_bottom:
            line = Line(data_area.x, cursor, data_area.max_x, cursor)
        elif edge.is_left_or_right:
            line = Line(cursor, data_area.y, cursor, data_area.max_y)
        else:
            raise ConfigurationError(f"Unsupported axis edge: {edge!r}")
        draw.line(line.as_xy(), fill=self.config.axis_color, width=self.config.axis_line_width)
        return line

    def tick_mark(self, tick: Tick, cursor: float, data_area: Rect, edge: Edge) -> Line | None:
        """Tick mark segment for a tick, or None if its category is hidden.

        Marks sit on the tick's own pixel position; label shifting never
        moves them.
        """
        config = self.config
        if tick.tick_type is TickType.MINOR:
            if not config.minor_tick_marks_visible:
                return None
            outside, inside = config.minor_tick_mark_outside_length, config.minor_tick_mark_inside_length
        else:
            if not config.tick_marks_visible:
                return None
            outside, inside = config.tick_mark_outside_length, config.tick_mark_inside_length

        v = self.transform.value_to_pixel(tick.value, data_area, edge)
        if edge is Edge.LEFT:
            return Line(cursor - outside, v, cursor + inside, v)
        if edge is Edge.RIGHT:
            return Line(cursor + outside, v, cursor - inside, v)
        if edge is Edge.TOP:
            return Line(v, cursor - outside, v, cursor + inside)
        if edge is Edge.BOTTOM:
            return Line(v, cursor + outside, v, cursor - inside)
        raise ConfigurationError(f"Unsupported axis edge: {edge!r}")

    def reserve_space(self, ticks: list[Tick], edge: Edge) -> float:
        """Margin space the tick labels need across the axis.

        Width of the widest label for left/right axes, height of the tallest
        label for top/bottom axes, tick label insets included.
        """
        edge = Edge.parse(edge)
        if edge.is_left_or_right:
            return self.max_tick_label_width(ticks)
        return self.max_tick_label_height(ticks)

    def _line_height(self) -> float:
        return self.text_renderer.text_metrics(_LINE_SAMPLE, self.font).height

    def _max_text_width(self, ticks: list[Tick]) -> float:
        widths = [self.text_renderer.text_metrics(t.text, self.font).width for t in ticks if t.text]
        return max(widths, default=0.0)

    def max_tick_label_width(self, ticks: list[Tick]) -> float:
        insets = self.config.tick_label_insets
        if self.config.vertical_tick_labels:
            return insets.left + insets.right + self._line_height()
        return insets.left + insets.right + self._max_text_width(ticks)

    def max_tick_label_height(self, ticks: list[Tick]) -> float:
        insets = self.config.tick_label_insets
        if self.config.vertical_tick_labels:
            return insets.top + insets.bottom + self._max_text_width(ticks)
        return insets.top + insets.bottom + self._line_height()
