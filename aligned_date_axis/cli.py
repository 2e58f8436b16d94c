"""Command-line interface for aligned-date-axis.

Renders a data area with a single date axis to a PNG file, which is handy for
checking label placement settings by eye.
"""

import sys

import click
from PIL import Image, ImageDraw
from loguru import logger

from aligned_date_axis.axis import DateAxis
from aligned_date_axis.core.config import DEFAULTS, LabelPositionMode
from aligned_date_axis.core.edge import Edge
from aligned_date_axis.core.errors import ConfigurationError
from aligned_date_axis.ticks.tick_unit import DateTickUnit, DateTickUnitType
from aligned_date_axis.utils.geometry import Rect

_UNIT_CHOICES = [unit.name.lower() for unit in DateTickUnitType]
_EDGE_CHOICES = [edge.value for edge in Edge]
_MODE_CHOICES = [mode.value for mode in LabelPositionMode]


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def data_area_for(width: int, height: int) -> Rect:
    """Data area inside the default margins of a width x height plot."""
    return Rect(DEFAULTS.MARGIN_LEFT, DEFAULTS.MARGIN_TOP, width, height)


def initial_cursor(data_area: Rect, edge: Edge) -> float:
    """Cursor position of an axis drawn directly against the data area."""
    return {
        Edge.TOP: data_area.y,
        Edge.BOTTOM: data_area.max_y,
        Edge.LEFT: data_area.x,
        Edge.RIGHT: data_area.max_x,
    }[edge]


@click.command()
@click.argument("output", type=click.Path(dir_okay=False, writable=True))
@click.option("--start", required=True, help="Start of the visible range, e.g. 2024-01-01")
@click.option("--end", required=True, help="End of the visible range, e.g. 2024-01-08")
@click.option("--unit", type=click.Choice(_UNIT_CHOICES), default=None, help="Tick unit (default: automatic)")
@click.option("--multiple", type=int, default=1, show_default=True, help="Tick unit multiple")
@click.option("--edge", type=click.Choice(_EDGE_CHOICES), default="bottom", show_default=True)
@click.option("--mode", type=click.Choice(_MODE_CHOICES), default="interval_start", show_default=True)
@click.option("--timezone", "time_zone", default=DEFAULTS.TIME_ZONE, show_default=True)
@click.option("--width", type=int, default=DEFAULTS.PLOT_WIDTH, show_default=True, help="Data area width")
@click.option("--height", type=int, default=DEFAULTS.PLOT_HEIGHT, show_default=True, help="Data area height")
@click.option("--vertical-labels/--horizontal-labels", default=False, help="Rotate tick labels a quarter turn")
@click.option("--minor-ticks", type=int, default=0, help="Sub-intervals between major ticks")
@click.option("--date-format", default=None, help="strftime pattern for tick labels")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(
    output,
    start,
    end,
    unit,
    multiple,
    edge,
    mode,
    time_zone,
    width,
    height,
    vertical_labels,
    minor_ticks,
    date_format,
    verbose,
):
    """aligned-date-axis - Render a date axis to a PNG file.

    \b
    Examples:
        aligned-date-axis axis.png --start 2024-01-01 --end 2024-01-08 --unit day
        aligned-date-axis axis.png --start 2024-01-01 --end 2024-07-01 --unit month --mode interval_middle
    """
    _configure_logging(verbose)

    try:
        tick_unit = DateTickUnit(DateTickUnitType[unit.upper()], multiple) if unit else None
        axis = DateAxis(
            start,
            end,
            date_format=date_format,
            minor_tick_count=minor_ticks,
            label_position=LabelPositionMode(mode),
            tick_unit=tick_unit,
            time_zone=time_zone,
            vertical_tick_labels=vertical_labels,
            minor_tick_marks_visible=minor_ticks > 1,
        )
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    axis_edge = Edge(edge)
    data_area = data_area_for(width, height)
    canvas_size = (
        width + DEFAULTS.MARGIN_LEFT + DEFAULTS.MARGIN_RIGHT,
        height + DEFAULTS.MARGIN_TOP + DEFAULTS.MARGIN_BOTTOM,
    )
    canvas = Image.new("RGBA", canvas_size, DEFAULTS.BACKGROUND_COLOR)
    ImageDraw.Draw(canvas).rectangle(data_area.as_box(), fill=DEFAULTS.DATA_AREA_COLOR)

    state = axis.draw(canvas, initial_cursor(data_area, axis_edge), data_area, axis_edge)
    canvas.save(output)

    logger.info(
        f"Wrote {output}: {len(state.ticks)} ticks, {len(state.drawn_labels)} labels drawn, "
        f"{len(state.hidden_labels)} hidden, {state.reserved:.1f}px reserved"
    )


if __name__ == "__main__":
    main()
