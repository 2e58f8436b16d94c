from click.testing import CliRunner
from PIL import Image

from aligned_date_axis import cli
from aligned_date_axis.core.config import DEFAULTS
from aligned_date_axis.core.edge import Edge
from aligned_date_axis.utils.geometry import Rect


def test_render_writes_png(tmp_path):
    output = tmp_path / "axis.png"

    result = CliRunner().invoke(
        cli.main,
        [str(output), "--start", "2024-01-01", "--end", "2024-01-08", "--unit", "day", "--mode", "interval_middle"],
    )

    assert result.exit_code == 0, result.output
    with Image.open(output) as image:
        assert image.size == (
            DEFAULTS.PLOT_WIDTH + DEFAULTS.MARGIN_LEFT + DEFAULTS.MARGIN_RIGHT,
            DEFAULTS.PLOT_HEIGHT + DEFAULTS.MARGIN_TOP + DEFAULTS.MARGIN_BOTTOM,
        )


def test_render_left_edge_vertical_labels(tmp_path):
    output = tmp_path / "axis.png"

    result = CliRunner().invoke(
        cli.main,
        [
            str(output),
            "--start", "2024-01-01",
            "--end", "2024-07-01",
            "--unit", "month",
            "--edge", "left",
            "--vertical-labels",
            "--minor-ticks", "4",
            "--timezone", "Europe/Prague",
        ],
    )

    assert result.exit_code == 0, result.output
    assert output.exists()


def test_middle_mode_without_unit_is_usage_error(tmp_path):
    result = CliRunner().invoke(
        cli.main,
        [str(tmp_path / "axis.png"), "--start", "2024-01-01", "--end", "2024-01-08", "--mode", "interval_middle"],
    )

    assert result.exit_code == 2
    assert "tick unit" in result.output


def test_unknown_timezone_is_usage_error(tmp_path):
    result = CliRunner().invoke(
        cli.main,
        [str(tmp_path / "axis.png"), "--start", "2024-01-01", "--end", "2024-01-08", "--timezone", "Not/AZone"],
    )

    assert result.exit_code == 2
    assert "time zone" in result.output


def test_bad_multiple_is_usage_error(tmp_path):
    result = CliRunner().invoke(
        cli.main,
        [str(tmp_path / "axis.png"), "--start", "2024-01-01", "--end", "2024-01-08", "--unit", "day",
         "--multiple", "0"],
    )

    assert result.exit_code == 2


def test_initial_cursor_hugs_data_area():
    area = Rect(80.0, 40.0, 800.0, 400.0)

    assert cli.initial_cursor(area, Edge.BOTTOM) == 440.0
    assert cli.initial_cursor(area, Edge.TOP) == 40.0
    assert cli.initial_cursor(area, Edge.LEFT) == 80.0
    assert cli.initial_cursor(area, Edge.RIGHT) == 880.0
