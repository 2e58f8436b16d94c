"""Tests for ticks, calendar tick units, and tick generation."""

import math

import pandas as pd
import pytest

from aligned_date_axis.core.edge import Edge
from aligned_date_axis.core.errors import ConfigurationError
from aligned_date_axis.ticks.tick import TextAnchor, Tick, TickType
from aligned_date_axis.ticks.tick_source import DateTickSource, format_tick_label, label_anchors
from aligned_date_axis.ticks.tick_unit import DateTickUnit, DateTickUnitType, select_tick_unit

from conftest import ms


class TestTick:
    """Tests for Tick value objects."""

    def test_from_date_sets_value(self):
        date = pd.Timestamp("2024-01-01", tz="UTC")
        tick = Tick.from_date(date, text="01-Jan")

        assert tick.value == ms("2024-01-01")
        assert tick.date == date
        assert tick.tick_type is TickType.MAJOR

    def test_resolve_date_from_value(self):
        """Test a tick without a date resolves its raw value in the time zone."""
        tick = Tick(value=ms("2024-06-01 12:00"))
        date = tick.resolve_date("Europe/Prague")

        assert date == pd.Timestamp("2024-06-01 14:00", tz="Europe/Prague")

    def test_from_date_naive_is_utc(self):
        """Test a naive date and the tick value refer to the same instant."""
        tick = Tick.from_date(pd.Timestamp("2024-01-01"))

        assert tick.value == ms("2024-01-01")
        assert tick.date == pd.Timestamp("2024-01-01", tz="UTC")
        assert tick.resolve_date("Europe/Prague") == pd.Timestamp("2024-01-01 01:00", tz="Europe/Prague")

    def test_resolve_date_converts_zone(self):
        tick = Tick.from_date(pd.Timestamp("2024-01-01", tz="UTC"))
        assert str(tick.resolve_date("America/New_York").tz) == "America/New_York"

    def test_tick_is_immutable(self):
        tick = Tick(value=0.0)
        with pytest.raises(AttributeError):
            tick.value = 1.0

    def test_text_anchor_parts(self):
        assert TextAnchor.TOP_CENTER.vertical == "top"
        assert TextAnchor.TOP_CENTER.horizontal == "center"
        assert TextAnchor.BASELINE_RIGHT.vertical == "baseline"


class TestDateTickUnit:
    """Tests for calendar-aware tick unit arithmetic."""

    def test_add_day(self):
        unit = DateTickUnit(DateTickUnitType.DAY)
        result = unit.add_to_date(pd.Timestamp("2024-01-01", tz="UTC"))
        assert result == pd.Timestamp("2024-01-02", tz="UTC")

    def test_add_month_clamps_to_month_end(self):
        """Test Jan 31 + 1 month lands on the last day of February."""
        unit = DateTickUnit(DateTickUnitType.MONTH)
        result = unit.add_to_date(pd.Timestamp("2024-01-31", tz="UTC"), "UTC")
        assert result == pd.Timestamp("2024-02-29", tz="UTC")

    def test_add_day_across_dst_keeps_wall_clock(self):
        """Test a one-day step over the spring DST change lasts 23 hours."""
        unit = DateTickUnit(DateTickUnitType.DAY)
        start = pd.Timestamp("2024-03-30 12:00", tz="Europe/Prague")

        result = unit.add_to_date(start, "Europe/Prague")

        assert result == pd.Timestamp("2024-03-31 12:00", tz="Europe/Prague")
        assert result - start == pd.Timedelta(hours=23)

    def test_add_hour_across_dst_is_elapsed_time(self):
        unit = DateTickUnit(DateTickUnitType.HOUR)
        start = pd.Timestamp("2024-03-31 01:00", tz="Europe/Prague")

        result = unit.add_to_date(start, "Europe/Prague")

        assert result == pd.Timestamp("2024-03-31 03:00", tz="Europe/Prague")

    def test_add_uses_requested_time_zone(self):
        unit = DateTickUnit(DateTickUnitType.DAY)
        result = unit.add_to_date(pd.Timestamp("2024-01-01", tz="UTC"), "Asia/Tokyo")
        assert str(result.tz) == "Asia/Tokyo"
        assert result == pd.Timestamp("2024-01-02", tz="UTC")

    def test_naive_date_taken_as_utc(self):
        unit = DateTickUnit(DateTickUnitType.HOUR, 6)
        result = unit.add_to_date(pd.Timestamp("2024-01-01 00:00"))
        assert result == pd.Timestamp("2024-01-01 06:00", tz="UTC")

    def test_previous_date(self):
        unit = DateTickUnit(DateTickUnitType.MONTH, 3)
        result = unit.previous_date(pd.Timestamp("2024-04-01", tz="UTC"))
        assert result == pd.Timestamp("2024-01-01", tz="UTC")

    def test_non_positive_multiple_rejected(self):
        with pytest.raises(ConfigurationError):
            DateTickUnit(DateTickUnitType.DAY, 0)

    def test_size(self):
        assert DateTickUnit(DateTickUnitType.HOUR, 2).size == 7_200_000
        assert DateTickUnit(DateTickUnitType.DAY).size == 86_400_000

    @pytest.mark.parametrize(
        "unit, multiple, expected",
        [
            (DateTickUnitType.YEAR, 1, "2024-01-01 00:00"),
            (DateTickUnitType.MONTH, 3, "2024-04-01 00:00"),
            (DateTickUnitType.DAY, 1, "2024-05-17 00:00"),
            (DateTickUnitType.HOUR, 6, "2024-05-17 12:00"),
            (DateTickUnitType.MINUTE, 15, "2024-05-17 13:45"),
            (DateTickUnitType.SECOND, 30, "2024-05-17 13:47:00"),
        ],
    )
    def test_truncate(self, unit, multiple, expected):
        date = pd.Timestamp("2024-05-17 13:47:12", tz="UTC")
        result = DateTickUnit(unit, multiple).truncate(date)
        assert result == pd.Timestamp(expected, tz="UTC")

    def test_truncate_in_time_zone(self):
        """Test day boundaries follow the requested time zone."""
        date = pd.Timestamp("2024-05-17 23:30", tz="UTC")
        result = DateTickUnit(DateTickUnitType.DAY).truncate(date, "Europe/Prague")
        assert result == pd.Timestamp("2024-05-18 00:00", tz="Europe/Prague")

    def test_select_tick_unit(self):
        week = 7 * 86_400_000
        assert select_tick_unit(week, num_ticks=8) == DateTickUnit(DateTickUnitType.DAY, 1)

    def test_select_tick_unit_huge_range(self):
        assert select_tick_unit(1e18).unit is DateTickUnitType.YEAR


class TestLabelFormatting:
    """Tests for tick label text and anchors."""

    def test_default_formats(self):
        date = pd.Timestamp("2024-03-05 14:30:15.250", tz="UTC")

        assert format_tick_label(date, DateTickUnit(DateTickUnitType.YEAR)) == "2024"
        assert format_tick_label(date, DateTickUnit(DateTickUnitType.MONTH)) == "Mar-2024"
        assert format_tick_label(date, DateTickUnit(DateTickUnitType.DAY)) == "05-Mar"
        assert format_tick_label(date, DateTickUnit(DateTickUnitType.MINUTE)) == "14:30"
        assert format_tick_label(date, DateTickUnit(DateTickUnitType.MILLISECOND)) == "14:30:15.250"

    def test_custom_format(self):
        date = pd.Timestamp("2024-03-05", tz="UTC")
        assert format_tick_label(date, DateTickUnit(), "%Y/%m/%d") == "2024/03/05"

    def test_horizontal_anchors(self):
        assert label_anchors(Edge.BOTTOM, False) == (TextAnchor.TOP_CENTER, TextAnchor.TOP_CENTER, 0.0)
        assert label_anchors(Edge.TOP, False) == (TextAnchor.BOTTOM_CENTER, TextAnchor.BOTTOM_CENTER, 0.0)
        assert label_anchors(Edge.LEFT, False)[0] is TextAnchor.CENTER_RIGHT
        assert label_anchors(Edge.RIGHT, False)[0] is TextAnchor.CENTER_LEFT

    def test_vertical_anchors(self):
        anchor, rotation, angle = label_anchors(Edge.BOTTOM, True)
        assert anchor is TextAnchor.CENTER_RIGHT
        assert rotation is TextAnchor.CENTER_RIGHT
        assert angle == pytest.approx(-math.pi / 2)

        assert label_anchors(Edge.TOP, True)[2] == pytest.approx(math.pi / 2)
        assert label_anchors(Edge.LEFT, True)[2] == pytest.approx(-math.pi / 2)


class TestDateTickSource:
    """Tests for tick generation over a visible range."""

    def test_major_ticks_on_unit_boundaries(self):
        source = DateTickSource(DateTickUnit(DateTickUnitType.DAY))
        ticks = source.refresh_ticks(ms("2024-01-01 12:00"), ms("2024-01-04 00:00"), Edge.BOTTOM)

        assert [t.value for t in ticks] == [ms("2024-01-02"), ms("2024-01-03"), ms("2024-01-04")]
        assert [t.text for t in ticks] == ["02-Jan", "03-Jan", "04-Jan"]
        assert all(t.tick_type is TickType.MAJOR for t in ticks)
        assert all(t.text_anchor is TextAnchor.TOP_CENTER for t in ticks)

    def test_ticks_are_chronological(self):
        source = DateTickSource(DateTickUnit(DateTickUnitType.HOUR, 6), minor_tick_count=3)
        ticks = source.refresh_ticks(ms("2024-01-01"), ms("2024-01-03"), Edge.BOTTOM)

        values = [t.value for t in ticks]
        assert values == sorted(values)

    def test_minor_ticks_between_majors(self):
        """Test four sub-intervals put three unlabelled minor ticks in each interval."""
        source = DateTickSource(DateTickUnit(DateTickUnitType.DAY), minor_tick_count=4)
        ticks = source.refresh_ticks(ms("2024-01-01"), ms("2024-01-03"), Edge.BOTTOM)

        majors = [t for t in ticks if t.tick_type is TickType.MAJOR]
        minors = [t for t in ticks if t.tick_type is TickType.MINOR]

        assert len(majors) == 3
        assert len(minors) == 6
        assert all(t.text == "" for t in minors)
        assert minors[0].value == pytest.approx(ms("2024-01-01 06:00"))

    def test_month_ticks_in_time_zone(self):
        source = DateTickSource(DateTickUnit(DateTickUnitType.MONTH), time_zone="Europe/Prague")
        ticks = source.refresh_ticks(
            ms("2024-01-15", "Europe/Prague"), ms("2024-04-15", "Europe/Prague"), Edge.BOTTOM
        )

        assert [t.date for t in ticks] == [
            pd.Timestamp("2024-02-01", tz="Europe/Prague"),
            pd.Timestamp("2024-03-01", tz="Europe/Prague"),
            pd.Timestamp("2024-04-01", tz="Europe/Prague"),
        ]

    def test_vertical_labels(self):
        source = DateTickSource(DateTickUnit(DateTickUnitType.DAY), vertical_labels=True)
        ticks = source.refresh_ticks(ms("2024-01-01"), ms("2024-01-02"), Edge.BOTTOM)

        assert all(t.angle == pytest.approx(-math.pi / 2) for t in ticks)

    def test_too_many_ticks_rejected(self):
        source = DateTickSource(DateTickUnit(DateTickUnitType.MILLISECOND))
        with pytest.raises(ConfigurationError):
            source.refresh_ticks(ms("2024-01-01"), ms("2024-01-02"), Edge.BOTTOM)

    def test_negative_minor_count_rejected(self):
        with pytest.raises(ConfigurationError):
            DateTickSource(DateTickUnit(), minor_tick_count=-1)
