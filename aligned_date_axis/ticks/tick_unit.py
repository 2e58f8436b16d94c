"""Calendar-aware tick units for date axes."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pandas as pd

from aligned_date_axis.core.errors import ConfigurationError


class DateTickUnitType(Enum):
    """Calendar field a tick unit steps along."""

    YEAR = "years"
    MONTH = "months"
    DAY = "days"
    HOUR = "hours"
    MINUTE = "minutes"
    SECOND = "seconds"
    MILLISECOND = "milliseconds"

    @property
    def is_calendar_field(self) -> bool:
        """True for units whose length depends on the calendar."""
        return self in (DateTickUnitType.YEAR, DateTickUnitType.MONTH, DateTickUnitType.DAY)


# Nominal unit lengths in milliseconds, used for sizing only
_NOMINAL_MS = {
    DateTickUnitType.YEAR: 365.25 * 86_400_000,
    DateTickUnitType.MONTH: 365.25 / 12 * 86_400_000,
    DateTickUnitType.DAY: 86_400_000,
    DateTickUnitType.HOUR: 3_600_000,
    DateTickUnitType.MINUTE: 60_000,
    DateTickUnitType.SECOND: 1_000,
    DateTickUnitType.MILLISECOND: 1,
}

_FLOOR_FREQ = {
    DateTickUnitType.HOUR: "h",
    DateTickUnitType.MINUTE: "min",
    DateTickUnitType.SECOND: "s",
    DateTickUnitType.MILLISECOND: "ms",
}


@dataclass(frozen=True)
class DateTickUnit:
    """Fixed calendar step between consecutive major ticks, e.g. "1 day".

    Year, month and day steps add calendar fields in the requested time zone,
    so wall-clock time is kept across DST changes and month ends are clamped
    (Jan 31 + 1 month = Feb 28/29). Shorter steps add elapsed time.
    """

    unit: DateTickUnitType = DateTickUnitType.DAY
    multiple: int = 1

    def __post_init__(self):
        if self.multiple < 1:
            raise ConfigurationError(f"Tick unit multiple must be positive, got {self.multiple}")

    def __str__(self) -> str:
        return f"{self.multiple} {self.unit.value}"

    @property
    def size(self) -> float:
        """Nominal step in milliseconds."""
        return _NOMINAL_MS[self.unit] * self.multiple

    def _offset(self):
        if self.unit.is_calendar_field:
            return pd.DateOffset(**{self.unit.value: self.multiple})
        return pd.Timedelta(**{self.unit.value: self.multiple})

    def add_to_date(self, date: pd.Timestamp, time_zone: Optional[str] = None) -> pd.Timestamp:
        """Add one step of this unit to a date.

        Args:
            date: Date to step from (naive dates are taken as UTC)
            time_zone: Time zone the calendar arithmetic is done in

        Returns:
            Timezone-aware timestamp one step later
        """
        return self._step(_localize(date, time_zone), 1)

    def previous_date(self, date: pd.Timestamp, time_zone: Optional[str] = None) -> pd.Timestamp:
        """Subtract one step of this unit from a date."""
        return self._step(_localize(date, time_zone), -1)

    def _step(self, date: pd.Timestamp, sign: int) -> pd.Timestamp:
        if not self.unit.is_calendar_field:
            return date + sign * self._offset()
        # Calendar fields are added in wall-clock time, then re-localized
        wall = date.tz_localize(None)
        wall = wall + self._offset() if sign > 0 else wall - self._offset()
        return wall.tz_localize(date.tz, ambiguous=True, nonexistent="shift_forward")

    def truncate(self, date: pd.Timestamp, time_zone: Optional[str] = None) -> pd.Timestamp:
        """Floor a date to the start of its unit period (wall clock, in time_zone).

        The period boundaries count from the start of the enclosing larger unit
        (e.g. a 6-hour unit truncates to 00:00, 06:00, 12:00, 18:00).
        """
        date = _localize(date, time_zone)
        wall = date.tz_localize(None)
        if self.unit is DateTickUnitType.YEAR:
            year = wall.year - (wall.year % self.multiple)
            wall = pd.Timestamp(year=year, month=1, day=1)
        elif self.unit is DateTickUnitType.MONTH:
            month = wall.month - ((wall.month - 1) % self.multiple)
            wall = pd.Timestamp(year=wall.year, month=month, day=1)
        elif self.unit is DateTickUnitType.DAY:
            day = wall.day - ((wall.day - 1) % self.multiple)
            wall = pd.Timestamp(year=wall.year, month=wall.month, day=day)
        else:
            wall = wall.floor(_FLOOR_FREQ[self.unit])
            attr = {
                DateTickUnitType.HOUR: "hour",
                DateTickUnitType.MINUTE: "minute",
                DateTickUnitType.SECOND: "second",
                DateTickUnitType.MILLISECOND: "microsecond",
            }[self.unit]
            current = getattr(wall, attr)
            if self.unit is DateTickUnitType.MILLISECOND:
                current //= 1000
            excess = current % self.multiple
            if excess:
                wall = wall - pd.Timedelta(**{self.unit.value: excess})
        return wall.tz_localize(date.tz, ambiguous=True, nonexistent="shift_forward")


def _localize(date, time_zone: Optional[str]) -> pd.Timestamp:
    date = pd.Timestamp(date)
    tz = time_zone or (date.tz if date.tzinfo is not None else "UTC")
    if date.tzinfo is None:
        return date.tz_localize("UTC").tz_convert(tz)
    return date.tz_convert(tz)


# Candidate units for automatic selection, smallest first
STANDARD_TICK_UNITS = [
    DateTickUnit(DateTickUnitType.MILLISECOND, 1),
    DateTickUnit(DateTickUnitType.MILLISECOND, 10),
    DateTickUnit(DateTickUnitType.MILLISECOND, 100),
    DateTickUnit(DateTickUnitType.SECOND, 1),
    DateTickUnit(DateTickUnitType.SECOND, 5),
    DateTickUnit(DateTickUnitType.SECOND, 15),
    DateTickUnit(DateTickUnitType.SECOND, 30),
    DateTickUnit(DateTickUnitType.MINUTE, 1),
    DateTickUnit(DateTickUnitType.MINUTE, 5),
    DateTickUnit(DateTickUnitType.MINUTE, 15),
    DateTickUnit(DateTickUnitType.MINUTE, 30),
    DateTickUnit(DateTickUnitType.HOUR, 1),
    DateTickUnit(DateTickUnitType.HOUR, 3),
    DateTickUnit(DateTickUnitType.HOUR, 6),
    DateTickUnit(DateTickUnitType.HOUR, 12),
    DateTickUnit(DateTickUnitType.DAY, 1),
    DateTickUnit(DateTickUnitType.DAY, 2),
    DateTickUnit(DateTickUnitType.DAY, 7),
    DateTickUnit(DateTickUnitType.DAY, 15),
    DateTickUnit(DateTickUnitType.MONTH, 1),
    DateTickUnit(DateTickUnitType.MONTH, 3),
    DateTickUnit(DateTickUnitType.MONTH, 6),
    DateTickUnit(DateTickUnitType.YEAR, 1),
    DateTickUnit(DateTickUnitType.YEAR, 2),
    DateTickUnit(DateTickUnitType.YEAR, 5),
    DateTickUnit(DateTickUnitType.YEAR, 10),
    DateTickUnit(DateTickUnitType.YEAR, 25),
    DateTickUnit(DateTickUnitType.YEAR, 50),
    DateTickUnit(DateTickUnitType.YEAR, 100),
]


def select_tick_unit(range_ms: float, num_ticks: int = 8) -> DateTickUnit:
    """Pick the smallest standard unit giving at most num_ticks ticks.

    Args:
        range_ms: Width of the visible range in milliseconds
        num_ticks: Approximate number of ticks desired

    Returns:
        A unit from STANDARD_TICK_UNITS (the largest one for huge ranges)
    """
    rough_step = range_ms / max(num_ticks, 1)
    for unit in STANDARD_TICK_UNITS:
        if unit.size >= rough_step:
            return unit
    return STANDARD_TICK_UNITS[-1]
