"""Tick value objects produced by the tick source."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pandas as pd


class TickType(Enum):
    """Tick category; major and minor marks are toggled independently."""

    MAJOR = "major"
    MINOR = "minor"


class TextAnchor(Enum):
    """Reference point of a text block that is placed on an anchor point.

    Each member is a (vertical, horizontal) pair. The vertical part refers to
    the text's line metrics: TOP is the ascent line, BASELINE the baseline,
    BOTTOM the descent line.
    """

    TOP_LEFT = ("top", "left")
    TOP_CENTER = ("top", "center")
    TOP_RIGHT = ("top", "right")
    CENTER_LEFT = ("center", "left")
    CENTER = ("center", "center")
    CENTER_RIGHT = ("center", "right")
    BASELINE_LEFT = ("baseline", "left")
    BASELINE_CENTER = ("baseline", "center")
    BASELINE_RIGHT = ("baseline", "right")
    BOTTOM_LEFT = ("bottom", "left")
    BOTTOM_CENTER = ("bottom", "center")
    BOTTOM_RIGHT = ("bottom", "right")

    @property
    def vertical(self) -> str:
        return self.value[0]

    @property
    def horizontal(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class Tick:
    """A single tick on a date axis.

    Attributes:
        value: Tick position in epoch milliseconds
        text: Label text
        tick_type: MAJOR or MINOR
        text_anchor: Point of the label placed on the anchor
        rotation_anchor: Point of the label the rotation pivots around
        angle: Rotation in radians, positive is clockwise on screen
        date: Timezone-aware timestamp of the tick, if known
    """

    value: float
    text: str = ""
    tick_type: TickType = TickType.MAJOR
    text_anchor: TextAnchor = TextAnchor.TOP_CENTER
    rotation_anchor: TextAnchor = TextAnchor.TOP_CENTER
    angle: float = 0.0
    date: Optional[pd.Timestamp] = None

    @classmethod
    def from_date(cls, date: pd.Timestamp, **kwargs) -> "Tick":
        """Create a tick positioned at a timestamp.

        Naive timestamps are taken as UTC, the same as the raw tick value.
        """
        date = pd.Timestamp(date)
        if date.tzinfo is None:
            date = date.tz_localize("UTC")
        return cls(value=date.value / 1_000_000, date=date, **kwargs)

    def resolve_date(self, time_zone: Optional[str] = None) -> pd.Timestamp:
        """Return the tick's date, converting the raw value when no date is set.

        Args:
            time_zone: Time zone to express the date in (default UTC)

        Returns:
            Timezone-aware timestamp
        """
        tz = time_zone or "UTC"
        if self.date is not None:
            return self.date.tz_convert(tz)
        return pd.Timestamp(self.value, unit="ms", tz="UTC").tz_convert(tz)
