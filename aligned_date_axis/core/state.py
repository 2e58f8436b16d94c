"""Per-pass state of an axis render.

AxisRenderState is created at the start of a render pass, filled in while the
ticks are drawn, and handed back to the caller. It is never reused across
passes.
"""

from dataclasses import dataclass, field
from typing import Optional

from aligned_date_axis.ticks.tick import Tick
from aligned_date_axis.utils.geometry import Line, Point, Rect


@dataclass(frozen=True)
class LabelPlacement:
    """Where a tick label was anchored and whether it was drawn."""

    tick: Tick
    anchor: Point
    bounds: Optional[Rect]
    drawn: bool


@dataclass
class AxisRenderState:
    """Cursor and results of one axis render pass.

    The cursor is the distance into the margin that earlier axes and
    decorations have consumed. Moving it "down" or "right" increases it,
    "up" or "left" decreases it, matching screen coordinates.
    """

    cursor: float
    ticks: list[Tick] = field(default_factory=list)
    labels: list[LabelPlacement] = field(default_factory=list)
    tick_marks: list[Line] = field(default_factory=list)
    reserved: float = 0.0

    def cursor_up(self, units: float) -> None:
        self.cursor -= units

    def cursor_down(self, units: float) -> None:
        self.cursor += units

    def cursor_left(self, units: float) -> None:
        self.cursor -= units

    def cursor_right(self, units: float) -> None:
        self.cursor += units

    @property
    def drawn_labels(self) -> list[LabelPlacement]:
        """Labels that passed the visibility filter."""
        return [label for label in self.labels if label.drawn]

    @property
    def hidden_labels(self) -> list[LabelPlacement]:
        """Labels suppressed for overflowing the data area."""
        return [label for label in self.labels if not label.drawn]
