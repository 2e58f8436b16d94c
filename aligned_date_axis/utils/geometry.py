"""Small geometry value types shared by the axis code."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in screen coordinates (y grows downward)."""

    x: float
    y: float


@dataclass(frozen=True)
class Line:
    """A straight line segment between two screen points."""

    x1: float
    y1: float
    x2: float
    y2: float

    def as_xy(self) -> list[tuple[float, float]]:
        """Return the segment in the form expected by ImageDraw.line."""
        return [(self.x1, self.y1), (self.x2, self.y2)]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2.0

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> "Rect":
        """Build a rectangle from its min/max corners."""
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    def as_box(self) -> list[float]:
        """Return [x0, y0, x1, y1] as used by ImageDraw.rectangle."""
        return [self.x, self.y, self.max_x, self.max_y]


@dataclass(frozen=True)
class RectangleInsets:
    """Padding around a rectangle, in pixels."""

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0
