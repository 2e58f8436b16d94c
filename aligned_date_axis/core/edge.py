"""Which side of the data area an axis occupies."""

from enum import Enum

from aligned_date_axis.core.errors import ConfigurationError


class Edge(Enum):
    """Edge of the data area an axis is drawn along."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_top_or_bottom(self) -> bool:
        return self in (Edge.TOP, Edge.BOTTOM)

    @property
    def is_left_or_right(self) -> bool:
        return self in (Edge.LEFT, Edge.RIGHT)

    @classmethod
    def parse(cls, value) -> "Edge":
        """Coerce an Edge or its name ("bottom", "LEFT", ...) to an Edge.

        Raises:
            ConfigurationError: If the value names no supported edge
        """
        if isinstance(value, Edge):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigurationError(f"Unsupported axis edge: {value!r}") from None
