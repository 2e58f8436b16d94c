"""Text measuring and rotated text drawing on PIL images."""

import math
from dataclasses import dataclass

from PIL import Image, ImageDraw, ImageFont

from aligned_date_axis.core.errors import ConfigurationError
from aligned_date_axis.ticks.tick import TextAnchor
from aligned_date_axis.utils.geometry import Point, Rect


def get_font(size: int = 12):
    """Get a font, falling back to default if system fonts not available."""
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size)
    except OSError:
        try:
            return ImageFont.truetype("/usr/share/fonts/TTF/DejaVuSans.ttf", size)
        except OSError:
            return ImageFont.load_default(size)


@dataclass(frozen=True)
class TextMetrics:
    """Advance width and line metrics of a single line of text."""

    width: float
    ascent: float
    descent: float

    @property
    def height(self) -> float:
        return self.ascent + self.descent


def _anchor_offset(anchor: TextAnchor, metrics: TextMetrics) -> tuple[float, float]:
    """Position of an anchor relative to the text's left end of the baseline."""
    dx = {"left": 0.0, "center": metrics.width / 2.0, "right": metrics.width}[anchor.horizontal]
    dy = {
        "top": -metrics.ascent,
        "center": (metrics.descent - metrics.ascent) / 2.0,
        "baseline": 0.0,
        "bottom": metrics.descent,
    }[anchor.vertical]
    return dx, dy


class TextRenderer:
    """Measures and draws (optionally rotated) labels.

    Placement follows the usual chart convention: the text_anchor point of the
    label is put on (x, y), then the label is rotated by angle (radians,
    clockwise on screen) around its rotation_anchor point.
    """

    def text_metrics(self, text: str, font) -> TextMetrics:
        """Measure a label.

        Raises:
            ConfigurationError: If the font cannot report line metrics
        """
        try:
            ascent, descent = font.getmetrics()
        except AttributeError:
            raise ConfigurationError(f"Font {font!r} does not provide line metrics") from None
        return TextMetrics(width=float(font.getlength(text)), ascent=float(ascent), descent=float(descent))

    def _layout(self, text, font, x, y, text_anchor, rotation_anchor):
        metrics = self.text_metrics(text, font)
        dx, dy = _anchor_offset(text_anchor, metrics)
        origin = Point(x - dx, y - dy)
        rx, ry = _anchor_offset(rotation_anchor, metrics)
        pivot = Point(origin.x + rx, origin.y + ry)
        box = Rect(origin.x, origin.y - metrics.ascent, metrics.width, metrics.height)
        return metrics, box, pivot

    def rotated_bounds(
        self,
        text: str,
        font,
        x: float,
        y: float,
        text_anchor: TextAnchor,
        angle: float,
        rotation_anchor: TextAnchor,
    ) -> Rect:
        """Axis-aligned bounding rectangle of the label as it would be drawn.

        Args:
            text: Label text
            font: PIL font the label is drawn with
            x: Anchor x coordinate
            y: Anchor y coordinate
            text_anchor: Point of the label placed on (x, y)
            angle: Rotation in radians
            rotation_anchor: Point of the label the rotation pivots around

        Returns:
            Bounding rectangle in screen coordinates
        """
        _, box, pivot = self._layout(text, font, x, y, text_anchor, rotation_anchor)
        if angle == 0.0:
            return box

        cos_a, sin_a = math.cos(angle), math.sin(angle)
        xs, ys = [], []
        for cx, cy in ((box.x, box.y), (box.max_x, box.y), (box.max_x, box.max_y), (box.x, box.max_y)):
            ox, oy = cx - pivot.x, cy - pivot.y
            xs.append(pivot.x + ox * cos_a - oy * sin_a)
            ys.append(pivot.y + ox * sin_a + oy * cos_a)
        return Rect.from_bounds(min(xs), min(ys), max(xs), max(ys))

    def draw_rotated(
        self,
        canvas: Image.Image,
        text: str,
        font,
        x: float,
        y: float,
        text_anchor: TextAnchor,
        angle: float,
        rotation_anchor: TextAnchor,
        fill=(0, 0, 0, 255),
    ) -> Rect:
        """Draw a label onto the canvas.

        Returns:
            The bounding rectangle the label was drawn into
        """
        metrics, box, _ = self._layout(text, font, x, y, text_anchor, rotation_anchor)
        if angle == 0.0:
            ImageDraw.Draw(canvas).text((box.x, box.y), text, fill=fill, font=font)
            return box

        # Render onto a transparent tile, rotate it, and paste at the rotated bounds
        tile = Image.new("RGBA", (max(1, math.ceil(metrics.width)), max(1, math.ceil(metrics.height))), (0, 0, 0, 0))
        ImageDraw.Draw(tile).text((0, 0), text, fill=fill, font=font)
        tile = tile.rotate(-math.degrees(angle), resample=Image.Resampling.BICUBIC, expand=True)

        bounds = self.rotated_bounds(text, font, x, y, text_anchor, angle, rotation_anchor)
        canvas.paste(tile, (round(bounds.x), round(bounds.y)), tile)
        return bounds
