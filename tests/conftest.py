"""Shared fixtures for the aligned_date_axis tests."""

import pandas as pd
import pytest

from aligned_date_axis.rendering.text import TextMetrics, TextRenderer
from aligned_date_axis.utils.geometry import Rect

# Glyph sizes of the fixed-metrics renderer
CHAR_WIDTH = 6.0
ASCENT = 9.0
DESCENT = 3.0


class FixedMetricsTextRenderer(TextRenderer):
    """TextRenderer with font-independent sizes: 6px per character, 12px lines."""

    def text_metrics(self, text, font):
        return TextMetrics(width=CHAR_WIDTH * len(text), ascent=ASCENT, descent=DESCENT)


def ms(date: str, tz: str = "UTC") -> float:
    """Epoch milliseconds of a date string."""
    return pd.Timestamp(date, tz=tz).value / 1_000_000


@pytest.fixture
def text_renderer():
    return FixedMetricsTextRenderer()


@pytest.fixture
def data_area():
    """400 x 200 data area at the origin."""
    return Rect(0.0, 0.0, 400.0, 200.0)
