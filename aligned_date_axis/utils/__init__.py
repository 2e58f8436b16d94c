"""Geometry and coordinate mapping helpers."""

from aligned_date_axis.utils.coordinate_transform import CoordinateTransform
from aligned_date_axis.utils.geometry import Line, Point, Rect, RectangleInsets

__all__ = ["CoordinateTransform", "Line", "Point", "Rect", "RectangleInsets"]
