# kakeibo/charts/geometry.py
"""
Geometry helpers for the chart renderers.

Angles are in degrees and run clockwise in screen coordinates (y grows
downwards), so -90 points straight up (12 o'clock).
"""

import math
from typing import Iterable, Tuple

from kakeibo.charts.shapes import Point


def polar_to_cartesian(center: Point, radius: float, angle_degrees: float) -> Point:
    cx, cy = center
    angle = math.radians(angle_degrees)
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)


def normalize_range(values: Iterable[float]) -> Tuple[float, float, float]:
    """
    Returns (min, max, range) of a non-empty sequence.

    A flat series gets range 1 so scaling never divides by zero. Always
    scale with the returned range, not max - min.
    """
    values = list(values)
    lo = min(values)
    hi = max(values)
    span = hi - lo
    if span == 0:
        span = 1
    return lo, hi, span


def scale_to_axis(value: float, minimum: float, span: float, pixel_span: float) -> float:
    return ((value - minimum) / span) * pixel_span
