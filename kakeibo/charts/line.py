# kakeibo/charts/line.py
"""
Line chart renderer (monthly expense trend).

The series order is the x-axis order; points are never re-sorted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from kakeibo.charts.geometry import normalize_range, scale_to_axis
from kakeibo.charts.shapes import (
    Circle,
    Drawable,
    Line,
    LineTo,
    MoveTo,
    Path,
    Point,
    Series,
    Text,
    format_thousands,
    no_data_drawable,
)

PADDING = 40
GRID_INTERVALS = 5
MARKER_RADIUS = 4
MAX_LABELED_POINTS = 12

LINE_COLOR = "#3498db"
GRID_COLOR = "#e0e0e0"


@dataclass(frozen=True)
class Polyline:
    points: List[Point]
    min: float
    max: float
    range: float


def build_polyline(series: Series, width: int, height: int) -> Polyline:
    """
    Plot coordinates for a non-empty series.

    A single point sits on the left edge of the plot area.
    """
    chart_width = width - PADDING * 2
    chart_height = height - PADDING * 2
    lo, hi, span = normalize_range(p.value for p in series)

    n = len(series)
    points: List[Point] = []
    for i, point in enumerate(series):
        x = PADDING + (i / (n - 1)) * chart_width if n > 1 else PADDING
        y = height - PADDING - scale_to_axis(point.value, lo, span, chart_height)
        points.append((x, y))

    return Polyline(points=points, min=lo, max=hi, range=span)


def render_line_chart(series: Series, width: int = 600, height: int = 300) -> Drawable:
    if not series:
        return no_data_drawable(width, height)

    chart_height = height - PADDING * 2
    polyline = build_polyline(series, width, height)

    drawable = Drawable(width=width, height=height)

    # Horizontal grid with value annotations, top (max) to bottom (min)
    for i in range(GRID_INTERVALS + 1):
        y = PADDING + (chart_height / GRID_INTERVALS) * i
        drawable.add(Line(x1=PADDING, y1=y, x2=width - PADDING, y2=y, stroke=GRID_COLOR))
        value = polyline.max - (polyline.range / GRID_INTERVALS) * i
        drawable.add(Text(x=5, y=y + 5, text=format_thousands(value), font_size=10, fill="#999"))

    first, *rest = polyline.points
    drawable.add(
        Path(
            commands=(MoveTo(*first),) + tuple(LineTo(x, y) for x, y in rest),
            fill="none",
            stroke=LINE_COLOR,
            stroke_width=2,
        )
    )

    label_every_point = len(series) <= MAX_LABELED_POINTS
    for i, (point, (x, y)) in enumerate(zip(series, polyline.points)):
        drawable.add(Circle(cx=x, cy=y, r=MARKER_RADIUS, fill=LINE_COLOR))
        if label_every_point or i % 2 == 0:
            drawable.add(
                Text(x=x, y=height - 10, text=point.label, font_size=10, fill="#666", anchor="middle")
            )

    return drawable
