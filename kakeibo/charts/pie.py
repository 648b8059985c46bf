# kakeibo/charts/pie.py
"""
Pie chart renderer (expense distribution by category).

render_pie_chart(series, width, height, colors) -> Drawable

Sectors start at 12 o'clock (-90 degrees) and run clockwise in series order.
Entries with value <= 0 are skipped. Each rendered sector gets a percentage
label inside the wedge and a legend row in the top-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

from kakeibo.charts.geometry import polar_to_cartesian
from kakeibo.charts.shapes import (
    ArcTo,
    ClosePath,
    DataPoint,
    Drawable,
    LineTo,
    MoveTo,
    Path,
    Point,
    Rect,
    Series,
    Text,
    format_thousands,
    no_data_drawable,
    round_half_up,
)

DEFAULT_PALETTE = ("#3498db", "#2ecc71", "#9b59b6", "#e74c3c", "#f39c12", "#1abc9c")

START_ANGLE = -90.0
FULL_CIRCLE = 360 - 1e-9
MARGIN = 40
LABEL_RADIUS_RATIO = 0.7

LEGEND_X = 10
LEGEND_TOP = 20
LEGEND_ROW_HEIGHT = 25
LEGEND_SWATCH = 15


@dataclass(frozen=True)
class Sector:
    label: str
    value: float
    start_angle: float
    end_angle: float
    sweep: float
    percentage: float
    color: str
    path: Path
    label_position: Point


def _pick_color(
    point: DataPoint,
    index: int,
    colors: Optional[Mapping[str, str]],
    palette: Sequence[str],
) -> str:
    if point.color:
        return point.color
    if colors and point.label in colors:
        return colors[point.label]
    return palette[index % len(palette)]


def build_sectors(
    series: Series,
    center: Point,
    radius: float,
    colors: Optional[Mapping[str, str]] = None,
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> List[Sector]:
    """
    Compute one Sector per positive entry. Returns [] when nothing is renderable.
    """
    total = sum(p.value for p in series)
    if not series or total <= 0:
        return []

    cx, cy = center
    sectors: List[Sector] = []
    current = START_ANGLE

    for point in series:
        if point.value <= 0:
            continue

        percentage = point.value / total * 100
        sweep = percentage / 100 * 360
        end = current + sweep

        start_x, start_y = polar_to_cartesian(center, radius, current)
        end_x, end_y = polar_to_cartesian(center, radius, end)
        large_arc = 1 if sweep > 180 else 0

        if sweep >= FULL_CIRCLE:
            # An arc whose endpoints coincide is not drawn; go through the midpoint.
            mid_x, mid_y = polar_to_cartesian(center, radius, current + sweep / 2)
            arcs = (
                ArcTo(radius, radius, 0, 0, 1, mid_x, mid_y),
                ArcTo(radius, radius, 0, 0, 1, end_x, end_y),
            )
        else:
            arcs = (ArcTo(radius, radius, 0, large_arc, 1, end_x, end_y),)

        path = Path(
            commands=(MoveTo(cx, cy), LineTo(start_x, start_y)) + arcs + (ClosePath(),),
            fill=_pick_color(point, len(sectors), colors, palette),
            stroke="white",
            stroke_width=2,
        )

        sectors.append(
            Sector(
                label=point.label,
                value=point.value,
                start_angle=current,
                end_angle=end,
                sweep=sweep,
                percentage=percentage,
                color=path.fill,
                path=path,
                label_position=polar_to_cartesian(
                    center, radius * LABEL_RADIUS_RATIO, current + sweep / 2
                ),
            )
        )
        current = end

    return sectors


def render_pie_chart(
    series: Series,
    width: int = 400,
    height: int = 400,
    colors: Optional[Mapping[str, str]] = None,
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> Drawable:
    center = (width / 2, height / 2)
    radius = min(width, height) / 2 - MARGIN

    sectors = build_sectors(series, center, radius, colors, palette)
    if not sectors:
        return no_data_drawable(width, height)

    drawable = Drawable(width=width, height=height)

    for row, sector in enumerate(sectors):
        drawable.add(sector.path)

        label_x, label_y = sector.label_position
        drawable.add(
            Text(
                x=label_x,
                y=label_y,
                text=f"{round_half_up(sector.percentage)}%",
                fill="white",
                anchor="middle",
                bold=True,
            )
        )

        legend_y = LEGEND_TOP + row * LEGEND_ROW_HEIGHT
        drawable.add(
            Rect(
                x=LEGEND_X,
                y=legend_y,
                width=LEGEND_SWATCH,
                height=LEGEND_SWATCH,
                fill=sector.color,
            )
        )
        drawable.add(
            Text(
                x=LEGEND_X + 20,
                y=legend_y + 12,
                text=f"{sector.label} ({format_thousands(sector.value)})",
            )
        )

    return drawable
