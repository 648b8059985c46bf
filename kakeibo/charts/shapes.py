# kakeibo/charts/shapes.py
"""
Typed records shared by the chart renderers.

Input side:
    DataPoint / Series   - what the dashboard hands to a renderer

Output side:
    Drawable             - canvas size + ordered shape records
    Path, Circle, Line, Rect, Text
    MoveTo, LineTo, ArcTo, ClosePath  - path commands

Renderers only build these records; turning them into markup is the job of
a serializer (see kakeibo/charts/svg.py).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

Point = Tuple[float, float]


@dataclass(frozen=True)
class DataPoint:
    label: str
    value: float
    color: Optional[str] = None


Series = Sequence[DataPoint]


# ---- Path commands ----

@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class ArcTo:
    rx: float
    ry: float
    rotation: float
    large_arc: int
    sweep: int
    x: float
    y: float


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, LineTo, ArcTo, ClosePath]


# ---- Shapes ----

@dataclass(frozen=True)
class Path:
    commands: Tuple[PathCommand, ...]
    fill: str = "none"
    stroke: Optional[str] = None
    stroke_width: Optional[float] = None


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: str


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = 1


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    font_size: int = 12
    fill: str = "#333"
    anchor: Optional[str] = None
    bold: bool = False


Shape = Union[Path, Circle, Line, Rect, Text]


@dataclass
class Drawable:
    """
    Backend-agnostic chart output: shapes at absolute pixel coordinates on a
    width x height canvas. `has_data` is False for the "No data" placeholder.
    """

    width: int
    height: int
    shapes: List[Shape] = field(default_factory=list)
    has_data: bool = True

    def add(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def of_type(self, kind: type) -> List[Shape]:
        return [s for s in self.shapes if isinstance(s, kind)]


def no_data_drawable(width: int, height: int) -> Drawable:
    """
    Placeholder drawable: the requested canvas with a centered "No data" label.
    """
    return Drawable(
        width=width,
        height=height,
        shapes=[Text(x=width / 2, y=height / 2, text="No data", fill="#999", anchor="middle")],
        has_data=False,
    )


def format_thousands(value: float) -> str:
    """
    Whole number with '.' as thousands separator: 1234567.8 -> '1.234.568'.
    """
    rounded = round_half_up(value)
    return f"{rounded:,d}".replace(",", ".")


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; labels round .5 away from zero.
    if value < 0:
        return -int(abs(value) + 0.5)
    return int(value + 0.5)
