# kakeibo/charts/svg.py
"""
SVG serializer for chart Drawables.

to_svg(drawable) returns a markupsafe.Markup string so Jinja2 templates can
embed it directly (`{{ pie_svg }}`) without double-escaping. Labels and
attribute values are escaped here.
"""

from typing import List

from markupsafe import Markup, escape

from kakeibo.charts.shapes import (
    ArcTo,
    Circle,
    ClosePath,
    Drawable,
    Line,
    LineTo,
    MoveTo,
    Path,
    PathCommand,
    Rect,
    Shape,
    Text,
)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def fmt(value: float) -> str:
    """
    Compact coordinate: at most 2 decimals, no trailing zeros, no '-0'.
    """
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _attrs(**attrs) -> str:
    parts = []
    for name, value in attrs.items():
        if value is None:
            continue
        if isinstance(value, float):
            value = fmt(value)
        parts.append(f'{name.replace("_", "-")}="{escape(str(value))}"')
    return " ".join(parts)


def path_data(commands: List[PathCommand]) -> str:
    parts = []
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            parts.append(f"M {fmt(cmd.x)} {fmt(cmd.y)}")
        elif isinstance(cmd, LineTo):
            parts.append(f"L {fmt(cmd.x)} {fmt(cmd.y)}")
        elif isinstance(cmd, ArcTo):
            parts.append(
                f"A {fmt(cmd.rx)} {fmt(cmd.ry)} {fmt(cmd.rotation)} "
                f"{cmd.large_arc} {cmd.sweep} {fmt(cmd.x)} {fmt(cmd.y)}"
            )
        elif isinstance(cmd, ClosePath):
            parts.append("Z")
        else:
            raise TypeError(f"Unsupported path command: {cmd!r}")
    return " ".join(parts)


def shape_to_svg(shape: Shape) -> str:
    if isinstance(shape, Path):
        return "<path {}/>".format(
            _attrs(
                d=path_data(shape.commands),
                fill=shape.fill,
                stroke=shape.stroke,
                stroke_width=shape.stroke_width,
            )
        )
    if isinstance(shape, Circle):
        return "<circle {}/>".format(_attrs(cx=shape.cx, cy=shape.cy, r=shape.r, fill=shape.fill))
    if isinstance(shape, Line):
        return "<line {}/>".format(
            _attrs(
                x1=shape.x1,
                y1=shape.y1,
                x2=shape.x2,
                y2=shape.y2,
                stroke=shape.stroke,
                stroke_width=shape.stroke_width,
            )
        )
    if isinstance(shape, Rect):
        return "<rect {}/>".format(
            _attrs(x=shape.x, y=shape.y, width=shape.width, height=shape.height, fill=shape.fill)
        )
    if isinstance(shape, Text):
        attrs = _attrs(
            x=shape.x,
            y=shape.y,
            text_anchor=shape.anchor,
            font_size=shape.font_size,
            font_weight="bold" if shape.bold else None,
            fill=shape.fill,
        )
        return f"<text {attrs}>{escape(shape.text)}</text>"
    raise TypeError(f"Unsupported shape: {shape!r}")


def to_svg(drawable: Drawable) -> Markup:
    body = "".join(shape_to_svg(shape) for shape in drawable.shapes)
    header = _attrs(width=drawable.width, height=drawable.height, xmlns=SVG_NAMESPACE)
    return Markup(f"<svg {header}>{body}</svg>")
