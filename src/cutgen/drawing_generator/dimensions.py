"""
Dimension lines and measurement formatting for cutting files.

Dimension lines are drawn in canvas coordinates but always labelled with
the real size of the piece, formatted in cm or m:

    format_measurement(999)  -> "99.9 cm"
    format_measurement(1000) -> "1 m"
    format_measurement(1234) -> "1.23 m"
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Literal

from .constants import (
    DIMENSION_ARROW_SIZE,
    DIMENSION_COLOR,
    DIMENSION_FONT_SIZE,
    DIMENSION_STROKE_WIDTH,
    FONT_FAMILY,
)

Orientation = Literal["horizontal", "vertical"]

# Wide enough to quantize any finite float to two decimals
_DECIMAL_CONTEXT = Context(prec=400)


def _round_half_up(value: float, quantum: str) -> str:
    return str(Decimal(repr(value)).quantize(Decimal(quantum), rounding=ROUND_HALF_UP,
                                             context=_DECIMAL_CONTEXT))


def format_measurement(mm: float) -> str:
    """
    Format a real length given in millimeters as a cm or m label.

    Lengths of 100 cm or more are shown in meters with two decimals and a
    trailing ".00" removed; shorter lengths in cm with one decimal and a
    trailing ".0" removed. Ties round up (1.125 m -> "1.13 m").
    """
    cm = mm / 10
    if cm >= 100:
        text = _round_half_up(cm / 100, "0.01")
        if text.endswith(".00"):
            text = text[:-3]
        return f"{text} m"

    text = _round_half_up(cm, "0.1")
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text} cm"


@dataclass(frozen=True)
class DimensionStyle:
    """Visual constants for dimension lines."""
    color: str = DIMENSION_COLOR
    stroke_width: float = DIMENSION_STROKE_WIDTH
    arrow_size: float = DIMENSION_ARROW_SIZE
    font_size: float = DIMENSION_FONT_SIZE
    font_family: str = FONT_FAMILY
    horizontal_text_gap: float = 5   # label sits above the line
    vertical_text_gap: float = 10    # label sits right of the line


DEFAULT_DIMENSION_STYLE = DimensionStyle()


def create_dimension_line(
    p1: tuple[float, float],
    p2: tuple[float, float],
    label: str,
    offset: float,
    orientation: Orientation = "horizontal",
    style: DimensionStyle = DEFAULT_DIMENSION_STYLE,
) -> str:
    """
    Create a dimension line with extension lines, arrows and a label.

    For a horizontal dimension the line is drawn at p1.y + offset and spans
    p1.x..p2.x; for a vertical one it is drawn at p1.x + offset and spans
    p1.y..p2.y.

    Args:
        p1: First measured endpoint
        p2: Second measured endpoint
        label: Measurement text (already formatted and escaped)
        offset: Distance from the measured edge to the dimension line
        orientation: "horizontal" or "vertical"
        style: Dimension styling

    Returns:
        SVG group string
    """
    x1, y1 = p1
    x2, y2 = p2
    a = style.arrow_size
    stroke = f'stroke="{style.color}" stroke-width="{style.stroke_width}"'

    if orientation == "vertical":
        x = x1 + offset
        mid_y = (y1 + y2) / 2
        elements = [
            # Extension lines
            f'<line x1="{x1}" y1="{y1}" x2="{x}" y2="{y1}" {stroke}/>',
            f'<line x1="{x2}" y1="{y2}" x2="{x}" y2="{y2}" {stroke}/>',
            # Dimension line
            f'<line x1="{x}" y1="{y1}" x2="{x}" y2="{y2}" {stroke}/>',
            # Arrows
            f'<path d="M{x},{y1} L{x - a},{y1 + a} L{x + a},{y1 + a} Z" fill="{style.color}"/>',
            f'<path d="M{x},{y2} L{x - a},{y2 - a} L{x + a},{y2 - a} Z" fill="{style.color}"/>',
            f'<text x="{x + style.vertical_text_gap}" y="{mid_y}" '
            f'font-family="{style.font_family}" font-size="{style.font_size}" '
            f'fill="{style.color}" dominant-baseline="middle">{label}</text>',
        ]
    elif orientation == "horizontal":
        y = y1 + offset
        mid_x = (x1 + x2) / 2
        elements = [
            f'<line x1="{x1}" y1="{y1}" x2="{x1}" y2="{y}" {stroke}/>',
            f'<line x1="{x2}" y1="{y2}" x2="{x2}" y2="{y}" {stroke}/>',
            f'<line x1="{x1}" y1="{y}" x2="{x2}" y2="{y}" {stroke}/>',
            f'<path d="M{x1},{y} L{x1 + a},{y - a} L{x1 + a},{y + a} Z" fill="{style.color}"/>',
            f'<path d="M{x2},{y} L{x2 - a},{y - a} L{x2 - a},{y + a} Z" fill="{style.color}"/>',
            f'<text x="{mid_x}" y="{y - style.horizontal_text_gap}" '
            f'font-family="{style.font_family}" font-size="{style.font_size}" '
            f'fill="{style.color}" text-anchor="middle">{label}</text>',
        ]
    else:
        raise ValueError(f"Unknown dimension orientation: {orientation!r}")

    body = "\n            ".join(elements)
    return f'''
        <g class="dimension dimension-{orientation}">
            {body}
        </g>'''
