"""
Registration marks and graphic scale bar for cutting files.
"""

from .constants import (
    FONT_FAMILY,
    REGISTRATION_COLOR,
    REGISTRATION_SIZE,
    SCALE_BAR_HEIGHT,
    SCALE_BAR_LENGTH,
    SCALE_BAR_SEGMENTS,
    THIN_LINE_WIDTH,
)
from .dimensions import format_measurement


def create_registration_mark(x: float, y: float, size: float = REGISTRATION_SIZE) -> str:
    """
    Create a crosshair-and-circle alignment mark centered on (x, y).

    Args:
        x: Mark center x
        y: Mark center y
        size: Arm length of the crosshair; the circle radius is half of it

    Returns:
        SVG string containing the mark
    """
    stroke = f'stroke="{REGISTRATION_COLOR}" stroke-width="{THIN_LINE_WIDTH}"'
    return f'''
        <g class="registration-mark">
            <circle cx="{x}" cy="{y}" r="{size / 2}" fill="none" {stroke}/>
            <line x1="{x - size}" y1="{y}" x2="{x + size}" y2="{y}" {stroke}/>
            <line x1="{x}" y1="{y - size}" x2="{x}" y2="{y + size}" {stroke}/>
        </g>'''


def scale_bar_real_length(scale: float, bar_length: float = SCALE_BAR_LENGTH) -> float:
    """Real length (mm) represented by a bar of bar_length canvas units."""
    return bar_length / scale


def create_scale_bar(
    x: float,
    y: float,
    scale: float,
    bar_length: float = SCALE_BAR_LENGTH,
    segments: int = SCALE_BAR_SEGMENTS,
) -> str:
    """
    Create an alternating black/white graphic scale bar.

    The label gives the real length the whole bar stands for at the
    drawing's scale (canvas units per millimeter).

    Args:
        x: Left edge of the bar
        y: Top edge of the bar
        scale: Canvas units per real millimeter
        bar_length: Bar length in canvas units
        segments: Number of alternating segments

    Returns:
        SVG string containing the scale bar
    """
    segment_length = bar_length / segments

    parts = ['<g class="scale-bar">']
    for i in range(segments):
        fill = "#000000" if i % 2 == 0 else "#ffffff"
        parts.append(
            f'<rect x="{x + i * segment_length}" y="{y}" width="{segment_length}" '
            f'height="{SCALE_BAR_HEIGHT}" fill="{fill}" stroke="#000000" '
            f'stroke-width="{THIN_LINE_WIDTH}"/>'
        )

    label = format_measurement(scale_bar_real_length(scale, bar_length))
    parts.append(
        f'<text x="{x + bar_length / 2}" y="{y + 20}" font-family="{FONT_FAMILY}" '
        f'font-size="10" fill="#000000" text-anchor="middle">Escala: {label}</text>'
    )
    parts.append('</g>')
    return "\n        ".join(parts)
