"""
Technical information block and metadata header for cutting files.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax.saxutils import escape

from ..components import NormalizedComponent
from .constants import (
    FONT_FAMILY,
    MUTED_TEXT_COLOR,
    TECH_INFO_FONT_SIZE,
    TECH_INFO_HEADING_SIZE,
    TECH_INFO_LINE_HEIGHT,
)
from .dimensions import format_measurement

DRAWING_TITLE = "ARCHIVO DE CORTE - VISTA FRONTAL"


@dataclass(frozen=True)
class TextLine:
    """One line of text to stack in a block."""
    text: str
    font_size: float = TECH_INFO_FONT_SIZE
    bold: bool = False


@dataclass(frozen=True)
class PositionedText:
    """A text line with its resolved position."""
    x: float
    y: float
    line: TextLine

    def to_svg(self, fill: str = "#000000") -> str:
        weight = ' font-weight="bold"' if self.line.bold else ""
        return (
            f'<text x="{self.x}" y="{self.y}" font-family="{FONT_FAMILY}" '
            f'font-size="{self.line.font_size}"{weight} fill="{fill}">'
            f'{escape(self.line.text)}</text>'
        )


def layout_text_lines(
    x: float,
    y: float,
    lines: list[TextLine],
    line_height: float = TECH_INFO_LINE_HEIGHT,
) -> tuple[list[PositionedText], float]:
    """
    Stack lines downward from (x, y).

    Returns:
        (positioned lines, next free y)
    """
    positioned = [
        PositionedText(x=x, y=y + i * line_height, line=line)
        for i, line in enumerate(lines)
    ]
    return positioned, y + len(lines) * line_height


def technical_info_lines(component: NormalizedComponent) -> list[TextLine]:
    """The lines shown in the technical information block."""
    width = format_measurement(component.real_width_mm)
    height = format_measurement(component.real_height_mm)

    lines = [
        TextLine("INFORMACIÓN TÉCNICA", font_size=TECH_INFO_HEADING_SIZE, bold=True),
        TextLine(f"Componente: {component.name}"),
        TextLine(f"Material: {component.material_type}"),
        TextLine(f"Grosor: {component.thickness_label}"),
        TextLine(f"Cantidad: {component.quantity_label}"),
        TextLine(f"Vista: FRONTAL ({width} × {height})"),
    ]
    if component.notes:
        lines.append(TextLine(f"Notas: {component.notes}"))
    return lines


def create_technical_info(component: NormalizedComponent, x: float, y: float) -> str:
    """Create the technical information block with its first baseline at (x, y)."""
    positioned, _ = layout_text_lines(x, y, technical_info_lines(component))
    body = "\n            ".join(p.to_svg() for p in positioned)
    return f'''
        <g class="technical-info">
            {body}
        </g>'''


def create_metadata(component_id: str, canvas_width: float) -> str:
    """Create the title line and the component ID in the top margin."""
    return f'''
        <g class="metadata">
            <text x="{canvas_width - 20}" y="15" font-family="{FONT_FAMILY}" font-size="10"
                  fill="{MUTED_TEXT_COLOR}" text-anchor="end">ID: {escape(component_id)}</text>
            <text x="{canvas_width / 2}" y="15" font-family="{FONT_FAMILY}" font-size="12"
                  font-weight="bold" fill="#000000" text-anchor="middle">{DRAWING_TITLE}</text>
        </g>'''
