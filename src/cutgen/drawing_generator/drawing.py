"""
Cutting-file composer.

Builds one self-contained SVG document per component. Layers, back to
front:

    waste-material background
    white contrast panel behind the piece
    piece outline (and fold line)
    width and height dimension lines
    four corner registration marks
    scale bar
    technical information block
    title / ID metadata
    dashed outer border

Every document has the same canvas and viewBox whatever the piece size.
"""

from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from pathlib import Path

# Make PDF export optional using svglib + reportlab (pure Python, no Cairo needed)
try:
    from reportlab.graphics import renderPDF
    from svglib.svglib import svg2rlg
    SVGLIB_AVAILABLE = True
except ImportError:
    SVGLIB_AVAILABLE = False

from ..components import Component, NormalizedComponent, normalize_component
from .annotations import create_registration_mark, create_scale_bar
from .canvas import DEFAULT_CANVAS, CanvasConfig
from .constants import (
    BORDER_COLOR,
    BORDER_DASH,
    BORDER_WIDTH,
    CONTRAST_MARGIN,
    FOLD_ARROW_MARKER,
    FOLD_COLOR,
    SCALE_BAR_BOTTOM_OFFSET,
    TECH_INFO_BOTTOM_OFFSET,
    TECH_INFO_X,
    USEFUL_MATERIAL_PATTERN,
    WASTE_MATERIAL_PATTERN,
)
from .dimensions import create_dimension_line, format_measurement
from .shapes import ShapeLayout, compute_layout, render_shape
from .technical_info import create_metadata, create_technical_info


def _svg_defs() -> str:
    """Patterns and markers referenced by the document."""
    return f'''
    <defs>
        <!-- Useful material (light wood grain) -->
        <pattern id="{USEFUL_MATERIAL_PATTERN}" x="0" y="0" width="30" height="30" patternUnits="userSpaceOnUse">
            <rect x="0" y="0" width="30" height="30" fill="#fef9f3"/>
            <line x1="0" y1="5" x2="30" y2="5" stroke="#e8dcc8" stroke-width="0.5"/>
            <line x1="0" y1="15" x2="30" y2="15" stroke="#e8dcc8" stroke-width="0.5"/>
            <line x1="0" y1="25" x2="30" y2="25" stroke="#e8dcc8" stroke-width="0.5"/>
        </pattern>

        <!-- Waste material (grid) -->
        <pattern id="{WASTE_MATERIAL_PATTERN}" x="0" y="0" width="20" height="20" patternUnits="userSpaceOnUse">
            <rect x="0" y="0" width="20" height="20" fill="#f8f8f8"/>
            <path d="M 20 0 L 0 0 0 20" fill="none" stroke="#e0e0e0" stroke-width="0.5"/>
        </pattern>

        <!-- Fold line direction marker -->
        <marker id="{FOLD_ARROW_MARKER}" markerWidth="10" markerHeight="10" refX="5" refY="5" orient="auto">
            <path d="M 0 0 L 10 5 L 0 10 z" fill="{FOLD_COLOR}"/>
        </marker>
    </defs>'''


@dataclass
class CuttingDrawing:
    """
    Cutting file for a single component.

    Attributes:
        component: Component to draw (never modified)
        canvas: Canvas geometry shared by the whole batch
    """
    component: Component
    canvas: CanvasConfig = field(default_factory=lambda: DEFAULT_CANVAS)

    _normalized: NormalizedComponent = field(init=False, repr=False)
    _layout: ShapeLayout = field(init=False, repr=False)
    _svg_content: str = field(default="", init=False, repr=False)

    def __post_init__(self):
        """Apply defaults once and fit the piece to the canvas."""
        self._normalized = normalize_component(self.component)
        self._layout = compute_layout(
            self._normalized.real_width_mm,
            self._normalized.real_height_mm,
            self.canvas,
        )

    @property
    def normalized(self) -> NormalizedComponent:
        return self._normalized

    @property
    def layout(self) -> ShapeLayout:
        return self._layout

    def _create_background(self) -> str:
        area = self.canvas.area
        panel = self._layout.bounds.expand(CONTRAST_MARGIN)
        return f'''
    <!-- Background representing waste/raw material -->
    {area.svg_rect(fill=f"url(#{WASTE_MATERIAL_PATTERN})")}

    <!-- White background behind piece for contrast -->
    {panel.svg_rect(fill="#ffffff")}'''

    def _create_dimensions(self) -> str:
        layout = self._layout
        box = layout.bounds
        offset = self.canvas.dimension_offset

        width_label = format_measurement(layout.real_width_mm)
        height_label = format_measurement(layout.real_height_mm)

        return (
            create_dimension_line((box.x, box.bottom), (box.right, box.bottom),
                                  width_label, offset, "horizontal")
            + create_dimension_line((box.right, box.y), (box.right, box.bottom),
                                    height_label, offset, "vertical")
        )

    def _create_registration_marks(self) -> str:
        size = self.canvas.registration_size
        return "".join(
            create_registration_mark(x, y, size) for x, y in self.canvas.corner_points
        )

    def _create_border(self) -> str:
        border = self.canvas.area.inset(1)
        return f'''
    <!-- Border for printing/cutting area -->
    {border.svg_rect(stroke=BORDER_COLOR, stroke_width=BORDER_WIDTH, stroke_dasharray=BORDER_DASH)}'''

    def generate(self) -> str:
        """Generate the complete cutting file as SVG."""
        canvas = self.canvas
        width, height = canvas.width, canvas.height

        svg_header = f'''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg"
     width="{width:g}" height="{height:g}"
     viewBox="0 0 {width:g} {height:g}">'''

        svg_content = [
            _svg_defs(),
            self._create_background(),
            render_shape(self._normalized, self._layout),
            self._create_dimensions(),
            self._create_registration_marks(),
            create_scale_bar(canvas.padding, height - SCALE_BAR_BOTTOM_OFFSET, self._layout.scale),
            create_technical_info(self._normalized, TECH_INFO_X, height - TECH_INFO_BOTTOM_OFFSET),
            create_metadata(self._normalized.id, width),
            self._create_border(),
        ]

        svg_footer = '''
</svg>
'''

        self._svg_content = svg_header + '\n'.join(svg_content) + svg_footer
        return self._svg_content

    def export_svg(self, filepath: str):
        """Export the drawing as SVG file."""
        if not self._svg_content:
            self.generate()

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(self._svg_content)
        print(f"Exported SVG: {filepath}")

    def export_pdf(self, filepath: str):
        """
        Export the drawing as a one-page PDF at canvas size.

        Requires the optional svglib + reportlab dependencies.
        """
        if not SVGLIB_AVAILABLE:
            raise ImportError(
                "PDF export requires svglib and reportlab. "
                "Install with: pip install cutgen[pdf]"
            )

        if not self._svg_content:
            self.generate()

        # svglib reads from a file
        with tempfile.TemporaryDirectory() as tmp_dir:
            svg_path = Path(tmp_dir) / "drawing.svg"
            svg_path.write_text(self._svg_content, encoding="utf-8")
            rl_drawing = svg2rlg(str(svg_path))

        if rl_drawing is None:
            raise ValueError(f"Could not convert cutting file for {self._normalized.id!r} to PDF")

        renderPDF.drawToFile(rl_drawing, filepath)
        print(f"Exported PDF: {filepath}")


def generate_svg(component: Component, canvas: CanvasConfig = DEFAULT_CANVAS) -> str:
    """Generate the cutting file for one component."""
    return CuttingDrawing(component=component, canvas=canvas).generate()
