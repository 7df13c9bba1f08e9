"""
Drawing Generator Module

Generates CNC/laser cutting files (SVG) for the components of a
furniture or stand production manual.

Features:
- Fixed 800x600 canvas with uniform, aspect-preserving piece scaling
- Rectangle, ellipse, triangle, L-shape and path-defined irregular outlines
- Dimension lines labelled with real sizes (cm / m)
- Registration marks, scale bar, technical information block
- Self-contained documents (all patterns and markers inline)

Usage:
    from cutgen.drawing_generator import CuttingDrawing, generate_all

    drawing = CuttingDrawing(component=component)
    svg = drawing.generate()
    drawing.export_svg("panel.svg")

    svg_files = generate_all(components)
"""

from .annotations import create_registration_mark, create_scale_bar
from .batch import generate_all
from .canvas import DEFAULT_CANVAS, CanvasConfig
from .constants import CANVAS_HEIGHT, CANVAS_WIDTH, PADDING
from .dimensions import DimensionStyle, create_dimension_line, format_measurement
from .drawing import CuttingDrawing, generate_svg
from .shapes import SHAPE_RENDERERS, ShapeLayout, compute_layout, render_shape
from .technical_info import PositionedText, TextLine, create_technical_info, layout_text_lines
from .view_area import ViewArea

__all__ = [
    # Main classes
    'CuttingDrawing',
    'CanvasConfig',
    'ShapeLayout',
    'ViewArea',
    'DimensionStyle',
    'TextLine',
    'PositionedText',
    # Functions
    'generate_svg',
    'generate_all',
    'compute_layout',
    'render_shape',
    'format_measurement',
    'create_dimension_line',
    'create_registration_mark',
    'create_scale_bar',
    'create_technical_info',
    'layout_text_lines',
    # Constants
    'SHAPE_RENDERERS',
    'DEFAULT_CANVAS',
    'CANVAS_WIDTH',
    'CANVAS_HEIGHT',
    'PADDING',
]
