"""
Shape renderer for cutting files.

Scales the front view (length x height) of a piece into the padded
drawing area with a single uniform factor and draws its cut outline.

Layout:
    scale = min(max_width / real_width_mm, max_height / real_height_mm)
    draw_width = real_width_mm * scale
    draw_height = real_height_mm * scale

The piece is aligned to the top-left of the drawable area, like a part
nested against the corner of a sheet.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
from xml.sax.saxutils import escape

import numpy as np

from ..components import NormalizedComponent, ShapeKind
from ..path_utils import NORMALIZED_PATH_SIZE
from .canvas import DEFAULT_CANVAS, CanvasConfig
from .constants import (
    CUT_COLOR,
    CUT_PATH_STROKE_WIDTH,
    CUT_STROKE_WIDTH,
    FOLD_ARROW_MARKER,
    FOLD_COLOR,
    FOLD_DASH,
    FOLD_STROKE_WIDTH,
    FONT_FAMILY,
    MUTED_TEXT_COLOR,
    USEFUL_MATERIAL_PATTERN,
    WARNING_COLOR,
    WARNING_DASH,
)
from .dimensions import format_measurement
from .view_area import ViewArea

CUT_FILL = f"url(#{USEFUL_MATERIAL_PATTERN})"
CUT_STYLE = f'fill="{CUT_FILL}" stroke="{CUT_COLOR}" stroke-width="{CUT_STROKE_WIDTH}"'

IRREGULAR_WARNING_TITLE = "⚠ FORMA IRREGULAR"
IRREGULAR_WARNING_HINT = "Definir path SVG para corte preciso"

# L-shape arms are one third of the bounding box on each axis
L_ARM_FRACTION = 1 / 3


@dataclass(frozen=True)
class ShapeLayout:
    """
    Placement of a piece on the canvas.

    Attributes:
        scale: Canvas units per real millimeter (same on both axes)
        origin_x: Left edge of the piece
        origin_y: Top edge of the piece
        draw_width: Drawn width in canvas units
        draw_height: Drawn height in canvas units
        real_width_mm: Real front-view width
        real_height_mm: Real front-view height
    """
    scale: float
    origin_x: float
    origin_y: float
    draw_width: float
    draw_height: float
    real_width_mm: float
    real_height_mm: float

    @property
    def bounds(self) -> ViewArea:
        """Bounding box of the drawn piece."""
        return ViewArea(self.origin_x, self.origin_y, self.draw_width, self.draw_height)

    def to_canvas(self, unit_points: np.ndarray) -> np.ndarray:
        """Map points from the unit box (0..1 on both axes) onto the piece box."""
        origin = np.array([self.origin_x, self.origin_y])
        size = np.array([self.draw_width, self.draw_height])
        return origin + np.asarray(unit_points, dtype=float) * size


def compute_layout(
    real_width_mm: float,
    real_height_mm: float,
    canvas: CanvasConfig = DEFAULT_CANVAS,
) -> ShapeLayout:
    """
    Fit a real footprint into the canvas's drawable area.

    Sizes must be positive; normalize_component() guarantees that.
    """
    area = canvas.drawable_area
    scale = min(area.width / real_width_mm, area.height / real_height_mm)

    return ShapeLayout(
        scale=scale,
        origin_x=area.x,
        origin_y=area.y,
        draw_width=real_width_mm * scale,
        draw_height=real_height_mm * scale,
        real_width_mm=real_width_mm,
        real_height_mm=real_height_mm,
    )


def _points_attr(points: np.ndarray) -> str:
    return " ".join(f"{x},{y}" for x, y in points.tolist())


def _render_rectangle(component: NormalizedComponent, layout: ShapeLayout) -> str:
    return f'''
        <!-- Rectangle -->
        {layout.bounds.svg_rect(stroke=CUT_COLOR, stroke_width=CUT_STROKE_WIDTH, fill=CUT_FILL, class_="cut-line")}'''


def _render_circle(component: NormalizedComponent, layout: ShapeLayout) -> str:
    # Inscribed in the bounding box, so an ellipse unless width == height
    rx = layout.draw_width / 2
    ry = layout.draw_height / 2
    cx, cy = layout.bounds.center
    return f'''
        <!-- Circle/Ellipse -->
        <ellipse class="cut-line" cx="{cx}" cy="{cy}" rx="{rx}" ry="{ry}" {CUT_STYLE}/>'''


def _render_triangle(component: NormalizedComponent, layout: ShapeLayout) -> str:
    unit = np.array([
        [0.5, 0.0],  # apex, top center
        [0.0, 1.0],  # bottom left
        [1.0, 1.0],  # bottom right
    ])
    return f'''
        <!-- Triangle -->
        <polygon class="cut-line" points="{_points_attr(layout.to_canvas(unit))}" {CUT_STYLE}/>'''


def _render_l_shape(component: NormalizedComponent, layout: ShapeLayout) -> str:
    # Vertical arm on the left, horizontal arm along the bottom
    arm = L_ARM_FRACTION
    unit = np.array([
        [0.0, 0.0],
        [arm, 0.0],
        [arm, 1.0 - arm],
        [1.0, 1.0 - arm],
        [1.0, 1.0],
        [0.0, 1.0],
    ])
    return f'''
        <!-- L-Shape -->
        <polygon class="cut-line" points="{_points_attr(layout.to_canvas(unit))}" {CUT_STYLE}/>'''


def _render_irregular(component: NormalizedComponent, layout: ShapeLayout) -> str:
    if not component.cut_path:
        return _render_irregular_placeholder(layout)

    sx = layout.draw_width / NORMALIZED_PATH_SIZE
    sy = layout.draw_height / NORMALIZED_PATH_SIZE
    size_label = (f"{format_measurement(layout.real_width_mm)} x "
                  f"{format_measurement(layout.real_height_mm)}")

    fold = ""
    if component.fold_path:
        fold = f'''
            <path class="fold-line" d="{component.fold_path}" fill="none"
                  stroke="{FOLD_COLOR}" stroke-width="{FOLD_STROKE_WIDTH}"
                  stroke-dasharray="{FOLD_DASH}" vector-effect="non-scaling-stroke"
                  marker-mid="url(#{FOLD_ARROW_MARKER})"/>'''

    return f'''
        <!-- Irregular Shape - Front View ({size_label}) -->
        <g transform="translate({layout.origin_x}, {layout.origin_y}) scale({sx}, {sy})">
            <path class="cut-line" d="{component.cut_path}" fill="{CUT_FILL}"
                  stroke="{CUT_COLOR}" stroke-width="{CUT_PATH_STROKE_WIDTH}"
                  vector-effect="non-scaling-stroke"
                  stroke-linecap="round" stroke-linejoin="round"/>{fold}
        </g>'''


def _render_irregular_placeholder(layout: ShapeLayout) -> str:
    cx, cy = layout.bounds.center
    rect = layout.bounds.svg_rect(
        stroke=WARNING_COLOR,
        stroke_width=CUT_STROKE_WIDTH,
        fill=CUT_FILL,
        stroke_dasharray=WARNING_DASH,
        class_="shape-warning",
    )
    return f'''
        <!-- Irregular Shape Fallback - Path Not Provided -->
        {rect}
        <text class="shape-warning-text" x="{cx}" y="{cy}" font-family="{FONT_FAMILY}"
              font-size="20" fill="{WARNING_COLOR}" text-anchor="middle"
              dominant-baseline="middle" font-weight="bold">{escape(IRREGULAR_WARNING_TITLE)}</text>
        <text x="{cx}" y="{cy + 25}" font-family="{FONT_FAMILY}" font-size="12"
              fill="{MUTED_TEXT_COLOR}" text-anchor="middle"
              dominant-baseline="middle">{IRREGULAR_WARNING_HINT}</text>'''


ShapeRenderer = Callable[[NormalizedComponent, ShapeLayout], str]

SHAPE_RENDERERS: dict[ShapeKind, ShapeRenderer] = {
    ShapeKind.RECTANGLE: _render_rectangle,
    ShapeKind.CIRCLE: _render_circle,
    ShapeKind.TRIANGLE: _render_triangle,
    ShapeKind.L_SHAPE: _render_l_shape,
    ShapeKind.IRREGULAR: _render_irregular,
}

_missing = set(ShapeKind) - set(SHAPE_RENDERERS)
if _missing:
    raise RuntimeError(f"No renderer for shape kinds: {sorted(k.value for k in _missing)}")


def render_shape(component: NormalizedComponent, layout: ShapeLayout) -> str:
    """Draw the cut outline (and fold line, if any) of a piece."""
    return SHAPE_RENDERERS[component.shape_kind](component, layout)
