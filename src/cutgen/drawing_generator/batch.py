"""
Batch generation of cutting files.
"""

from collections.abc import Iterable

from ..components import Component
from .canvas import DEFAULT_CANVAS, CanvasConfig
from .drawing import generate_svg


def generate_all(
    components: Iterable[Component],
    canvas: CanvasConfig = DEFAULT_CANVAS,
) -> dict[str, str]:
    """
    Generate one SVG document per component, keyed by component id.

    Components sharing an id overwrite each other; the last one wins.
    """
    svg_files: dict[str, str] = {}
    for component in components:
        svg_files[component.id] = generate_svg(component, canvas)
    return svg_files
