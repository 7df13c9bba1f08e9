"""
cutgen - cutting-file generation for furniture and stand production manuals.

Turns component descriptions (shape, real dimensions, material) into
scaled, annotated SVG cutting files and packages them for download.

Usage:
    from cutgen import load_components, generate_all, build_archive

    project = load_components("manual.yaml")
    svg_files = generate_all(project.components)
    archive = build_archive(svg_files, project.components, project.name)
    archive.save("output")
"""

from .components import (
    Component,
    Dimensions,
    MaterialSpec,
    NormalizedComponent,
    ProjectInput,
    ShapeKind,
    load_components,
    normalize_component,
    parse_project,
)
from .drawing_generator import CanvasConfig, CuttingDrawing, generate_all, generate_svg
from .export import build_archive, download_all_as_zip, export_one, sanitize_filename

__version__ = "0.1.0"

__all__ = [
    'Component',
    'Dimensions',
    'MaterialSpec',
    'NormalizedComponent',
    'ProjectInput',
    'ShapeKind',
    'CanvasConfig',
    'CuttingDrawing',
    'load_components',
    'normalize_component',
    'parse_project',
    'generate_svg',
    'generate_all',
    'build_archive',
    'download_all_as_zip',
    'export_one',
    'sanitize_filename',
]
