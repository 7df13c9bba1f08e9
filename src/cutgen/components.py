"""
Component data model for cutting-file generation.

A Component is one fabricated piece of a furniture or stand design, as
produced by the upstream AI analysis or reloaded from a saved project.
Components are read-only inputs: rendering works from the fully
defaulted NormalizedComponent built by normalize_component().

Components can be loaded from YAML or JSON, either as a plain list or as
a full production manual:

    proyecto:
      nombre: Stand Expo
    componentes:
      - id: c1
        nombre: Panel frontal
        dimensiones: {largo: 120, ancho: 1.8, alto: 80, unidad: cm, forma: rectangulo}
        material: {tipo: MDF, especificaciones: 18 mm, cantidad: 2, unidadCantidad: pzas}
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from .path_utils import (
    NORMALIZED_PATH_SIZE,
    optimize_svg_path,
    path_fits_normalized_box,
    validate_svg_path,
)

# Model values are centimeters; drawings work in millimeters
CM_TO_MM = 10

# Defaults applied when a dimension is missing or zero (model units)
DEFAULT_FOOTPRINT = 100
DEFAULT_DEPTH = 10


class ShapeKind(Enum):
    """Closed set of outlines the shape renderer knows how to draw."""

    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    L_SHAPE = "L-shape"
    IRREGULAR = "irregular"

    @classmethod
    def parse(cls, value: "ShapeKind | str | None") -> "ShapeKind":
        """
        Normalize a boundary value to a ShapeKind.

        Missing values become RECTANGLE silently; unknown values become
        RECTANGLE with a warning. Never raises.
        """
        if isinstance(value, ShapeKind):
            return value
        if value is None:
            return cls.RECTANGLE

        key = str(value).strip().lower()
        if not key:
            return cls.RECTANGLE

        kind = _SHAPE_ALIASES.get(key)
        if kind is None:
            warnings.warn(
                f"Unrecognized shape kind {value!r}, drawing as rectangle",
                UserWarning,
                stacklevel=2,
            )
            return cls.RECTANGLE
        return kind


_SHAPE_ALIASES = {
    "rectangle": ShapeKind.RECTANGLE,
    "rectangulo": ShapeKind.RECTANGLE,
    "rectángulo": ShapeKind.RECTANGLE,
    "circle": ShapeKind.CIRCLE,
    "circulo": ShapeKind.CIRCLE,
    "círculo": ShapeKind.CIRCLE,
    "ellipse": ShapeKind.CIRCLE,
    "elipse": ShapeKind.CIRCLE,
    "triangle": ShapeKind.TRIANGLE,
    "triangulo": ShapeKind.TRIANGLE,
    "triángulo": ShapeKind.TRIANGLE,
    "l-shape": ShapeKind.L_SHAPE,
    "l_shape": ShapeKind.L_SHAPE,
    "l": ShapeKind.L_SHAPE,
    "forma_l": ShapeKind.L_SHAPE,
    "irregular": ShapeKind.IRREGULAR,
}


def _to_number(value: Any) -> float:
    """Coerce a loosely typed numeric field; anything unusable becomes 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _format_number(value: float) -> str:
    """Render a model number without a trailing .0 (10.0 -> '10')."""
    return f"{value:g}"


@dataclass(frozen=True)
class Dimensions:
    """
    Real-world size of a component.

    Attributes:
        length: Front-view width (model units, normally cm)
        width: Depth / material thickness, shown as text only
        height: Front-view height (model units)
        unit: Display unit string
        shape: Raw shape kind as supplied upstream
    """
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    unit: str = "cm"
    shape: str | None = None


@dataclass(frozen=True)
class MaterialSpec:
    """Material the piece is cut from."""
    type: str = ""
    spec_summary: str = ""
    quantity: float = 0.0
    quantity_unit: str = ""


@dataclass(frozen=True)
class Component:
    """
    One fabricated piece.

    Attributes:
        id: Stable unique identifier, used as the drawing and file key
        name: Human-readable label
        dimensions: Front-view footprint and thickness
        material: Material specification
        cut_path: Normalized (0-100) outline for irregular pieces
        fold_path: Normalized (0-100) fold/score line
        notes: Free text appended to the technical info
        description: Upstream description, carried through untouched
        process: Upstream fabrication steps, carried through untouched
    """
    id: str
    name: str
    dimensions: Dimensions = field(default_factory=Dimensions)
    material: MaterialSpec = field(default_factory=MaterialSpec)
    cut_path: str | None = None
    fold_path: str | None = None
    notes: str | None = None
    description: str = ""
    process: tuple[str, ...] = ()

    @property
    def shape_kind(self) -> ShapeKind:
        """Resolved shape kind (see ShapeKind.parse)."""
        return ShapeKind.parse(self.dimensions.shape)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Component":
        """
        Build a Component from an English or Spanish (upstream) mapping.
        """
        dims = data.get("dimensions") or data.get("dimensiones") or {}
        material = data.get("material") or {}
        if isinstance(material, str):
            material = {"type": material}

        process = data.get("process") or data.get("proceso") or ()
        # A single step may be given as a bare string
        if not isinstance(process, (list, tuple)):
            process = (process,)

        shape = (
            data.get("shape_kind") or data.get("shapeKind")
            or dims.get("shape") or dims.get("shapeKind") or dims.get("forma")
        )

        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name") or data.get("nombre") or ""),
            dimensions=Dimensions(
                length=_to_number(dims.get("length", dims.get("largo"))),
                width=_to_number(dims.get("width", dims.get("ancho"))),
                height=_to_number(dims.get("height", dims.get("alto"))),
                unit=str(dims.get("unit") or dims.get("unidad") or "cm"),
                shape=shape,
            ),
            material=MaterialSpec(
                type=str(material.get("type") or material.get("tipo") or ""),
                spec_summary=str(
                    material.get("spec_summary") or material.get("specSummary")
                    or material.get("especificaciones") or ""
                ),
                quantity=_to_number(material.get("quantity", material.get("cantidad"))),
                quantity_unit=str(
                    material.get("quantity_unit") or material.get("quantityUnit")
                    or material.get("unidadCantidad") or ""
                ),
            ),
            cut_path=data.get("cut_path") or data.get("cutPath") or data.get("svgPath"),
            fold_path=data.get("fold_path") or data.get("foldPath"),
            notes=data.get("notes") or data.get("notas"),
            description=str(data.get("description") or data.get("descripcion") or ""),
            process=tuple(str(step) for step in process),
        )


@dataclass(frozen=True)
class NormalizedComponent:
    """
    A component with every default applied, ready for rendering.

    Real sizes are in millimeters. cut_path is None whenever the supplied
    path was missing or unsafe to embed; fold_path is only kept alongside
    a usable cut_path.
    """
    id: str
    name: str
    shape_kind: ShapeKind
    real_width_mm: float
    real_height_mm: float
    real_depth_mm: float
    thickness_label: str
    quantity_label: str
    material_type: str
    cut_path: str | None = None
    fold_path: str | None = None
    notes: str | None = None


def _clean_path(path_d: str | None, label: str, component_id: str) -> str | None:
    if not path_d:
        return None
    if not validate_svg_path(path_d):
        warnings.warn(
            f"Ignoring invalid {label} on component {component_id!r}",
            UserWarning,
            stacklevel=3,
        )
        return None
    if not path_fits_normalized_box(path_d):
        # Kept as drawn; the outline will spill past its dimension lines
        warnings.warn(
            f"The {label} on component {component_id!r} leaves the "
            f"0-{NORMALIZED_PATH_SIZE} box",
            UserWarning,
            stacklevel=3,
        )
    return optimize_svg_path(path_d)


def _usable_size(value: Any, default: float) -> float:
    """A positive size that stays finite in millimeters, else the default."""
    size = _to_number(value)
    if size > 0 and math.isfinite(size * CM_TO_MM):
        return size
    return default


def normalize_component(
    component: Component,
    *,
    footprint_default: float = DEFAULT_FOOTPRINT,
    depth_default: float = DEFAULT_DEPTH,
) -> NormalizedComponent:
    """
    Apply the defaulting policy once, producing the value the renderer uses.

    - length/height missing, <= 0 or not finite -> footprint_default (model units)
    - width missing, <= 0 or not finite -> depth_default
    - unknown shape kind -> rectangle
    - invalid cut path -> treated as missing (irregular pieces then draw
      the warning placeholder)
    """
    dims = component.dimensions
    length = _usable_size(dims.length, footprint_default)
    height = _usable_size(dims.height, footprint_default)
    depth = _usable_size(dims.width, depth_default)
    unit = dims.unit or "cm"

    cut_path = _clean_path(component.cut_path, "cut path", component.id)
    fold_path = _clean_path(component.fold_path, "fold path", component.id) if cut_path else None

    material = component.material
    quantity = f"{_format_number(material.quantity)} {material.quantity_unit}".rstrip()

    return NormalizedComponent(
        id=component.id,
        name=component.name,
        shape_kind=component.shape_kind,
        real_width_mm=length * CM_TO_MM,
        real_height_mm=height * CM_TO_MM,
        real_depth_mm=depth * CM_TO_MM,
        thickness_label=f"{_format_number(depth)} {unit}",
        quantity_label=quantity,
        material_type=material.type,
        cut_path=cut_path,
        fold_path=fold_path,
        notes=component.notes or None,
    )


# =============================================================================
# LOADING
# =============================================================================

@dataclass
class ProjectInput:
    """Project name plus the components loaded for it."""
    name: str = "proyecto"
    components: list[Component] = field(default_factory=list)


def parse_project(data: Any) -> ProjectInput:
    """
    Interpret loaded YAML/JSON data as a project.

    Accepts a list of components, a mapping with components/componentes,
    or a production manual with proyecto.nombre.
    """
    if data is None:
        return ProjectInput()

    if isinstance(data, list):
        items, name = data, None
    elif isinstance(data, dict):
        items = data.get("components") or data.get("componentes") or []
        project = data.get("project") or data.get("proyecto") or {}
        if isinstance(project, dict):
            name = project.get("name") or project.get("nombre")
        else:
            name = str(project)
        name = data.get("project_name") or name
    else:
        raise ValueError(f"Unsupported component data: {type(data).__name__}")

    components = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"Component #{index + 1} is not a mapping")
        components.append(Component.from_dict(item))

    return ProjectInput(name=name or "proyecto", components=components)


def load_components(path: str | Path) -> ProjectInput:
    """Load a project from a YAML or JSON file."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return parse_project(data)
