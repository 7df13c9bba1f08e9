"""
Shared fixtures for cutgen tests.
"""

import pytest

from cutgen.components import Component, Dimensions, MaterialSpec


def build_component(
    component_id: str = "c1",
    name: str = "Panel frontal",
    length: float = 120,
    height: float = 80,
    width: float = 1.8,
    shape: str | None = "rectangle",
    cut_path: str | None = None,
    fold_path: str | None = None,
    notes: str | None = None,
) -> Component:
    """Create a component with sensible defaults for tests."""
    return Component(
        id=component_id,
        name=name,
        dimensions=Dimensions(length=length, width=width, height=height, unit="cm", shape=shape),
        material=MaterialSpec(type="MDF", spec_summary="18 mm", quantity=2, quantity_unit="pzas"),
        cut_path=cut_path,
        fold_path=fold_path,
        notes=notes,
    )


@pytest.fixture
def make_component():
    """Factory fixture for components."""
    return build_component


@pytest.fixture
def manual_data() -> dict:
    """A production manual in the upstream (Spanish) format."""
    return {
        "proyecto": {"nombre": "Stand Expo 2026", "descripcion": "Stand modular"},
        "componentes": [
            {
                "id": "c1",
                "nombre": "Panel frontal",
                "descripcion": "Panel principal",
                "dimensiones": {"largo": 120, "ancho": 1.8, "alto": 80, "unidad": "cm", "forma": "rectangulo"},
                "material": {"tipo": "MDF", "especificaciones": "18 mm", "cantidad": 2, "unidadCantidad": "pzas"},
                "proceso": ["Cortar", "Lijar"],
            },
            {
                "id": "c2",
                "nombre": "Repisa curva",
                "dimensiones": {"largo": 60, "ancho": 1.5, "alto": 30, "unidad": "cm", "forma": "irregular"},
                "material": {"tipo": "Triplay", "especificaciones": "15 mm", "cantidad": 1, "unidadCantidad": "pza"},
                "svgPath": "M0,100 L0,0 Q50,40 100,0 L100,100 Z",
                "foldPath": "M0,50 L100,50",
                "notas": "Respetar veta",
            },
        ],
        "consumibles": [],
    }
