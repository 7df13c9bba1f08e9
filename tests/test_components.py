#!/usr/bin/env python3
"""
Tests for the component data model.

Tests cover:
- Shape kind normalization (aliases, unknown values)
- Loading from English and Spanish (upstream) mappings
- The single normalization step and its defaults
- Project loading from YAML and JSON
"""

import json
import warnings

import pytest
import yaml

from cutgen.components import (
    Component,
    Dimensions,
    ShapeKind,
    load_components,
    normalize_component,
    parse_project,
)
from cutgen.drawing_generator.drawing import generate_svg


class TestShapeKind:
    """Tests for ShapeKind.parse."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("rectangle", ShapeKind.RECTANGLE),
            ("rectangulo", ShapeKind.RECTANGLE),
            ("circle", ShapeKind.CIRCLE),
            ("circulo", ShapeKind.CIRCLE),
            ("Triangulo", ShapeKind.TRIANGLE),
            ("L-shape", ShapeKind.L_SHAPE),
            ("L", ShapeKind.L_SHAPE),
            ("irregular", ShapeKind.IRREGULAR),
            (ShapeKind.CIRCLE, ShapeKind.CIRCLE),
        ],
    )
    def test_known_values(self, value, expected):
        """Known names and Spanish aliases resolve to their kind."""
        assert ShapeKind.parse(value) is expected

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_value_is_rectangle_without_warning(self, value):
        """Missing shape kinds silently default to rectangle."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert ShapeKind.parse(value) is ShapeKind.RECTANGLE

    def test_unknown_value_degrades_to_rectangle(self):
        """Unknown shape kinds fall back to rectangle with a warning."""
        with pytest.warns(UserWarning, match="hexagon"):
            assert ShapeKind.parse("hexagon") is ShapeKind.RECTANGLE


class TestComponentFromDict:
    """Tests for Component.from_dict."""

    def test_spanish_fields(self, manual_data):
        """Upstream Spanish field names are mapped."""
        component = Component.from_dict(manual_data["componentes"][1])
        assert component.id == "c2"
        assert component.name == "Repisa curva"
        assert component.dimensions.length == 60
        assert component.dimensions.width == 1.5
        assert component.dimensions.height == 30
        assert component.shape_kind is ShapeKind.IRREGULAR
        assert component.material.type == "Triplay"
        assert component.material.quantity_unit == "pza"
        assert component.cut_path.startswith("M0,100")
        assert component.fold_path == "M0,50 L100,50"
        assert component.notes == "Respetar veta"

    def test_english_fields(self):
        """English field names from the data model are mapped."""
        component = Component.from_dict({
            "id": 7,
            "name": "Base",
            "shapeKind": "circle",
            "dimensions": {"length": 40, "width": 2, "height": 40, "unit": "cm"},
            "material": {"type": "Acrylic", "specSummary": "3 mm", "quantity": 1, "quantityUnit": "pc"},
            "cutPath": None,
        })
        assert component.id == "7"
        assert component.shape_kind is ShapeKind.CIRCLE
        assert component.material.spec_summary == "3 mm"

    def test_non_numeric_dimensions_become_zero(self):
        """Unusable numeric fields are coerced to 0 (then defaulted later)."""
        component = Component.from_dict({"id": "x", "nombre": "X", "dimensiones": {"largo": "abc"}})
        assert component.dimensions.length == 0.0
        assert component.dimensions.unit == "cm"

    def test_process_is_carried_through(self, manual_data):
        """Fabrication steps are kept as an immutable tuple."""
        component = Component.from_dict(manual_data["componentes"][0])
        assert component.process == ("Cortar", "Lijar")

    def test_single_process_step_as_string(self):
        """A bare string is one step, not a sequence of characters."""
        component = Component.from_dict({"id": "x", "nombre": "X", "proceso": "Cortar con router"})
        assert component.process == ("Cortar con router",)


class TestNormalizeComponent:
    """Tests for the single defaulting step."""

    def test_real_sizes_in_millimeters(self, make_component):
        """Model centimeters become millimeters."""
        normalized = normalize_component(make_component(length=120, height=80, width=1.8))
        assert normalized.real_width_mm == 1200
        assert normalized.real_height_mm == 800
        assert normalized.real_depth_mm == 18
        assert normalized.thickness_label == "1.8 cm"
        assert normalized.quantity_label == "2 pzas"

    @pytest.mark.parametrize("length,height", [(0, 0), (0, 50), (-5, 50)])
    def test_missing_footprint_uses_default(self, make_component, length, height):
        """Zero or negative length/height default to 100 units."""
        normalized = normalize_component(make_component(length=length, height=height))
        assert normalized.real_width_mm == 1000
        assert normalized.real_height_mm == (height * 10 if height > 0 else 1000)

    @pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan"), 1e308])
    def test_non_finite_sizes_use_defaults(self, make_component, bad):
        """Sizes that are not finite in millimeters fall back to the defaults."""
        normalized = normalize_component(make_component(length=bad, height=bad, width=bad))
        assert normalized.real_width_mm == 1000
        assert normalized.real_height_mm == 1000
        assert normalized.real_depth_mm == 100

    def test_infinite_length_still_renders(self, make_component):
        svg = generate_svg(make_component(length=float("inf"), height=50))
        assert 'viewBox="0 0 800 600"' in svg
        assert "Escala:" in svg

    def test_missing_depth_uses_default(self, make_component):
        """Zero thickness defaults to 10 units."""
        normalized = normalize_component(make_component(width=0))
        assert normalized.real_depth_mm == 100
        assert normalized.thickness_label == "10 cm"

    def test_component_is_not_modified(self, make_component):
        """Normalization leaves the input untouched."""
        component = make_component(length=0, height=0, width=0)
        normalize_component(component)
        assert component.dimensions == Dimensions(length=0, width=0, height=0, unit="cm", shape="rectangle")

    def test_invalid_cut_path_is_dropped(self, make_component):
        """A cut path with non-path characters is treated as missing."""
        component = make_component(shape="irregular", cut_path='M0,0 L10,10"/><script/>',
                                   fold_path="M0,0 L1,1")
        with pytest.warns(UserWarning, match="cut path"):
            normalized = normalize_component(component)
        assert normalized.cut_path is None
        assert normalized.fold_path is None

    def test_fold_path_requires_cut_path(self, make_component):
        """A fold path alone is not kept."""
        normalized = normalize_component(make_component(shape="irregular", fold_path="M0,50 L100,50"))
        assert normalized.fold_path is None

    def test_path_outside_box_warns_but_is_kept(self, make_component):
        """A path spilling past the 0-100 box is still drawn, with a warning."""
        component = make_component(shape="irregular", cut_path="M0,0 L140,0 L140,100 Z")
        with pytest.warns(UserWarning, match="leaves the 0-100 box"):
            normalized = normalize_component(component)
        assert normalized.cut_path == "M0,0L140,0L140,100Z"

    def test_path_inside_box_does_not_warn(self, make_component):
        component = make_component(shape="irregular", cut_path="M0,100 L0,0 Q50,40 100,0 L100,100 Z",
                                   fold_path="M0,50 L100,50")
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            normalized = normalize_component(component)
        assert normalized.fold_path == "M0,50L100,50"

    def test_cut_path_is_tidied(self, make_component):
        """Valid paths are whitespace-normalized."""
        normalized = normalize_component(
            make_component(shape="irregular", cut_path="M 0, 0  L 100, 0 L 100, 100 Z")
        )
        assert normalized.cut_path == "M0,0L100,0L100,100Z"


class TestLoadComponents:
    """Tests for project loading."""

    def test_production_manual(self, manual_data):
        """A full manual gives the project name and all components."""
        project = parse_project(manual_data)
        assert project.name == "Stand Expo 2026"
        assert [c.id for c in project.components] == ["c1", "c2"]

    def test_plain_list(self, manual_data):
        """A bare list uses the default project name."""
        project = parse_project(manual_data["componentes"])
        assert project.name == "proyecto"
        assert len(project.components) == 2

    def test_none_is_empty_project(self):
        """An empty file is an empty project."""
        assert parse_project(None).components == []

    def test_invalid_data_raises(self):
        """Scalars and non-mapping items are rejected."""
        with pytest.raises(ValueError):
            parse_project("hello")
        with pytest.raises(ValueError, match="#2"):
            parse_project([{"id": "a"}, "b"])

    def test_load_yaml(self, tmp_path, manual_data):
        """Projects load from YAML."""
        path = tmp_path / "manual.yaml"
        path.write_text(yaml.safe_dump(manual_data, allow_unicode=True), encoding="utf-8")
        project = load_components(path)
        assert project.name == "Stand Expo 2026"
        assert project.components[1].shape_kind is ShapeKind.IRREGULAR

    def test_load_json(self, tmp_path, manual_data):
        """Projects load from JSON (the upstream AI output format)."""
        path = tmp_path / "manual.json"
        path.write_text(json.dumps(manual_data), encoding="utf-8")
        project = load_components(path)
        assert len(project.components) == 2
