"""
Tests for canvas configuration.
"""

import pytest

from cutgen.drawing_generator.canvas import DEFAULT_CANVAS, CanvasConfig


class TestCanvasConfig:

    def test_defaults(self):
        canvas = CanvasConfig()
        assert (canvas.width, canvas.height) == (800, 600)
        assert canvas.padding == 60
        assert canvas.dimension_offset == 30

    def test_drawable_area(self):
        area = DEFAULT_CANVAS.drawable_area
        assert (area.x, area.y, area.width, area.height) == (60, 60, 680, 480)

    def test_corner_points(self):
        assert DEFAULT_CANVAS.corner_points == [(20, 20), (780, 20), (780, 580), (20, 580)]

    @pytest.mark.parametrize("padding", [300, 400, 1000])
    def test_padding_must_leave_drawable_area(self, padding):
        with pytest.raises(ValueError):
            CanvasConfig(padding=padding)

    def test_from_dict_coerces_and_ignores_unknown(self):
        canvas = CanvasConfig.from_dict({"width": "1000", "padding": 40, "color": "red"})
        assert canvas.width == 1000.0
        assert canvas.padding == 40.0
        assert canvas.height == 600.0

    def test_from_dict_empty(self):
        assert CanvasConfig.from_dict(None) == DEFAULT_CANVAS


class TestCanvasYaml:

    def test_round_trip(self, tmp_path):
        path = tmp_path / "canvas.yaml"
        canvas = CanvasConfig(width=1024, height=768, padding=50, dimension_offset=25)
        canvas.to_yaml(path)
        assert CanvasConfig.from_yaml(path) == canvas

    def test_partial_file(self, tmp_path):
        path = tmp_path / "canvas.yaml"
        path.write_text("padding: 40\n", encoding="utf-8")
        canvas = CanvasConfig.from_yaml(path)
        assert canvas.padding == 40
        assert canvas.width == 800

    def test_empty_file(self, tmp_path):
        path = tmp_path / "canvas.yaml"
        path.write_text("", encoding="utf-8")
        assert CanvasConfig.from_yaml(path) == DEFAULT_CANVAS

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "canvas.yaml"
        path.write_text("- 800\n- 600\n", encoding="utf-8")
        with pytest.raises(ValueError):
            CanvasConfig.from_yaml(path)
