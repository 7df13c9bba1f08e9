"""
Tests for the cutgen command-line interface.
"""

import zipfile

import pytest
import yaml
from click.testing import CliRunner

from cutgen.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def manual_file(tmp_path, manual_data):
    path = tmp_path / "manual.yaml"
    path.write_text(yaml.safe_dump(manual_data, allow_unicode=True), encoding="utf-8")
    return path


class TestRender:

    def test_writes_one_svg_per_component(self, runner, manual_file, tmp_path):
        out = tmp_path / "cortes"
        result = runner.invoke(cli, ["render", str(manual_file), "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in out.iterdir()) == ["panel_frontal_c1.svg", "repisa_curva_c2.svg"]
        assert "Stand Expo 2026" in result.output

    def test_irregular_piece_uses_path(self, runner, manual_file, tmp_path):
        out = tmp_path / "cortes"
        runner.invoke(cli, ["render", str(manual_file), "-o", str(out)])
        svg = (out / "repisa_curva_c2.svg").read_text(encoding="utf-8")
        assert 'class="fold-line"' in svg
        assert "Notas: Respetar veta" in svg

    def test_custom_canvas(self, runner, manual_file, tmp_path):
        config = tmp_path / "canvas.yaml"
        config.write_text("width: 1000\nheight: 700\n", encoding="utf-8")
        out = tmp_path / "cortes"

        result = runner.invoke(cli, ["render", str(manual_file), "-o", str(out), "-c", str(config)])

        assert result.exit_code == 0, result.output
        assert 'viewBox="0 0 1000 700"' in (out / "panel_frontal_c1.svg").read_text(encoding="utf-8")

    def test_no_components(self, runner, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("[]\n", encoding="utf-8")
        result = runner.invoke(cli, ["render", str(path), "-o", str(tmp_path / "out")])
        assert result.exit_code != 0
        assert "No components found" in result.output

    def test_unsupported_data(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("42\n", encoding="utf-8")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code != 0
        assert "Could not read components" in result.output

    def test_invalid_canvas_config(self, runner, manual_file, tmp_path):
        config = tmp_path / "canvas.yaml"
        config.write_text("padding: 500\n", encoding="utf-8")
        result = runner.invoke(cli, ["render", str(manual_file), "-c", str(config)])
        assert result.exit_code != 0
        assert "Invalid canvas config" in result.output


class TestArchive:

    def test_creates_zip(self, runner, manual_file, tmp_path):
        result = runner.invoke(cli, ["archive", str(manual_file), "-o", str(tmp_path)])

        assert result.exit_code == 0, result.output
        path = tmp_path / "stand_expo_2026_archivos_corte.zip"
        assert "2 cutting files packaged" in result.output
        with zipfile.ZipFile(path) as zf:
            assert sorted(zf.namelist()) == [
                "archivos_corte/",
                "archivos_corte/LEEME.txt",
                "archivos_corte/panel_frontal_c1.svg",
                "archivos_corte/repisa_curva_c2.svg",
            ]

    def test_project_name_override(self, runner, manual_file, tmp_path):
        result = runner.invoke(
            cli, ["archive", str(manual_file), "-o", str(tmp_path), "--project", "Mi Stand"]
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "mi_stand_archivos_corte.zip").exists()


class TestShowConfig:

    def test_defaults(self, runner):
        result = runner.invoke(cli, ["show-config"])
        assert result.exit_code == 0
        assert "Canvas:         800 x 600" in result.output
        assert "Drawable area:  680 x 480 at (60, 60)" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert "0.1.0" in result.output
