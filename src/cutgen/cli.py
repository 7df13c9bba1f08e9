"""
Command-line interface for cutting-file generation.

Commands:
- render: Write one SVG (and optionally PDF) cutting file per component
- archive: Package all cutting files plus LEEME.txt into a ZIP
- show-config: Print the canvas configuration in effect

Usage:
    cutgen render manual.yaml -o cortes/
    cutgen archive manual.yaml --project "Stand Expo" -o dist/
    cutgen show-config --config canvas.yaml
"""

from pathlib import Path

import click
import yaml

from .components import ProjectInput, load_components
from .drawing_generator.batch import generate_all
from .drawing_generator.canvas import DEFAULT_CANVAS, CanvasConfig
from .drawing_generator.drawing import CuttingDrawing
from .export.archive import assign_filenames, build_archive
from .export.errors import ExportError

_config_option = click.option(
    "--config", "-c", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Canvas configuration YAML (default: 800x600, padding 60).",
)


def _load_canvas(config_path: Path | None) -> CanvasConfig:
    if config_path is None:
        return DEFAULT_CANVAS
    try:
        return CanvasConfig.from_yaml(config_path)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid canvas config {config_path}: {e}") from e


def _load_project(input_file: Path) -> ProjectInput:
    try:
        project = load_components(input_file)
    except (ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Could not read components from {input_file}: {e}") from e
    if not project.components:
        raise click.ClickException(f"No components found in {input_file}")
    return project


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """cutgen - generate CNC/laser cutting files from component lists."""
    pass


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output", "-o", "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("archivos_corte"),
    show_default=True,
    help="Directory for the generated files.",
)
@click.option("--pdf", is_flag=True, help="Also export a PDF next to each SVG.")
@_config_option
def render(input_file: Path, output_dir: Path, pdf: bool, config_path: Path | None):
    """
    Render one cutting file per component in INPUT_FILE.

    INPUT_FILE is YAML or JSON: a list of components, or a production
    manual with a "componentes" list.
    """
    canvas = _load_canvas(config_path)
    project = _load_project(input_file)
    output_dir.mkdir(parents=True, exist_ok=True)

    click.echo(f"\nRendering: {project.name} ({len(project.components)} components)")
    click.echo("-" * 50)

    filenames = assign_filenames([c.id for c in project.components], project.components)
    for component in project.components:
        drawing = CuttingDrawing(component=component, canvas=canvas)
        svg_path = output_dir / filenames[component.id]
        drawing.export_svg(str(svg_path))
        if pdf:
            try:
                drawing.export_pdf(str(svg_path.with_suffix(".pdf")))
            except ImportError as e:
                raise click.ClickException(str(e)) from e

    click.echo(f"\nDone! Files written to {output_dir}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output", "-o", "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory for the ZIP archive.",
)
@click.option("--project", "-p", "project_name", default=None,
              help="Project name (default: taken from INPUT_FILE).")
@_config_option
def archive(input_file: Path, output_dir: Path, project_name: str | None, config_path: Path | None):
    """Package all cutting files for INPUT_FILE into a ZIP archive."""
    canvas = _load_canvas(config_path)
    project = _load_project(input_file)
    name = project_name or project.name

    svg_files = generate_all(project.components, canvas)
    try:
        result = build_archive(svg_files, project.components, name)
        path = result.save(output_dir)
    except ExportError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"{len(svg_files)} cutting files packaged in {path}")


@cli.command("show-config")
@_config_option
def show_config(config_path: Path | None):
    """Print the canvas configuration in effect."""
    canvas = _load_canvas(config_path)
    area = canvas.drawable_area

    click.echo(f"Canvas:         {canvas.width:g} x {canvas.height:g}")
    click.echo(f"Padding:        {canvas.padding:g}")
    click.echo(f"Drawable area:  {area.width:g} x {area.height:g} at ({area.x:g}, {area.y:g})")
    click.echo(f"Dim. offset:    {canvas.dimension_offset:g}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
