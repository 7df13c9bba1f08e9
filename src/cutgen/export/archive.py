"""
ZIP archive export of cutting files.

Archive layout:

    <project>_archivos_corte.zip
    └── archivos_corte/
        ├── <component name>_<id>.svg
        ├── ...
        └── LEEME.txt
"""

from __future__ import annotations

import io
import re
import zipfile
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Mapping, Sequence

from ..components import Component
from .errors import ArchiveAssemblyError, DownloadError

ARCHIVE_FOLDER = "archivos_corte"
ARCHIVE_SUFFIX = "_archivos_corte.zip"
README_NAME = "LEEME.txt"
FALLBACK_COMPONENT_NAME = "componente"
FALLBACK_PROJECT_NAME = "proyecto"
MAX_FILENAME_LENGTH = 50

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_UNSAFE_ID_RE = re.compile(r"[^A-Za-z0-9_-]")

_RULE = "═" * 63


def sanitize_filename(name: str) -> str:
    """
    Make a name safe for use in a filename.

    Lowercases, collapses every run of non-alphanumeric characters to one
    underscore, strips leading/trailing underscores and truncates to 50
    characters. Idempotent.
    """
    result = _NON_ALNUM_RE.sub("_", (name or "").lower()).strip("_")
    # Truncation can expose a separator at the cut point
    return result[:MAX_FILENAME_LENGTH].rstrip("_")


def safe_id(component_id: str) -> str:
    """Make a component id safe as a path segment."""
    return _UNSAFE_ID_RE.sub("_", str(component_id)) or "_"


def drawing_filename(component_id: str, component: Component | None) -> str:
    """
    Filename for a component's cutting file.

    <sanitized name>_<id>.svg, or componente_<id>.svg when the component
    is unknown or its name sanitizes to nothing.
    """
    base = sanitize_filename(component.name) if component else ""
    return f"{base or FALLBACK_COMPONENT_NAME}_{safe_id(component_id)}.svg"


def archive_filename(project_name: str) -> str:
    """Filename of the ZIP archive for a project."""
    return f"{sanitize_filename(project_name) or FALLBACK_PROJECT_NAME}{ARCHIVE_SUFFIX}"


def _first_by_id(components: Sequence[Component]) -> dict[str, Component]:
    lookup: dict[str, Component] = {}
    for component in components:
        lookup.setdefault(component.id, component)
    return lookup


def assign_filenames(
    component_ids: Sequence[str],
    components: Sequence[Component],
) -> dict[str, str]:
    """
    Map each drawing id to a unique filename inside the archive.

    If two ids still collide after sanitizing, later ones get _2, _3, ...
    """
    lookup = _first_by_id(components)
    used: set[str] = set()
    filenames: dict[str, str] = {}

    for component_id in component_ids:
        filename = drawing_filename(component_id, lookup.get(component_id))
        stem = filename[:-len(".svg")]
        counter = 2
        while filename in used:
            filename = f"{stem}_{counter}.svg"
            counter += 1
        used.add(filename)
        filenames[component_id] = filename

    return filenames


def generate_readme(
    components: Sequence[Component],
    project_name: str,
    generated_on: date | None = None,
    filenames: Mapping[str, str] | None = None,
) -> str:
    """
    Generate the LEEME.txt instructions sheet.

    Deterministic for a given component list, project name and date.
    """
    generated_on = generated_on or date.today()
    filenames = filenames or {}

    contents = "\n".join(
        f"{i}. {c.name} [{c.id}] -> "
        f"{filenames.get(c.id) or drawing_filename(c.id, c)}"
        for i, c in enumerate(components, start=1)
    )

    return f"""ARCHIVOS DE CORTE - {project_name.upper()}
Generado: {generated_on.strftime("%d/%m/%Y")}

{_RULE}

CONTENIDO:
{contents}

{_RULE}

INSTRUCCIONES DE USO:

1. VISTA FRONTAL
   Todos los archivos SVG están en VISTA FRONTAL (largo × alto).
   Esto optimiza la captura de formas irregulares.

2. DIMENSIONES
   Las dimensiones reales están indicadas en cada archivo SVG.
   Verificar escala antes de cortar.

3. MARCAS DE REGISTRO
   Las marcas en las esquinas sirven para alineación.
   Usar como referencia para posicionamiento preciso.

4. LÍNEAS DE CORTE
   - Negro sólido: Líneas de corte
   - Rojo punteado: Líneas de plegado (si aplica)
   - Naranja punteado: Forma irregular sin definir (NO CORTAR)

5. INFORMACIÓN TÉCNICA
   Cada archivo incluye:
   - Nombre del componente
   - Material y grosor
   - Cantidad requerida
   - Dimensiones exactas

6. SOFTWARE COMPATIBLE
   - Adobe Illustrator
   - Inkscape (gratis)
   - CorelDRAW
   - AutoCAD
   - Software CNC/Plotter

{_RULE}

NOTAS IMPORTANTES:
- Los dibujos están escalados para caber en la hoja; usar las cotas
  y la barra de escala, no la medida impresa, para cortar a 1:1
- Respetar dirección de veta del material
- Considerar tolerancias de corte según máquina
- Guardar material sobrante para ajustes

{_RULE}

Para más información, consultar el manual de producción completo.
"""


@dataclass
class ArchiveResult:
    """
    An assembled archive held in memory.

    Attributes:
        filename: Suggested archive filename
        data: ZIP file bytes
        entries: Paths of the files inside the archive
    """
    filename: str
    data: bytes
    entries: list[str] = field(default_factory=list)

    def save(self, output_dir: str | Path) -> Path:
        """Write the archive into output_dir and return its path."""
        path = Path(output_dir) / self.filename
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(self.data)
        except OSError as exc:
            raise DownloadError(f"Could not save archive to {path}: {exc}") from exc
        print(f"Exported ZIP: {path}")
        return path


def build_archive(
    svg_files: Mapping[str, str],
    components: Sequence[Component],
    project_name: str = FALLBACK_PROJECT_NAME,
    generated_on: date | None = None,
) -> ArchiveResult:
    """
    Package generated cutting files and instructions into a ZIP archive.

    Args:
        svg_files: SVG documents keyed by component id (see generate_all)
        components: Components used for filenames and the instructions sheet
        project_name: Project name for the archive filename and header
        generated_on: Date printed in the instructions (default: today)

    Raises:
        ArchiveAssemblyError: No drawings were given or the ZIP could not be written
    """
    if not svg_files:
        raise ArchiveAssemblyError("No cutting files to export")

    filenames = assign_filenames(list(svg_files), components)
    readme = generate_readme(components, project_name, generated_on, filenames)

    buffer = io.BytesIO()
    entries = []
    try:
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
            zf.writestr(f"{ARCHIVE_FOLDER}/", "")
            for component_id, svg_content in svg_files.items():
                entry = f"{ARCHIVE_FOLDER}/{filenames[component_id]}"
                zf.writestr(entry, svg_content.encode("utf-8"))
                entries.append(entry)

            readme_entry = f"{ARCHIVE_FOLDER}/{README_NAME}"
            zf.writestr(readme_entry, readme.encode("utf-8"))
            entries.append(readme_entry)
    except (OSError, ValueError, zipfile.BadZipFile) as exc:
        raise ArchiveAssemblyError(f"Error creating ZIP archive: {exc}") from exc

    return ArchiveResult(
        filename=archive_filename(project_name),
        data=buffer.getvalue(),
        entries=entries,
    )


def download_all_as_zip(
    svg_files: Mapping[str, str],
    components: Sequence[Component],
    project_name: str = FALLBACK_PROJECT_NAME,
    output_dir: str | Path = ".",
    generated_on: date | None = None,
) -> Path:
    """Build the archive and save it into output_dir."""
    archive = build_archive(svg_files, components, project_name, generated_on)
    return archive.save(output_dir)
