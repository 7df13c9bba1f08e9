"""
Per-component export: save one cutting file or copy it to the clipboard.
"""

from __future__ import annotations

import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from ..components import Component
from .archive import drawing_filename
from .errors import ClipboardError, DownloadError

SVG_MIME_TYPE = "image/svg+xml"

# Tried in order; the first one found on PATH is used
_CLIPBOARD_COMMANDS: list[list[str]] = [
    ["pbcopy"],
    ["clip"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


@dataclass(frozen=True)
class SingleFileExport:
    """One cutting file ready to be saved."""
    filename: str
    data: bytes
    mime_type: str = SVG_MIME_TYPE

    def save(self, output_dir: str | Path = ".") -> Path:
        """Write the file into output_dir and return its path."""
        filename = self.filename if self.filename.endswith(".svg") else f"{self.filename}.svg"
        path = Path(output_dir) / filename
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(self.data)
        except OSError as exc:
            raise DownloadError(f"Could not save {filename}: {exc}") from exc
        print(f"Exported SVG: {path}")
        return path


def export_one(svg_content: str, component: Component) -> SingleFileExport:
    """Package one component's cutting file as <sanitized name>_<id>.svg."""
    return SingleFileExport(
        filename=drawing_filename(component.id, component),
        data=svg_content.encode("utf-8"),
    )


def download_svg(svg_content: str, component: Component, output_dir: str | Path = ".") -> Path:
    """Save one component's cutting file into output_dir."""
    return export_one(svg_content, component).save(output_dir)


def _find_clipboard_command() -> list[str] | None:
    for command in _CLIPBOARD_COMMANDS:
        if command[0] == "pbcopy" and sys.platform != "darwin":
            continue
        if shutil.which(command[0]):
            return command
    return None


def copy_to_clipboard(text: str, command: Sequence[str] | None = None) -> None:
    """
    Copy a document's text to the system clipboard.

    Args:
        text: Text to copy
        command: Clipboard command reading from stdin (default: autodetect)

    Raises:
        ClipboardError: No clipboard tool is available or it failed
    """
    command = list(command) if command else _find_clipboard_command()
    if not command:
        raise ClipboardError("No clipboard tool found (pbcopy, clip, wl-copy, xclip or xsel)")

    try:
        subprocess.run(
            command,
            input=text.encode("utf-8"),
            check=True,
            capture_output=True,
            timeout=10,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        raise ClipboardError(f"Could not copy to clipboard with {command[0]}: {exc}") from exc
