"""
Export of generated cutting files: ZIP archives and single files.
"""

from .archive import (
    ARCHIVE_FOLDER,
    README_NAME,
    ArchiveResult,
    archive_filename,
    build_archive,
    download_all_as_zip,
    drawing_filename,
    generate_readme,
    sanitize_filename,
)
from .errors import ArchiveAssemblyError, ClipboardError, DownloadError, ExportError
from .single_file import SingleFileExport, copy_to_clipboard, download_svg, export_one

__all__ = [
    'ArchiveResult',
    'SingleFileExport',
    'build_archive',
    'download_all_as_zip',
    'generate_readme',
    'sanitize_filename',
    'drawing_filename',
    'archive_filename',
    'export_one',
    'download_svg',
    'copy_to_clipboard',
    'ExportError',
    'ArchiveAssemblyError',
    'DownloadError',
    'ClipboardError',
    'ARCHIVE_FOLDER',
    'README_NAME',
]
