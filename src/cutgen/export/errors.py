"""
Errors raised by the export layer.

Rendering never raises for malformed input; only packaging and writing
results can fail. A failed export leaves the generated drawings intact.
"""


class ExportError(RuntimeError):
    """Base class for export failures."""


class ArchiveAssemblyError(ExportError):
    """The ZIP archive could not be built."""


class DownloadError(ExportError):
    """A generated file could not be written to its destination."""


class ClipboardError(ExportError):
    """The document could not be copied to the clipboard."""
