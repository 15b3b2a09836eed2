"""
Exceptions raised by the export pipeline.

Content problems (bad markup, missing optional fields) never raise; only
engine-level failures and caller mistakes surface here.
"""

from typing import Optional


class ExportError(Exception):
    """Base class for export pipeline errors."""


class UnsupportedFormatError(ExportError):
    """Requested export format is not supported."""

    def __init__(self, fmt: str, supported: Optional[list] = None):
        self.fmt = fmt
        self.supported = supported or []
        message = f"Unsupported export format: {fmt}"
        if self.supported:
            message += f". Available: {self.supported}"
        super().__init__(message)


class RenderError(ExportError):
    """The layout/serialization engine rejected the document."""

    def __init__(self, fmt: str, cause: Exception):
        self.fmt = fmt
        self.cause = cause
        super().__init__(f"{fmt.upper()} rendering failed: {cause}")
