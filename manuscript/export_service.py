"""
Export service - picks the renderer for a format and describes the download.

Pure export logic, no FastAPI or HTTP concerns.
"""

import re
import unicodedata
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from .docx_engine import DocxRenderer
from .exceptions import UnsupportedFormatError
from .models import ExportFormat, Project
from .pdf_engine import PdfRenderer
from config.logging_config import get_logger
from config.settings import settings

logger = get_logger(__name__)


MEDIA_TYPES = {
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "pdf": "application/pdf",
}

UNSAFE_FILENAME_CHARS = re.compile(r'[^\w\-. ]+', re.ASCII)


def get_media_type(fmt: str) -> str:
    """Return the MIME type for a given format string."""
    return MEDIA_TYPES.get(fmt, "application/octet-stream")


def parse_format(fmt: Union[str, ExportFormat]) -> ExportFormat:
    """ExportFormat for a user-supplied string (case-insensitive)."""
    if isinstance(fmt, ExportFormat):
        return fmt
    try:
        return ExportFormat(str(fmt).strip().lower())
    except ValueError:
        raise UnsupportedFormatError(fmt, [f.value for f in ExportFormat]) from None


def safe_filename(name: str, fmt: ExportFormat) -> str:
    """
    Download filename from a project name.

    Accents are folded to ASCII so the name fits an HTTP header.

    >>> safe_filename('Mémoire: v2/final', ExportFormat.PDF)
    'Memoire_ v2_final.pdf'
    """
    folded = unicodedata.normalize('NFKD', name or '').encode('ascii', 'ignore').decode('ascii')
    stem = UNSAFE_FILENAME_CHARS.sub('_', folded).strip(' ._')
    return f"{stem or 'project'}.{fmt.value}"


@dataclass
class ExportResult:
    """Everything the caller needs to send the file"""
    filename: str
    media_type: str
    fmt: ExportFormat
    body: Union[bytes, Iterator[bytes]]

    @property
    def is_stream(self) -> bool:
        return not isinstance(self.body, (bytes, bytearray))


class ExportService:
    """
    Entry point for project exports.

    PDF bodies are chunk iterators (consume them to drive rendering);
    DOCX bodies are complete byte buffers.
    """

    def __init__(
        self,
        pdf_template: Optional[str] = None,
        docx_template: Optional[str] = None,
        lang: Optional[str] = None
    ):
        self.pdf_template = pdf_template or settings.default_pdf_template
        self.docx_template = docx_template or settings.default_docx_template
        self.lang = lang or settings.export_language

    def export(self, project: Project, fmt: Union[str, ExportFormat]) -> ExportResult:
        """
        Export a project.

        Raises:
            UnsupportedFormatError: fmt is neither pdf nor docx
            RenderError: the engine failed (for PDF, raised while iterating body)
        """
        export_format = parse_format(fmt)
        logger.info(f"Exporting '{project.name}' as {export_format.value}")

        if export_format == ExportFormat.PDF:
            body = PdfRenderer(template=self.pdf_template, lang=self.lang).stream(project)
        else:
            body = DocxRenderer(template=self.docx_template, lang=self.lang).render(project)

        return ExportResult(
            filename=safe_filename(project.name, export_format),
            media_type=get_media_type(export_format.value),
            fmt=export_format,
            body=body,
        )
