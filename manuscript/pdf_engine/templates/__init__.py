"""
PDF Template module exports.
"""

from .base import (
    PdfTemplate,
    TemplateType,
    PageSpec,
    FontSpec,
    ParagraphSpec,
    FooterSpec,
    create_pdf_template,
)

from .standard_pdf import StandardPdfTemplate
from .book_pdf import BookPdfTemplate


__all__ = [
    # Base classes
    'PdfTemplate',
    'TemplateType',
    'PageSpec',
    'FontSpec',
    'ParagraphSpec',
    'FooterSpec',

    # Factory
    'create_pdf_template',

    # Template implementations
    'StandardPdfTemplate',
    'BookPdfTemplate',
]
