"""
PDF Engine - project export to PDF using ReportLab.

This module provides:
- PDF templates (standard, book)
- Font management with fallback to the standard PDF fonts
- Style building from templates
- Chunked PDF streaming from a Project

Usage:
    from manuscript.pdf_engine import PdfRenderer

    renderer = PdfRenderer(template="standard")
    for chunk in renderer.stream(project):
        response.write(chunk)

Key components:
- PdfRenderer: Main renderer class
- PdfSink: Composer output as a ReportLab story
- PdfTemplate: Abstract base for templates
- create_pdf_template: Factory function
- FontManager: Font registration
- StyleBuilder: Style conversion
"""

from .renderer import PdfRenderer
from .sink import PdfSink, escape_html, format_segment
from .style_builder import FontManager, StyleBuilder
from .templates import (
    PdfTemplate,
    TemplateType,
    PageSpec,
    FontSpec,
    ParagraphSpec,
    FooterSpec,
    create_pdf_template,
    StandardPdfTemplate,
    BookPdfTemplate,
)


__all__ = [
    # Main renderer
    'PdfRenderer',
    'PdfSink',
    'escape_html',
    'format_segment',

    # Style utilities
    'FontManager',
    'StyleBuilder',

    # Template base
    'PdfTemplate',
    'TemplateType',
    'PageSpec',
    'FontSpec',
    'ParagraphSpec',
    'FooterSpec',

    # Factory
    'create_pdf_template',

    # Concrete templates
    'StandardPdfTemplate',
    'BookPdfTemplate',
]
