"""
DOCX Engine - project export to Word documents with python-docx.

Usage:
    from manuscript.docx_engine import DocxRenderer

    renderer = DocxRenderer(template='standard')
    data = renderer.render(project)
"""

from .renderer import DocxRenderer
from .sink import DocxSink
from .style_mapper import StyleMapper
from .layout_engine import LayoutEngine, TOC_INSTRUCTION
from .templates import (
    DocxTemplate,
    TemplateType,
    create_template,
    PageSetup,
    ParagraphSpec,
    FontSpec,
    FooterSpec,
    StandardTemplate,
    BookTemplate,
)

__all__ = [
    # Main classes
    'DocxRenderer',
    'DocxSink',
    'StyleMapper',
    'LayoutEngine',
    'TOC_INSTRUCTION',

    # Templates
    'DocxTemplate',
    'TemplateType',
    'create_template',
    'PageSetup',
    'ParagraphSpec',
    'FontSpec',
    'FooterSpec',
    'StandardTemplate',
    'BookTemplate',
]
