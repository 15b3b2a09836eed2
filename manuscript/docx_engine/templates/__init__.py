"""Template exports"""

from .base import (
    DocxTemplate, TemplateType, create_template, PageSetup, ParagraphSpec,
    FontSpec, FooterSpec
)
from .standard import StandardTemplate
from .book import BookTemplate

__all__ = [
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
