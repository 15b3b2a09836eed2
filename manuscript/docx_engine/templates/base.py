"""
DOCX template contract: page setup, paragraph specs per semantic style, footer font.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional
from enum import Enum

from docx.shared import Pt, Cm, RGBColor
from docx.enum.text import WD_ALIGN_PARAGRAPH


class TemplateType(Enum):
    STANDARD = "standard"
    BOOK = "book"


@dataclass
class FontSpec:
    name: str
    size: Pt
    bold: bool = False
    italic: bool = False
    color: Optional[RGBColor] = None


@dataclass
class ParagraphSpec:
    font: FontSpec
    alignment: WD_ALIGN_PARAGRAPH = WD_ALIGN_PARAGRAPH.JUSTIFY
    line_spacing: float = 1.15  # multiple
    space_before: Pt = field(default_factory=lambda: Pt(5))
    space_after: Pt = field(default_factory=lambda: Pt(10))
    first_line_indent: Optional[Cm] = None
    left_indent: Optional[Cm] = None
    keep_with_next: bool = False


@dataclass
class PageSetup:
    width: Cm
    height: Cm
    top_margin: Cm
    bottom_margin: Cm
    left_margin: Cm
    right_margin: Cm
    gutter: Cm = field(default_factory=lambda: Cm(0))

    @classmethod
    def a4(cls) -> 'PageSetup':
        return cls(
            width=Cm(21), height=Cm(29.7),
            top_margin=Cm(2.5), bottom_margin=Cm(2.5),
            left_margin=Cm(2.5), right_margin=Cm(2.5)
        )

    @classmethod
    def trade_paperback(cls) -> 'PageSetup':
        """14 x 21.5 cm with a binding gutter"""
        return cls(
            width=Cm(14), height=Cm(21.5),
            top_margin=Cm(2), bottom_margin=Cm(2),
            left_margin=Cm(2), right_margin=Cm(1.5),
            gutter=Cm(0.5)
        )


@dataclass
class FooterSpec:
    """Centered PAGE field"""
    font: FontSpec
    skip_first_page: bool = True  # the cover


class DocxTemplate(ABC):
    """
    A named look for the DOCX export.

    get_styles() must define: title, cover_line, toc_title, toc_1, toc_2,
    heading_1, heading_2, intro, body.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def template_type(self) -> TemplateType:
        pass

    @abstractmethod
    def get_page_setup(self) -> PageSetup:
        pass

    @abstractmethod
    def get_styles(self) -> Dict[str, ParagraphSpec]:
        pass

    @abstractmethod
    def get_footer(self) -> FooterSpec:
        pass


def create_template(template_type: str) -> DocxTemplate:
    """'standard' or 'book' -> template instance"""
    from .standard import StandardTemplate
    from .book import BookTemplate

    templates = {
        'standard': StandardTemplate,
        'book': BookTemplate,
    }

    template_class = templates.get(template_type.lower())
    if not template_class:
        raise ValueError(f"Unknown template type: {template_type}. Available: {list(templates.keys())}")

    return template_class()
