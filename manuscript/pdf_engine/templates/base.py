"""
PDF template contract: page geometry plus one ParagraphSpec per semantic style.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Tuple
from enum import Enum

from reportlab.lib.units import cm
from reportlab.lib.pagesizes import A4
from reportlab.lib.colors import Color, black
from reportlab.lib.enums import TA_JUSTIFY


class TemplateType(Enum):
    """PDF template types"""
    STANDARD = "standard"
    BOOK = "book"


@dataclass
class PageSpec:
    """Page size and margins, in points"""
    width: float
    height: float
    top_margin: float
    right_margin: float
    bottom_margin: float
    left_margin: float

    @property
    def size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    @classmethod
    def a4(cls) -> 'PageSpec':
        return cls(
            width=A4[0], height=A4[1],
            top_margin=50, right_margin=50,
            bottom_margin=50, left_margin=50
        )

    @classmethod
    def trade_paperback(cls) -> 'PageSpec':
        """14 x 21.5 cm"""
        return cls(
            width=14*cm, height=21.5*cm,
            top_margin=2*cm, right_margin=1.5*cm,
            bottom_margin=2*cm, left_margin=1.5*cm
        )


@dataclass
class FontSpec:
    family: str          # FontManager family name
    size: float
    leading: float
    bold: bool = False
    italic: bool = False
    color: Color = field(default_factory=lambda: black)


@dataclass
class ParagraphSpec:
    font: FontSpec
    alignment: int = TA_JUSTIFY
    space_before: float = 0
    space_after: float = 6
    first_line_indent: float = 0
    left_indent: float = 0
    right_indent: float = 0
    keep_with_next: bool = False
    allow_widows: bool = True
    allow_orphans: bool = True


@dataclass
class FooterSpec:
    """Centered page number"""
    font: FontSpec
    skip_first_page: bool = True  # the cover


class PdfTemplate(ABC):
    """
    A named look for the PDF export.

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

    @property
    @abstractmethod
    def font_family(self) -> str:
        """Body font family, also used for the footer"""
        pass

    @abstractmethod
    def get_page_spec(self) -> PageSpec:
        pass

    @abstractmethod
    def get_styles(self) -> Dict[str, ParagraphSpec]:
        pass

    def get_footer(self) -> FooterSpec:
        return FooterSpec(font=FontSpec(family=self.font_family, size=9, leading=11))


def create_pdf_template(template_type: str) -> PdfTemplate:
    """'standard' or 'book' -> template instance"""
    from .standard_pdf import StandardPdfTemplate
    from .book_pdf import BookPdfTemplate

    templates = {
        'standard': StandardPdfTemplate,
        'book': BookPdfTemplate,
    }

    template_class = templates.get(template_type.lower())
    if not template_class:
        raise ValueError(
            f"Unknown PDF template: {template_type}. "
            f"Available: {list(templates.keys())}"
        )

    return template_class()
