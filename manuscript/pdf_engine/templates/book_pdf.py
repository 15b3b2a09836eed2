"""
Book PDF Template - print-style export.

Features:
- Trade paperback size (14 x 21.5 cm)
- DejaVu Serif (falls back to Times when the TTF files are missing)
- Centered headings, first-line indent on body paragraphs
"""

from typing import Dict
from reportlab.lib.colors import HexColor, black
from reportlab.lib.enums import TA_LEFT, TA_CENTER, TA_JUSTIFY

from .base import (
    PdfTemplate, TemplateType, PageSpec, FontSpec, ParagraphSpec
)


class BookPdfTemplate(PdfTemplate):
    """
    Book-like export template.

    Typography: DejaVu Serif
    Page size: Trade paperback (14 x 21.5 cm)
    """

    SERIF = 'DejaVuSerif'

    HEADING_COLOR = HexColor('#2C3E50')  # Dark blue-gray
    TEXT_COLOR = black

    @property
    def name(self) -> str:
        return "Book PDF"

    @property
    def template_type(self) -> TemplateType:
        return TemplateType.BOOK

    @property
    def font_family(self) -> str:
        return self.SERIF

    def get_page_spec(self) -> PageSpec:
        return PageSpec.trade_paperback()

    def get_styles(self) -> Dict[str, ParagraphSpec]:
        return {
            'title': ParagraphSpec(
                font=FontSpec(family=self.SERIF, size=24, leading=30, bold=True),
                alignment=TA_CENTER,
                space_before=72,
                space_after=36
            ),

            'cover_line': ParagraphSpec(
                font=FontSpec(family=self.SERIF, size=11, leading=14),
                alignment=TA_CENTER,
                space_after=3
            ),

            'toc_title': ParagraphSpec(
                font=FontSpec(family=self.SERIF, size=16, leading=20, bold=True),
                alignment=TA_CENTER,
                space_after=18
            ),

            'toc_1': ParagraphSpec(
                font=FontSpec(family=self.SERIF, size=11, leading=14, bold=True),
                alignment=TA_LEFT,
                space_before=6,
                space_after=2
            ),

            'toc_2': ParagraphSpec(
                font=FontSpec(family=self.SERIF, size=10, leading=13),
                alignment=TA_LEFT,
                left_indent=12
            ),

            'heading_1': ParagraphSpec(
                font=FontSpec(family=self.SERIF, size=20, leading=26, bold=True,
                              color=self.HEADING_COLOR),
                alignment=TA_CENTER,
                space_before=36,
                space_after=24,
                keep_with_next=True
            ),

            'heading_2': ParagraphSpec(
                font=FontSpec(family=self.SERIF, size=15, leading=19, bold=True),
                alignment=TA_CENTER,
                space_before=12,
                space_after=14,
                keep_with_next=True
            ),

            'intro': ParagraphSpec(
                font=FontSpec(family=self.SERIF, size=10.5, leading=15, italic=True,
                              color=HexColor('#555555')),
                alignment=TA_JUSTIFY,
                left_indent=12,
                right_indent=12,
                space_after=18
            ),

            'body': ParagraphSpec(
                font=FontSpec(family=self.SERIF, size=10.5, leading=15,
                              color=self.TEXT_COLOR),
                alignment=TA_JUSTIFY,
                first_line_indent=14,
                space_after=4,
                allow_widows=False,
                allow_orphans=False
            ),
        }
