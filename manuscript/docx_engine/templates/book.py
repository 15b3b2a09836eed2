"""
Book Template - print-style export.

Features:
- Trade paperback size with a binding gutter
- Georgia body, centered headings
- First-line indent on body paragraphs
"""

from typing import Dict
from docx.shared import Pt, Cm, RGBColor
from docx.enum.text import WD_ALIGN_PARAGRAPH

from .base import (
    DocxTemplate, TemplateType, PageSetup, ParagraphSpec, FontSpec,
    FooterSpec
)


class BookTemplate(DocxTemplate):
    """
    Book-like template.

    Typography: Georgia
    Page size: Trade paperback (14 x 21.5 cm)
    """

    HEADING_FONT = "Georgia"
    BODY_FONT = "Georgia"
    HEADING_COLOR = RGBColor(44, 62, 80)

    @property
    def name(self) -> str:
        return "Book"

    @property
    def template_type(self) -> TemplateType:
        return TemplateType.BOOK

    def get_page_setup(self) -> PageSetup:
        return PageSetup.trade_paperback()

    def get_styles(self) -> Dict[str, ParagraphSpec]:
        return {
            "title": ParagraphSpec(
                font=FontSpec(name=self.HEADING_FONT, size=Pt(26), bold=True,
                              color=self.HEADING_COLOR),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_before=Pt(72),
                space_after=Pt(36),
                line_spacing=1.0
            ),

            "cover_line": ParagraphSpec(
                font=FontSpec(name=self.BODY_FONT, size=Pt(11)),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_before=Pt(0),
                space_after=Pt(3),
                line_spacing=1.0
            ),

            "toc_title": ParagraphSpec(
                font=FontSpec(name=self.HEADING_FONT, size=Pt(16), bold=True),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_after=Pt(18)
            ),

            "toc_1": ParagraphSpec(
                font=FontSpec(name=self.BODY_FONT, size=Pt(11), bold=True),
                alignment=WD_ALIGN_PARAGRAPH.LEFT,
                space_before=Pt(6),
                space_after=Pt(2)
            ),

            "toc_2": ParagraphSpec(
                font=FontSpec(name=self.BODY_FONT, size=Pt(10)),
                alignment=WD_ALIGN_PARAGRAPH.LEFT,
                space_before=Pt(0),
                space_after=Pt(2),
                left_indent=Cm(0.5)
            ),

            "heading_1": ParagraphSpec(
                font=FontSpec(name=self.HEADING_FONT, size=Pt(22), bold=True,
                              color=self.HEADING_COLOR),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_before=Pt(48),
                space_after=Pt(24),
                keep_with_next=True,
                line_spacing=1.0
            ),

            "heading_2": ParagraphSpec(
                font=FontSpec(name=self.HEADING_FONT, size=Pt(16), bold=True,
                              color=self.HEADING_COLOR),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_before=Pt(24),
                space_after=Pt(14),
                keep_with_next=True,
                line_spacing=1.0
            ),

            "intro": ParagraphSpec(
                font=FontSpec(name=self.BODY_FONT, size=Pt(10.5), italic=True,
                              color=RGBColor(85, 85, 85)),
                alignment=WD_ALIGN_PARAGRAPH.JUSTIFY,
                left_indent=Cm(0.5),
                space_after=Pt(18)
            ),

            "body": ParagraphSpec(
                font=FontSpec(name=self.BODY_FONT, size=Pt(10.5)),
                alignment=WD_ALIGN_PARAGRAPH.JUSTIFY,
                first_line_indent=Cm(0.6),
                space_before=Pt(0),
                space_after=Pt(4),
                line_spacing=1.3
            ),
        }

    def get_footer(self) -> FooterSpec:
        return FooterSpec(font=FontSpec(name=self.BODY_FONT, size=Pt(9)))
