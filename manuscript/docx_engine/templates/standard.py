"""
Standard Template - the default project export.

Features:
- A4 page
- Calibri throughout, Word's default look
- Underlined part and chapter headings
- Justified body text
"""

from typing import Dict
from docx.shared import Pt, Cm, RGBColor
from docx.enum.text import WD_ALIGN_PARAGRAPH

from .base import (
    DocxTemplate, TemplateType, PageSetup, ParagraphSpec, FontSpec,
    FooterSpec
)


class StandardTemplate(DocxTemplate):
    """
    Default export template.

    Typography: Calibri
    Page size: A4
    """

    FONT = "Calibri"
    HEADING_COLOR = RGBColor(0, 0, 0)

    @property
    def name(self) -> str:
        return "Standard"

    @property
    def template_type(self) -> TemplateType:
        return TemplateType.STANDARD

    def get_page_setup(self) -> PageSetup:
        return PageSetup.a4()

    def get_styles(self) -> Dict[str, ParagraphSpec]:
        return {
            # Cover
            "title": ParagraphSpec(
                font=FontSpec(name=self.FONT, size=Pt(28), bold=True,
                              color=self.HEADING_COLOR),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_before=Pt(120),
                space_after=Pt(24),
                line_spacing=1.0
            ),

            "cover_line": ParagraphSpec(
                font=FontSpec(name=self.FONT, size=Pt(12)),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_before=Pt(0),
                space_after=Pt(4),
                line_spacing=1.0
            ),

            # Table of contents
            "toc_title": ParagraphSpec(
                font=FontSpec(name=self.FONT, size=Pt(20), bold=True),
                alignment=WD_ALIGN_PARAGRAPH.LEFT,
                space_after=Pt(14)
            ),

            "toc_1": ParagraphSpec(
                font=FontSpec(name=self.FONT, size=Pt(12), bold=True),
                alignment=WD_ALIGN_PARAGRAPH.LEFT,
                space_before=Pt(6),
                space_after=Pt(2)
            ),

            "toc_2": ParagraphSpec(
                font=FontSpec(name=self.FONT, size=Pt(11)),
                alignment=WD_ALIGN_PARAGRAPH.LEFT,
                space_before=Pt(0),
                space_after=Pt(2),
                left_indent=Cm(0.5)
            ),

            # Part heading (Heading 1)
            "heading_1": ParagraphSpec(
                font=FontSpec(name=self.FONT, size=Pt(20), bold=True,
                              color=self.HEADING_COLOR),
                alignment=WD_ALIGN_PARAGRAPH.LEFT,
                space_after=Pt(14),
                keep_with_next=True,
                line_spacing=1.0
            ),

            # Chapter heading (Heading 2)
            "heading_2": ParagraphSpec(
                font=FontSpec(name=self.FONT, size=Pt(16), bold=True,
                              color=self.HEADING_COLOR),
                alignment=WD_ALIGN_PARAGRAPH.LEFT,
                space_after=Pt(12),
                keep_with_next=True,
                line_spacing=1.0
            ),

            "intro": ParagraphSpec(
                font=FontSpec(name=self.FONT, size=Pt(11), italic=True),
                alignment=WD_ALIGN_PARAGRAPH.JUSTIFY
            ),

            "body": ParagraphSpec(
                font=FontSpec(name=self.FONT, size=Pt(11)),
                alignment=WD_ALIGN_PARAGRAPH.JUSTIFY
            ),
        }

    def get_footer(self) -> FooterSpec:
        return FooterSpec(font=FontSpec(name=self.FONT, size=Pt(9)))
