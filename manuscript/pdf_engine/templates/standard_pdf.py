"""
Standard PDF Template - the default project export.

Features:
- A4 with 50pt margins
- Helvetica family (built into every PDF reader)
- Centered cover, underlined part/chapter headings
- Justified 11pt body text
"""

from typing import Dict
from reportlab.lib.colors import black
from reportlab.lib.enums import TA_LEFT, TA_CENTER, TA_JUSTIFY

from .base import (
    PdfTemplate, TemplateType, PageSpec, FontSpec, ParagraphSpec
)


class StandardPdfTemplate(PdfTemplate):
    """
    Default export template.

    Typography: Helvetica
    Page size: A4
    """

    SANS = 'Helvetica'
    TEXT_COLOR = black

    @property
    def name(self) -> str:
        return "Standard PDF"

    @property
    def template_type(self) -> TemplateType:
        return TemplateType.STANDARD

    @property
    def font_family(self) -> str:
        return self.SANS

    def get_page_spec(self) -> PageSpec:
        return PageSpec.a4()

    def get_styles(self) -> Dict[str, ParagraphSpec]:
        return {
            # Cover
            'title': ParagraphSpec(
                font=FontSpec(family=self.SANS, size=28, leading=34, bold=True),
                alignment=TA_CENTER,
                space_after=24
            ),

            'cover_line': ParagraphSpec(
                font=FontSpec(family=self.SANS, size=12, leading=15),
                alignment=TA_CENTER,
                space_after=2
            ),

            # Table of contents
            'toc_title': ParagraphSpec(
                font=FontSpec(family=self.SANS, size=20, leading=24, bold=True),
                alignment=TA_LEFT,
                space_after=14
            ),

            'toc_1': ParagraphSpec(
                font=FontSpec(family=self.SANS, size=14, leading=17, bold=True),
                alignment=TA_LEFT,
                space_before=6,
                space_after=2
            ),

            'toc_2': ParagraphSpec(
                font=FontSpec(family=self.SANS, size=12, leading=15),
                alignment=TA_LEFT,
                left_indent=12,
                space_after=1
            ),

            # Headings
            'heading_1': ParagraphSpec(
                font=FontSpec(family=self.SANS, size=22, leading=27, bold=True,
                              color=self.TEXT_COLOR),
                alignment=TA_LEFT,
                space_after=14,
                keep_with_next=True
            ),

            'heading_2': ParagraphSpec(
                font=FontSpec(family=self.SANS, size=18, leading=22, bold=True),
                alignment=TA_LEFT,
                space_before=6,
                space_after=12,
                keep_with_next=True
            ),

            # Body
            'intro': ParagraphSpec(
                font=FontSpec(family=self.SANS, size=11, leading=14, italic=True),
                alignment=TA_JUSTIFY,
                space_after=18
            ),

            'body': ParagraphSpec(
                font=FontSpec(family=self.SANS, size=11, leading=14),
                alignment=TA_JUSTIFY,
                space_after=11
            ),
        }
