"""
Style Mapper - Applies template specs and inline styles to DOCX paragraphs and runs.
"""

from typing import Iterable, Optional

from docx.document import Document
from docx.text.paragraph import Paragraph
from docx.oxml.ns import qn

from ..models import TextSegment
from .templates.base import DocxTemplate, ParagraphSpec, FontSpec


class StyleMapper:
    """
    Maps semantic style names to styled DOCX elements.

    Usage:
        mapper = StyleMapper(document, template)
        para = mapper.add_paragraph('body')
        mapper.add_run(para, segment, 'body')
    """

    def __init__(self, document: Document, template: DocxTemplate):
        self.doc = document
        self.template = template
        self.styles = template.get_styles()

    def spec(self, style_name: str) -> ParagraphSpec:
        """Spec for a style name, 'body' when the template lacks it"""
        return self.styles.get(style_name, self.styles['body'])

    def add_paragraph(self, style_name: str, text: Optional[str] = None) -> Paragraph:
        """Append an empty paragraph formatted per style_name (optionally with one run)."""
        spec = self.spec(style_name)
        para = self.doc.add_paragraph()
        self.apply_paragraph_spec(para, spec)
        if text:
            run = para.add_run(text)
            self.apply_font_spec(run, spec.font)
        return para

    def add_heading(self, text: str, level: int, style_name: str) -> Paragraph:
        """
        Built-in Heading N paragraph (so the TOC field picks it up),
        restyled per template and underlined.
        """
        spec = self.spec(style_name)
        para = self.doc.add_heading(level=level)
        self.apply_paragraph_spec(para, spec)

        run = para.add_run(text)
        self.apply_font_spec(run, spec.font)
        run.underline = True
        return para

    def add_run(self, para: Paragraph, segment: TextSegment, style_name: str):
        """Append one styled segment to a paragraph."""
        run = para.add_run(segment.text)
        self.apply_font_spec(run, self.spec(style_name).font)
        self.apply_inline_style(run, segment)
        return run

    def add_runs(self, para: Paragraph, segments: Iterable[TextSegment], style_name: str):
        for segment in segments:
            self.add_run(para, segment, style_name)

    def apply_paragraph_spec(self, para: Paragraph, spec: ParagraphSpec):
        """Apply ParagraphSpec to a paragraph"""
        pf = para.paragraph_format

        pf.alignment = spec.alignment

        pf.space_before = spec.space_before
        pf.space_after = spec.space_after

        if spec.line_spacing:
            pf.line_spacing = spec.line_spacing

        if spec.first_line_indent is not None:
            pf.first_line_indent = spec.first_line_indent
        if spec.left_indent is not None:
            pf.left_indent = spec.left_indent

        pf.keep_with_next = spec.keep_with_next

    def apply_font_spec(self, run, spec: FontSpec):
        """Apply FontSpec to a run"""
        run.font.name = spec.name
        run.font.size = spec.size
        run.bold = spec.bold
        run.italic = spec.italic

        if spec.color:
            run.font.color.rgb = spec.color

        # East Asian slot too, otherwise Word keeps the theme font there
        rPr = run._element.get_or_add_rPr()
        rFonts = rPr.get_or_add_rFonts()
        rFonts.set(qn('w:eastAsia'), spec.name)

    def apply_inline_style(self, run, segment: TextSegment):
        """Apply a segment's styles on top of the paragraph font"""
        if segment.bold:
            run.bold = True
        if segment.italic:
            run.italic = True
        if segment.underline:
            run.underline = True
        if segment.strikethrough:
            run.font.strike = True
