"""
DOCX sink - turns composer calls into a python-docx Document.
"""

from io import BytesIO
from typing import List, Optional

from docx import Document
from docx.text.paragraph import Paragraph

from ..models import TextSegment
from ..sink import CoverPage, DocumentSink, TableOfContents
from .layout_engine import LayoutEngine
from .style_mapper import StyleMapper
from .templates.base import DocxTemplate


class DocxSink(DocumentSink):
    """
    Builds one DOCX document; finalize() serializes it to bytes.
    """

    # Word documents caption the TOC "Sommaire"
    toc_label = "contents"

    def __init__(self, template: DocxTemplate):
        self.template = template
        self.doc = Document()
        self.mapper = StyleMapper(self.doc, template)
        self.layout = LayoutEngine(self.doc, template)
        self.layout.setup_document()
        self._paragraph: Optional[Paragraph] = None

    def add_cover(self, cover: CoverPage):
        spec = self.mapper.spec('title')
        para = self.doc.add_heading(level=0)
        self.mapper.apply_paragraph_spec(para, spec)
        run = para.add_run(cover.title)
        self.mapper.apply_font_spec(run, spec.font)

        for line in cover.lines():
            self.mapper.add_paragraph('cover_line', line)

    def add_table_of_contents(self, toc: TableOfContents):
        self.layout.add_toc(toc, self.mapper)

    def add_heading(self, text: str, level: int):
        level = 1 if level <= 1 else 2
        self.mapper.add_heading(text, level, f'heading_{level}')

    def add_intro(self, segments: List[TextSegment]):
        para = self.mapper.add_paragraph('intro')
        self.mapper.add_runs(para, segments, 'intro')

    def begin_paragraph(self):
        self._paragraph = self.mapper.add_paragraph('body')

    def add_styled_run(self, segment: TextSegment):
        if self._paragraph is None:
            raise RuntimeError("add_styled_run() called outside a paragraph")
        self.mapper.add_run(self._paragraph, segment, 'body')

    def end_paragraph(self):
        self._paragraph = None

    def page_break(self):
        self.doc.add_page_break()

    def finalize(self) -> bytes:
        buffer = BytesIO()
        self.doc.save(buffer)
        return buffer.getvalue()
