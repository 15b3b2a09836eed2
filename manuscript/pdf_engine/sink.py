"""
PDF sink - turns composer calls into a ReportLab story.
"""

from typing import Dict, List, Optional

from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import Flowable, PageBreak, Paragraph, Spacer

from ..models import TextSegment
from ..sink import CoverPage, DocumentSink, TableOfContents


def escape_html(text: str) -> str:
    """Escape characters ReportLab's paragraph parser treats as markup."""
    if not text:
        return ""
    return (text
        .replace('&', '&amp;')
        .replace('<', '&lt;')
        .replace('>', '&gt;'))


def format_segment(segment: TextSegment) -> str:
    """One styled run as ReportLab inline markup."""
    text = escape_html(segment.text).replace('\n', '<br/>')
    if not text:
        return ""

    if segment.bold and segment.italic:
        text = f"<b><i>{text}</i></b>"
    elif segment.bold:
        text = f"<b>{text}</b>"
    elif segment.italic:
        text = f"<i>{text}</i>"

    if segment.underline:
        text = f"<u>{text}</u>"
    if segment.strikethrough:
        text = f"<strike>{text}</strike>"

    return text


class PdfSink(DocumentSink):
    """
    Collects flowables for SimpleDocTemplate.build().

    finalize() returns the story; the renderer owns the actual build.
    """

    def __init__(self, styles: Dict[str, ParagraphStyle]):
        self.styles = styles
        self.story: List[Flowable] = []
        self._runs: Optional[List[str]] = None

    def add_cover(self, cover: CoverPage):
        self.story.append(Spacer(1, 4*cm))
        self.story.append(Paragraph(escape_html(cover.title), self.styles['title']))
        self.story.append(Spacer(1, 1*cm))
        for line in cover.lines():
            self.story.append(Paragraph(escape_html(line), self.styles['cover_line']))

    def add_table_of_contents(self, toc: TableOfContents):
        self.story.append(Paragraph(
            f"<u>{escape_html(toc.title)}</u>",
            self.styles['toc_title']
        ))
        for entry in toc.entries:
            style = self.styles.get(f'toc_{entry.level}', self.styles['toc_2'])
            self.story.append(Paragraph(escape_html(entry.text), style))

    def add_heading(self, text: str, level: int):
        style = self.styles['heading_1' if level <= 1 else 'heading_2']
        self.story.append(Paragraph(f"<u>{escape_html(text)}</u>", style))

    def add_intro(self, segments: List[TextSegment]):
        markup = ''.join(format_segment(s) for s in segments)
        if markup:
            self.story.append(Paragraph(markup, self.styles['intro']))

    def begin_paragraph(self):
        self._runs = []

    def add_styled_run(self, segment: TextSegment):
        if self._runs is None:
            raise RuntimeError("add_styled_run() called outside a paragraph")
        self._runs.append(format_segment(segment))

    def end_paragraph(self):
        markup = ''.join(self._runs or [])
        self._runs = None
        # A paragraph of separators only has nothing to show
        if markup.strip():
            self.story.append(Paragraph(markup, self.styles['body']))

    def page_break(self):
        self.story.append(PageBreak())

    def finalize(self) -> List[Flowable]:
        return self.story
