"""
Project composer - the single tree walk shared by every output format.

Owns ordering (every level sorted by number), pagination, heading text
and paragraph concatenation. Engines only supply a DocumentSink.
"""

from operator import attrgetter
from typing import List, Sequence, TypeVar

from .i18n import (
    format_chapter_title, format_date, format_labeled,
    format_part_title, get_string,
)
from .markup import segments_for_content
from .models import Chapter, Paragraph, Part, Project, TextSegment
from .sink import CoverPage, DocumentSink, TableOfContents, TocEntry
from config.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar('T')

NOTION_SEPARATOR = " "


def sorted_by_number(items: Sequence[T]) -> List[T]:
    """Ascending by number; ties keep their input order (stable sort)."""
    return sorted(items or [], key=attrgetter('number'))


class ProjectComposer:
    """
    Walks Project -> Part -> Chapter -> Paragraph -> Notion into a sink.

    Usage:
        composer = ProjectComposer(lang='fr')
        sink = composer.compose(project, PdfSink(template))
        artifact = sink.finalize()
    """

    def __init__(self, lang: str = "fr"):
        self.lang = lang

    def compose(self, project: Project, sink: DocumentSink) -> DocumentSink:
        """
        Emit the whole project into sink.

        Args:
            project: Hydrated, possibly unsorted project tree
            sink: Fresh sink for one export

        Returns:
            The same sink, ready for finalize()
        """
        parts = sorted_by_number(project.parts)

        sink.add_cover(self.build_cover(project))
        sink.page_break()

        sink.add_table_of_contents(self.build_toc(parts, sink.toc_label))
        # Closes the table of contents; the first part needs no other break
        sink.page_break()

        for index, part in enumerate(parts):
            if index > 0:
                sink.page_break()
            self._compose_part(part, sink)

        logger.debug(
            "Composed project '%s': %d parts, %d notions",
            project.name, len(parts), project.total_notions()
        )
        return sink

    def build_cover(self, project: Project) -> CoverPage:
        return CoverPage(
            title=project.name,
            author_line=format_labeled("author", project.owner.full_name, self.lang),
            email_line=format_labeled("email", project.owner.email, self.lang),
            date_line=format_labeled("date", format_date(project.created_at, self.lang), self.lang),
        )

    def build_toc(self, parts: List[Part], label: str = "table_of_contents") -> TableOfContents:
        """TOC entries straight from the sorted tree."""
        entries = []
        for part in parts:
            entries.append(TocEntry(
                text=format_part_title(part.number, part.title, self.lang),
                level=1,
            ))
            for chapter in sorted_by_number(part.chapters):
                entries.append(TocEntry(
                    text=format_chapter_title(chapter.number, chapter.title, self.lang),
                    level=2,
                ))
        return TableOfContents(title=get_string(label, self.lang), entries=entries)

    def _compose_part(self, part: Part, sink: DocumentSink):
        sink.add_heading(format_part_title(part.number, part.title, self.lang), level=1)

        if part.intro and part.intro.strip():
            sink.add_intro(segments_for_content(part.intro))

        for index, chapter in enumerate(sorted_by_number(part.chapters)):
            if index > 0:
                sink.page_break()
            self._compose_chapter(chapter, sink)

    def _compose_chapter(self, chapter: Chapter, sink: DocumentSink):
        sink.add_heading(format_chapter_title(chapter.number, chapter.title, self.lang), level=2)

        for paragraph in sorted_by_number(chapter.paragraphs):
            self._compose_paragraph(paragraph, sink)

    def _compose_paragraph(self, paragraph: Paragraph, sink: DocumentSink):
        """All notions of a paragraph form one visual paragraph."""
        notions = sorted_by_number(paragraph.notions)
        if not notions:
            return

        sink.begin_paragraph()
        for index, notion in enumerate(notions):
            if index > 0:
                sink.add_styled_run(TextSegment.plain(NOTION_SEPARATOR))
            for segment in segments_for_content(notion.content):
                sink.add_styled_run(segment)
        sink.end_paragraph()
