"""
Document sink - the capability both output engines implement.

The composer walks the project tree once and drives a sink; each engine
supplies its own sink. A sink is a builder: it accumulates output until
finalize() is called and is not reused afterwards.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List

from .models import TextSegment


@dataclass
class CoverPage:
    """Cover lines, already localized"""
    title: str
    author_line: str
    email_line: str
    date_line: str

    def lines(self) -> List[str]:
        return [self.author_line, self.email_line, self.date_line]


@dataclass
class TocEntry:
    """Table of contents entry"""
    text: str
    level: int  # 1 = part, 2 = chapter


@dataclass
class TableOfContents:
    """Table of contents built from the sorted tree"""
    title: str
    entries: List[TocEntry] = field(default_factory=list)


class DocumentSink(ABC):
    """
    Abstract base class for output engines.

    Call order enforced by the composer:
        add_cover, page_break, add_table_of_contents, page_break,
        then per part: add_heading(1), add_intro?, per chapter:
        add_heading(2), per paragraph: begin_paragraph,
        add_styled_run*, end_paragraph.
    """

    # i18n string id used for the table of contents caption
    toc_label: str = "table_of_contents"

    @abstractmethod
    def add_cover(self, cover: CoverPage):
        """Render the cover block"""
        pass

    @abstractmethod
    def add_table_of_contents(self, toc: TableOfContents):
        """Render the table of contents"""
        pass

    @abstractmethod
    def add_heading(self, text: str, level: int):
        """Render an underlined heading (1 = part, 2 = chapter)"""
        pass

    @abstractmethod
    def add_intro(self, segments: List[TextSegment]):
        """Render a part introduction (italic, justified)"""
        pass

    @abstractmethod
    def begin_paragraph(self):
        """Open a body paragraph"""
        pass

    @abstractmethod
    def add_styled_run(self, segment: TextSegment):
        """Append a styled run to the open paragraph"""
        pass

    @abstractmethod
    def end_paragraph(self):
        """Close the open paragraph"""
        pass

    @abstractmethod
    def page_break(self):
        """Force a new page"""
        pass

    @abstractmethod
    def finalize(self) -> Any:
        """Finish the document and hand over the engine's artifact"""
        pass
