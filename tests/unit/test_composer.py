"""
Unit tests for manuscript/composer.py - ordering, pagination and
paragraph concatenation, checked against a recording sink.
"""

from dataclasses import dataclass

import pytest

from manuscript.composer import NOTION_SEPARATOR, ProjectComposer, sorted_by_number
from manuscript.models import Chapter, Notion, Paragraph, Part, TextSegment
from manuscript.sink import DocumentSink


class RecordingSink(DocumentSink):
    """Records every call as a tuple"""

    def __init__(self, toc_label="table_of_contents"):
        self.toc_label = toc_label
        self.events = []

    def add_cover(self, cover):
        self.events.append(("cover", cover))

    def add_table_of_contents(self, toc):
        self.events.append(("toc", toc))

    def add_heading(self, text, level):
        self.events.append(("heading", level, text))

    def add_intro(self, segments):
        self.events.append(("intro", segments))

    def begin_paragraph(self):
        self.events.append(("begin",))

    def add_styled_run(self, segment):
        self.events.append(("run", segment))

    def end_paragraph(self):
        self.events.append(("end",))

    def page_break(self):
        self.events.append(("break",))

    def finalize(self):
        return self.events

    # helpers

    def kinds(self):
        return [event[0] for event in self.events]

    def headings(self, level=None):
        return [e[2] for e in self.events
                if e[0] == "heading" and (level is None or e[1] == level)]

    def paragraphs(self):
        """Runs of each begin/end pair"""
        result, current = [], None
        for event in self.events:
            if event[0] == "begin":
                current = []
            elif event[0] == "run":
                current.append(event[1])
            elif event[0] == "end":
                result.append(current)
                current = None
        return result


@pytest.fixture
def composed(sample_project):
    sink = RecordingSink()
    ProjectComposer(lang="fr").compose(sample_project, sink)
    return sink


class TestFrontMatter:

    def test_cover_then_break_then_toc_then_break(self, composed):
        assert composed.kinds()[:5] == ["cover", "break", "toc", "break", "heading"]

    def test_cover_lines(self, composed):
        cover = composed.events[0][1]
        assert cover.title == "Mon roman"
        assert cover.lines() == [
            "Auteur: Ada Martin",
            "Email: ada@example.com",
            "Date: 05/03/2024",
        ]

    def test_toc_entries_follow_sorted_tree(self, composed):
        toc = composed.events[2][1]
        assert toc.title == "Table des matières"
        assert [(e.level, e.text) for e in toc.entries] == [
            (1, "Partie 1: Origines"),
            (2, "Chapitre 1: Départ"),
            (2, "Chapitre 2: Voyage"),
            (1, "Partie 2: Suite"),
            (2, "Chapitre 1: Retour"),
        ]

    def test_sink_chooses_toc_caption(self, sample_project):
        sink = RecordingSink(toc_label="contents")
        ProjectComposer(lang="fr").compose(sample_project, sink)
        assert sink.events[2][1].title == "Sommaire"


class TestOrdering:

    def test_parts_ascending(self, composed):
        assert composed.headings(level=1) == ["Partie 1: Origines", "Partie 2: Suite"]

    def test_chapters_ascending_within_part(self, composed):
        assert composed.headings(level=2) == [
            "Chapitre 1: Départ", "Chapitre 2: Voyage", "Chapitre 1: Retour",
        ]

    def test_paragraphs_and_notions_ascending(self, composed):
        first, second = composed.paragraphs()[:2]
        assert [s.text for s in first] == ["Il", "partit", "à l'aube", NOTION_SEPARATOR, "rayé"]
        assert [s.text for s in second] == ["Fin du chapitre."]

    def test_stable_sort_on_ties(self):
        @dataclass
        class Item:
            number: int
            label: str

        items = [Item(2, "a"), Item(1, "b"), Item(2, "c"), Item(1, "d")]
        assert [i.label for i in sorted_by_number(items)] == ["b", "d", "a", "c"]

    def test_sort_does_not_mutate_input(self, sample_project):
        ProjectComposer().compose(sample_project, RecordingSink())
        assert [p.number for p in sample_project.parts] == [2, 1]


class TestPagination:

    def test_break_count(self, composed):
        # cover + toc + second part + second chapter of part 1
        assert composed.kinds().count("break") == 4

    def test_no_extra_break_before_first_part(self, composed):
        kinds = composed.kinds()
        first_heading = kinds.index("heading")
        assert kinds[first_heading - 2:first_heading] == ["toc", "break"]

    def test_break_before_second_part(self, composed):
        index = composed.events.index(("heading", 1, "Partie 2: Suite"))
        assert composed.events[index - 1] == ("break",)

    def test_break_before_non_first_chapter_only(self, composed):
        events = composed.events
        first = events.index(("heading", 2, "Chapitre 1: Départ"))
        second = events.index(("heading", 2, "Chapitre 2: Voyage"))
        assert events[first - 1] != ("break",)
        assert events[second - 1] == ("break",)

    def test_empty_project(self, empty_project):
        sink = RecordingSink()
        ProjectComposer().compose(empty_project, sink)
        assert sink.kinds() == ["cover", "break", "toc", "break"]
        assert sink.events[2][1].entries == []


class TestContent:

    def test_intro_after_part_heading(self, composed):
        index = composed.events.index(("heading", 1, "Partie 1: Origines"))
        kind, segments = composed.events[index + 1]
        assert kind == "intro"
        assert [s.text for s in segments] == ["Où tout", "commence", "."]
        assert segments[1].italic

    def test_no_intro_when_missing(self, composed):
        index = composed.events.index(("heading", 1, "Partie 2: Suite"))
        assert composed.events[index + 1][0] == "heading"

    def test_blank_intro_skipped(self):
        part = Part(number=1, title="P", intro="   ")
        sink = RecordingSink()
        ProjectComposer()._compose_part(part, sink)
        assert sink.kinds() == ["heading"]

    def test_separator_is_plain_space(self, composed):
        runs = composed.paragraphs()[0]
        separator = runs[3]
        assert separator == TextSegment.plain(" ")

    def test_styles_reach_the_sink(self, composed):
        runs = composed.paragraphs()[0]
        assert runs[1].bold
        assert runs[4].strikethrough

    def test_rich_markup_notion_normalized(self, composed):
        last = composed.paragraphs()[-1]
        assert [s.text for s in last] == ["Enfin", "chez lui", "."]
        assert last[1].bold

    def test_paragraph_without_notions_emits_nothing(self):
        chapter = Chapter(number=1, title="C", paragraphs=[
            Paragraph(name="empty", number=1, notions=[]),
            Paragraph(name="full", number=2, notions=[Notion(name="n", number=1, content="x")]),
        ])
        sink = RecordingSink()
        ProjectComposer()._compose_chapter(chapter, sink)
        assert sink.kinds() == ["heading", "begin", "run", "end"]

    def test_english_labels(self, sample_project):
        sink = RecordingSink()
        ProjectComposer(lang="en").compose(sample_project, sink)
        assert sink.headings(level=1)[0] == "Part 1: Origines"
        assert sink.events[0][1].author_line == "Author: Ada Martin"

    def test_compose_returns_sink(self, sample_project):
        sink = RecordingSink()
        assert ProjectComposer().compose(sample_project, sink) is sink
