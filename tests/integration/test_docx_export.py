"""
Integration tests for the DOCX export.

Renders real documents and reopens them with python-docx.
"""

import pytest
from io import BytesIO

# Skip if python-docx not available
pytest.importorskip("docx")

from docx import Document
from docx.oxml.ns import qn

from manuscript.docx_engine import (
    DocxRenderer, DocxSink, TOC_INSTRUCTION, TemplateType, create_template,
)
from manuscript.exceptions import RenderError


def _open(data: bytes):
    return Document(BytesIO(data))


def _page_breaks(doc) -> int:
    return sum(
        1 for br in doc.element.body.iter(qn('w:br'))
        if br.get(qn('w:type')) == 'page'
    )


def _instructions(element):
    return [node.text for node in element.iter(qn('w:instrText'))]


@pytest.fixture
def rendered(sample_project):
    return _open(DocxRenderer(template="standard", lang="fr").render(sample_project))


class TestDocxTemplates:

    def test_create_templates(self):
        assert create_template("standard").template_type == TemplateType.STANDARD
        assert create_template("book").template_type == TemplateType.BOOK

    def test_invalid_template_raises_error(self):
        with pytest.raises(ValueError, match="Unknown template type"):
            create_template("ebook")


class TestDocxStructure:

    def test_output_is_a_zip(self, sample_project):
        data = DocxRenderer().render(sample_project)
        assert data[:2] == b"PK"

    def test_cover(self, rendered):
        texts = [p.text for p in rendered.paragraphs]
        title = rendered.paragraphs[0]
        assert title.style.name == "Title"
        assert title.text == "Mon roman"
        assert texts[1:4] == ["Auteur: Ada Martin", "Email: ada@example.com", "Date: 05/03/2024"]

    def test_toc_field(self, rendered):
        assert TOC_INSTRUCTION in _instructions(rendered.element.body)
        texts = [p.text for p in rendered.paragraphs]
        assert "Sommaire" in texts

    def test_toc_field_prefilled_with_entries(self, rendered):
        texts = [p.text for p in rendered.paragraphs]
        start = texts.index("Sommaire")
        assert texts[start + 1:start + 6] == [
            "Partie 1: Origines",
            "Chapitre 1: Départ",
            "Chapitre 2: Voyage",
            "Partie 2: Suite",
            "Chapitre 1: Retour",
        ]

    def test_fields_refresh_on_open(self, rendered):
        assert rendered.settings.element.find(qn('w:updateFields')) is not None

    def test_headings_in_order(self, rendered):
        headings = [(p.style.name, p.text) for p in rendered.paragraphs
                    if p.style.name.startswith("Heading")]
        assert headings == [
            ("Heading 1", "Partie 1: Origines"),
            ("Heading 2", "Chapitre 1: Départ"),
            ("Heading 2", "Chapitre 2: Voyage"),
            ("Heading 1", "Partie 2: Suite"),
            ("Heading 2", "Chapitre 1: Retour"),
        ]

    def test_headings_underlined(self, rendered):
        for p in rendered.paragraphs:
            if p.style.name.startswith("Heading"):
                assert all(run.underline for run in p.runs), p.text

    def test_page_breaks(self, rendered):
        # cover, toc, second part, second chapter of part 1
        assert _page_breaks(rendered) == 4

    def test_page_number_footer(self, rendered):
        footer = rendered.sections[0].footer
        assert "PAGE" in _instructions(footer._element)
        assert rendered.sections[0].different_first_page_header_footer


class TestDocxRuns:

    def _paragraph_containing(self, doc, text):
        for p in doc.paragraphs:
            if text in p.text:
                return p
        raise AssertionError(f"no paragraph containing {text!r}")

    def test_notions_share_one_paragraph(self, rendered):
        p = self._paragraph_containing(rendered, "partit")
        assert [run.text for run in p.runs] == ["Il", "partit", "à l'aube", " ", "rayé"]

    def test_run_styles(self, rendered):
        runs = self._paragraph_containing(rendered, "partit").runs
        assert runs[1].bold
        assert not runs[0].bold
        assert runs[4].font.strike
        assert not runs[3].bold and not runs[3].font.strike

    def test_underline_run(self, rendered):
        runs = self._paragraph_containing(rendered, "longue").runs
        underlined = [run.text for run in runs if run.underline]
        assert underlined == ["longue"]

    def test_intro_is_italic(self, rendered):
        p = self._paragraph_containing(rendered, "Où tout")
        assert all(run.italic for run in p.runs)

    def test_rich_markup_notion(self, rendered):
        runs = self._paragraph_containing(rendered, "chez lui").runs
        assert [(run.text, bool(run.bold)) for run in runs] == [
            ("Enfin", False), ("chez lui", True), (".", False),
        ]


class TestDocxRenderer:

    def test_empty_project(self, empty_project):
        doc = _open(DocxRenderer().render(empty_project))
        assert _page_breaks(doc) == 2
        assert TOC_INSTRUCTION in _instructions(doc.element.body)

    def test_book_template(self, sample_project):
        doc = _open(DocxRenderer(template="book").render(sample_project))
        section = doc.sections[0]
        assert round(section.page_width.cm, 1) == 14.0
        assert _page_breaks(doc) == 4

    def test_english_labels(self, sample_project):
        doc = _open(DocxRenderer(lang="en").render(sample_project))
        texts = [p.text for p in doc.paragraphs]
        assert "Part 1: Origines" in texts
        assert "Contents" in texts

    def test_render_to_file(self, sample_project, tmp_path):
        output = DocxRenderer().render_to_file(sample_project, str(tmp_path / "out" / "book.docx"))
        assert output.exists()
        assert _open(output.read_bytes()).paragraphs[0].text == "Mon roman"

    def test_engine_failure_wrapped(self, sample_project, monkeypatch):
        def broken_save(self):
            raise OSError("disk full")

        monkeypatch.setattr(DocxSink, "finalize", broken_save)

        with pytest.raises(RenderError) as exc_info:
            DocxRenderer().render(sample_project)
        assert exc_info.value.fmt == "docx"
        assert isinstance(exc_info.value.cause, OSError)

    def test_each_render_is_independent(self, sample_project):
        renderer = DocxRenderer()
        first = _open(renderer.render(sample_project))
        second = _open(renderer.render(sample_project))
        assert len(first.paragraphs) == len(second.paragraphs)

    def test_footer_spec(self):
        for name in ("standard", "book"):
            footer = create_template(name).get_footer()
            assert footer.skip_first_page
            assert footer.font.size.pt == 9
