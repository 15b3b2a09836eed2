"""
Layout Engine - Handles document-level layout: page setup, footers, TOC field.
"""

from docx.document import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.oxml import OxmlElement

from ..sink import TableOfContents
from .style_mapper import StyleMapper
from .templates.base import DocxTemplate, FooterSpec
from config.logging_config import get_logger

logger = get_logger(__name__)

# Headings 1-2 only: parts and chapters
TOC_INSTRUCTION = 'TOC \\o "1-2" \\h \\z \\u'


class LayoutEngine:
    """
    Handles document-level layout concerns:
    - Page setup (size, margins)
    - Page-number footer
    - Table of contents field
    """

    def __init__(self, document: Document, template: DocxTemplate):
        self.doc = document
        self.template = template

    def setup_document(self):
        """Configure page setup and footers for every section"""
        page_setup = self.template.get_page_setup()

        for section in self.doc.sections:
            section.page_width = page_setup.width
            section.page_height = page_setup.height

            section.top_margin = page_setup.top_margin
            section.bottom_margin = page_setup.bottom_margin
            section.left_margin = page_setup.left_margin
            section.right_margin = page_setup.right_margin
            section.gutter = page_setup.gutter

        self.add_footer()

    def add_footer(self):
        """Centered page number on every page but the cover"""
        spec = self.template.get_footer()

        for section in self.doc.sections:
            section.different_first_page_header_footer = spec.skip_first_page
            self._setup_footer(section, spec)

    def _setup_footer(self, section, spec: FooterSpec):
        footer = section.footer
        para = footer.paragraphs[0] if footer.paragraphs else footer.add_paragraph()
        para.clear()
        para.alignment = WD_ALIGN_PARAGRAPH.CENTER

        run = para.add_run()
        run.font.name = spec.font.name
        run.font.size = spec.font.size
        self._append_field(run, 'PAGE')

    def add_toc(self, toc: TableOfContents, mapper: StyleMapper):
        """
        Add the table of contents as a TOC field over headings 1-2.

        The field result is pre-filled with the entries so the TOC reads
        correctly before Word refreshes fields; Word then adds page numbers.
        """
        mapper.add_paragraph('toc_title', toc.title)
        self.enable_update_fields()

        if not toc.entries:
            para = mapper.add_paragraph('toc_1')
            run = para.add_run()
            self._append_fld_char(run, 'begin')
            self._append_instr_text(run, TOC_INSTRUCTION)
            self._append_fld_char(run, 'separate')
            self._append_fld_char(run, 'end')
            return

        last_index = len(toc.entries) - 1
        for index, entry in enumerate(toc.entries):
            style_name = f'toc_{entry.level}'
            para = mapper.add_paragraph(style_name)

            if index == 0:
                run = para.add_run()
                self._append_fld_char(run, 'begin')
                self._append_instr_text(run, TOC_INSTRUCTION)
                self._append_fld_char(run, 'separate')

            run = para.add_run(entry.text)
            mapper.apply_font_spec(run, mapper.spec(style_name).font)

            if index == last_index:
                run = para.add_run()
                self._append_fld_char(run, 'end')

        logger.debug(f"TOC field with {len(toc.entries)} entries")

    def enable_update_fields(self):
        """Ask Word to refresh fields (TOC page numbers) when the file opens"""
        settings_element = self.doc.settings.element
        existing = settings_element.find(qn('w:updateFields'))
        if existing is not None:
            return

        update = OxmlElement('w:updateFields')
        update.set(qn('w:val'), 'true')
        settings_element.append(update)

    def _append_field(self, run, instruction: str):
        """Simple field: begin, instruction, end"""
        self._append_fld_char(run, 'begin')
        self._append_instr_text(run, instruction)
        self._append_fld_char(run, 'end')

    @staticmethod
    def _append_fld_char(run, char_type: str):
        fld_char = OxmlElement('w:fldChar')
        fld_char.set(qn('w:fldCharType'), char_type)
        run._r.append(fld_char)

    @staticmethod
    def _append_instr_text(run, instruction: str):
        instr_text = OxmlElement('w:instrText')
        instr_text.set(qn('xml:space'), 'preserve')
        instr_text.text = instruction
        run._r.append(instr_text)
