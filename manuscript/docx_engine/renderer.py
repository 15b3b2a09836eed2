"""
Main DOCX Renderer - Orchestrates composer and sink to produce the final document.
"""

from typing import Optional, Union
from pathlib import Path

from ..composer import ProjectComposer
from ..exceptions import RenderError
from ..models import Project
from .sink import DocxSink
from .templates.base import DocxTemplate, create_template
from config.logging_config import get_logger
from config.settings import settings

logger = get_logger(__name__)


class DocxRenderer:
    """
    Main DOCX renderer.

    Usage:
        renderer = DocxRenderer(template='standard')
        data = renderer.render(project)

        renderer = DocxRenderer(template='book')
        output_path = renderer.render_to_file(project, 'book.docx')
    """

    def __init__(
        self,
        template: Optional[Union[str, DocxTemplate]] = None,
        lang: Optional[str] = None
    ):
        """
        Initialize renderer.

        Args:
            template: Template name ('standard', 'book') or DocxTemplate instance
            lang: Label language; defaults to settings.export_language
        """
        if template is None:
            template = settings.default_docx_template

        if isinstance(template, str):
            self.template = create_template(template)
        else:
            self.template = template

        self.lang = lang or settings.export_language

    def render(self, project: Project) -> bytes:
        """
        Render the project to DOCX bytes.

        Raises:
            RenderError: python-docx failed to build or serialize the document
        """
        logger.info(f"Rendering '{project.name}' with {self.template.name} template")

        try:
            sink = ProjectComposer(lang=self.lang).compose(project, DocxSink(self.template))
            data = sink.finalize()
        except Exception as e:
            logger.error(f"DOCX rendering failed for '{project.name}': {e}")
            raise RenderError("docx", e) from e

        logger.info(f"DOCX rendered for '{project.name}': {len(data)} bytes")
        return data

    def render_to_file(self, project: Project, output_path: str) -> Path:
        """
        Render the project to a DOCX file.

        Returns:
            Path to created DOCX file
        """
        output = Path(output_path)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(self.render(project))

        logger.info(f"Document saved: {output}")
        return output
