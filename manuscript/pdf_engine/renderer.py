"""
PDF Renderer using ReportLab.

Converts a Project to PDF on a worker thread. ReportLab serializes the
whole document in one write when the build ends; that output is handed to
the caller in chunks through a bounded queue. The first chunk is therefore
available only once the build is complete.
"""

import queue
import threading
from pathlib import Path
from typing import Iterator, Optional, Union

from reportlab.platypus import SimpleDocTemplate
from reportlab.lib.units import cm

from ..composer import ProjectComposer
from ..exceptions import RenderError
from ..models import Project
from .sink import PdfSink
from .style_builder import FontManager, StyleBuilder
from .templates import PdfTemplate, create_pdf_template
from config.logging_config import get_logger
from config.settings import settings


logger = get_logger(__name__)

# Queue markers
_DONE = object()


class _Failure:
    """Carries a producer-side exception to the consumer"""

    def __init__(self, error: BaseException):
        self.error = error


class _Cancelled(Exception):
    """Consumer stopped reading"""


class _QueueWriter:
    """
    Minimal binary file object for SimpleDocTemplate.

    Splits writes into chunk_size pieces and blocks while the queue is
    full, until the consumer catches up or cancels.
    """

    def __init__(self, chunks: queue.Queue, chunk_size: int, cancelled: threading.Event):
        self._chunks = chunks
        self._chunk_size = chunk_size
        self._cancelled = cancelled
        self._buffer = bytearray()

    def write(self, data: Union[bytes, str]) -> int:
        if isinstance(data, str):
            data = data.encode('latin-1')
        self._buffer.extend(data)
        while len(self._buffer) >= self._chunk_size:
            self._put(bytes(self._buffer[:self._chunk_size]))
            del self._buffer[:self._chunk_size]
        return len(data)

    def flush(self):
        pass

    def close_stream(self):
        if self._buffer:
            self._put(bytes(self._buffer))
            self._buffer.clear()
        self._put(_DONE)

    def fail(self, error: BaseException):
        self._put(_Failure(error))

    def _put(self, item):
        while not self._cancelled.is_set():
            try:
                self._chunks.put(item, timeout=0.1)
                return
            except queue.Full:
                continue
        raise _Cancelled()


class PdfRenderer:
    """
    PDF Renderer using ReportLab.

    Takes a Project and produces the PDF export.
    Supports multiple templates (standard, book).
    """

    def __init__(
        self,
        template: Optional[str] = None,
        custom_template: Optional[PdfTemplate] = None,
        lang: Optional[str] = None,
        chunk_size: Optional[int] = None,
        queue_size: Optional[int] = None,
    ):
        """
        Initialize PDF renderer.

        Args:
            template: Template name ('standard', 'book'); defaults to settings
            custom_template: Optional custom PdfTemplate instance
            lang: Label language; defaults to settings.export_language
            chunk_size: Bytes per streamed chunk
            queue_size: Chunks buffered before the builder blocks
        """
        if custom_template:
            self.template = custom_template
        else:
            self.template = create_pdf_template(template or settings.default_pdf_template)

        self.lang = lang or settings.export_language
        self.chunk_size = chunk_size or settings.pdf_stream_chunk_size
        self.queue_size = queue_size or settings.pdf_stream_queue_size

        self.font_manager = FontManager()
        self.style_builder: Optional[StyleBuilder] = None

    def _ensure_styles_built(self):
        """Register fonts and build styles once per renderer."""
        if self.style_builder is None:
            self.font_manager.register_template_fonts(self.template)
            self.style_builder = StyleBuilder(self.template, self.font_manager)
            self.style_builder.build_all_styles()

    def stream(self, project: Project) -> Iterator[bytes]:
        """
        Render the project and yield the PDF in chunks.

        Errors raised while building are re-raised here as RenderError.
        Closing the iterator early stops the builder thread.
        """
        self._ensure_styles_built()

        chunks: queue.Queue = queue.Queue(maxsize=self.queue_size)
        cancelled = threading.Event()
        writer = _QueueWriter(chunks, self.chunk_size, cancelled)

        worker = threading.Thread(
            target=self._produce,
            args=(project, writer),
            name="pdf-render",
            daemon=True,
        )
        worker.start()

        total = 0
        try:
            while True:
                item = chunks.get()
                if item is _DONE:
                    break
                if isinstance(item, _Failure):
                    raise RenderError("pdf", item.error) from item.error
                total += len(item)
                yield item
        finally:
            cancelled.set()
            worker.join(timeout=5)

        logger.info(f"PDF streamed for '{project.name}': {total} bytes")

    def render(self, project: Project) -> bytes:
        """Render the project to PDF bytes."""
        return b''.join(self.stream(project))

    def render_to_file(self, project: Project, output_path: str) -> Path:
        """
        Render the project to a PDF file.

        Returns:
            Path to generated PDF
        """
        output = Path(output_path)
        output.parent.mkdir(parents=True, exist_ok=True)

        with open(output, 'wb') as f:
            for chunk in self.stream(project):
                f.write(chunk)

        logger.info(f"PDF rendered: {output}")
        return output

    def _produce(self, project: Project, writer: _QueueWriter):
        try:
            self._build(project, writer)
            writer.close_stream()
        except _Cancelled:
            logger.debug("PDF consumer went away, stopping build")
        except Exception as e:
            logger.error(f"PDF rendering failed for '{project.name}': {e}")
            try:
                writer.fail(e)
            except _Cancelled:
                logger.debug("PDF consumer went away before the error was reported")

    def _build(self, project: Project, output):
        """Compose the story and let ReportLab lay it out into output."""
        sink = PdfSink(self.style_builder.build_all_styles())
        ProjectComposer(lang=self.lang).compose(project, sink)
        story = sink.finalize()

        page_spec = self.template.get_page_spec()
        doc = SimpleDocTemplate(
            output,
            pagesize=page_spec.size,
            topMargin=page_spec.top_margin,
            rightMargin=page_spec.right_margin,
            bottomMargin=page_spec.bottom_margin,
            leftMargin=page_spec.left_margin,
            title=project.name,
            author=project.owner.full_name,
        )

        doc.build(
            story,
            onFirstPage=self._make_page_callback(is_first=True),
            onLaterPages=self._make_page_callback(is_first=False)
        )

    def _make_page_callback(self, is_first: bool):
        """Create page callback for the page-number footer."""
        footer = self.template.get_footer()
        footer_style = self.style_builder.get_footer_style()

        def callback(canvas, doc):
            if is_first and footer.skip_first_page:
                return

            canvas.saveState()
            page_width, _ = doc.pagesize
            canvas.setFont(footer_style.fontName, footer_style.fontSize)
            canvas.setFillColor(footer_style.textColor)
            canvas.drawCentredString(page_width/2, min(1*cm, doc.bottomMargin/2), str(doc.page))
            canvas.restoreState()

        return callback
