from __future__ import annotations

from mdui.domain.interfaces import IExporter, IFileService
from mdui.domain.models import ExportFormat, ExportJob
from mdui.services.conversion import HtmlConversionPipeline
from mdui.services.exporters.pdf_renderer import PdfRenderer


class PdfExporter(IExporter):
    """
    Assemble the HTML document, print it in a headless browser, write the PDF bytes.
    Output matches the HTML export, diagrams included.
    """

    name = "pdf"
    label = "Export PDF…"
    file_ext = "pdf"
    format = ExportFormat.PDF

    def __init__(
        self, pipeline: HtmlConversionPipeline, renderer: PdfRenderer, files: IFileService
    ) -> None:
        self._pipeline = pipeline
        self._renderer = renderer
        self._files = files

    def is_available(self) -> bool:
        return self._renderer.is_available()

    def ensure_available(self) -> None:
        self._renderer.find_executable()

    def export(self, job: ExportJob) -> None:
        html = self._pipeline.convert(job.content, title=job.title, theme=job.theme)
        data = self._renderer.render(html)
        self._files.write_bytes_atomic(job.destination, data)
