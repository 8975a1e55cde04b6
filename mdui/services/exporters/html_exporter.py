from __future__ import annotations

from mdui.domain.interfaces import IExporter, IFileService
from mdui.domain.models import ExportFormat, ExportJob
from mdui.services.conversion import HtmlConversionPipeline


class HtmlExporter(IExporter):
    name = "html"
    label = "Export HTML…"
    file_ext = "html"
    format = ExportFormat.HTML

    def __init__(self, pipeline: HtmlConversionPipeline, files: IFileService) -> None:
        self._pipeline = pipeline
        self._files = files

    def export(self, job: ExportJob) -> None:
        html = self._pipeline.convert(job.content, title=job.title, theme=job.theme)
        self._files.write_text_atomic(job.destination, html)
