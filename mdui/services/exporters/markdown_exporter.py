from __future__ import annotations

from mdui.domain.interfaces import IExporter, IFileService
from mdui.domain.models import ExportFormat, ExportJob


class MarkdownExporter(IExporter):
    name = "md"
    label = "Export Markdown…"
    file_ext = "md"
    format = ExportFormat.MARKDOWN

    def __init__(self, files: IFileService) -> None:
        self._files = files

    def export(self, job: ExportJob) -> None:
        self._files.write_text_atomic(job.destination, job.content)
