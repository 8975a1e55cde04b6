from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from mdui.domain.errors import DocumentNotFound, FileWriteFailed
from mdui.domain.interfaces import IDocumentStore, IExporter
from mdui.domain.models import DocumentSnapshot, ExportFormat, ExportJob, Theme
from mdui.services.exporters.base import ExporterRegistryInst

logger = logging.getLogger(__name__)

# A stored snapshot, a document id to look up, or raw Markdown text.
ExportSource = Union[DocumentSnapshot, int, str]


class ExportCoordinator:
    """
    Single entry point of the export pipeline.

    ``export()`` returns True when a file was written and False when there was
    nothing to do (empty/cancelled destination). Every failure is raised as an
    ExportError subclass; nothing is retried.
    """

    def __init__(
        self,
        exporters: ExporterRegistryInst,
        store: IDocumentStore | None = None,
        *,
        default_theme: Theme = Theme.LIGHT,
    ) -> None:
        self._exporters = exporters
        self._store = store
        self.default_theme = default_theme

    def exporter_for(self, fmt: ExportFormat | str) -> IExporter:
        return self._exporters.for_format(_as_format(fmt))

    def is_pdf_available(self) -> bool:
        return self.exporter_for(ExportFormat.PDF).is_available()

    def export(
        self,
        source: ExportSource,
        fmt: ExportFormat | str,
        destination: Path | str | None,
        *,
        theme: Theme | None = None,
    ) -> bool:
        if destination is None or not str(destination).strip():
            logger.debug("Export skipped: no destination chosen")
            return False

        exporter = self.exporter_for(fmt)
        # Checked before any conversion work: a missing browser spawns nothing.
        exporter.ensure_available()

        out_path = Path(destination)
        doc = self._resolve(source, out_path)
        job = ExportJob(
            content=doc.content,
            title=doc.name,
            format=exporter.format,
            destination=out_path,
            theme=theme or self.default_theme,
        )

        try:
            exporter.export(job)
        except OSError as exc:
            raise FileWriteFailed(f"Failed to write file {out_path}: {exc}") from exc

        logger.info("Exported %r as %s to %s", doc.name, job.format.label, out_path)
        return True

    def _resolve(self, source: ExportSource, out_path: Path) -> DocumentSnapshot:
        if isinstance(source, DocumentSnapshot):
            return source
        if isinstance(source, str):
            return DocumentSnapshot(id=None, name=out_path.stem or "Untitled", content=source)
        if self._store is None:
            raise DocumentNotFound(f"Document {source} not found: no document store configured")
        doc = self._store.get_document(source)
        if doc is None:
            raise DocumentNotFound(f"Document {source} not found")
        return doc


def _as_format(fmt: ExportFormat | str) -> ExportFormat:
    return fmt if isinstance(fmt, ExportFormat) else ExportFormat.parse(fmt)
