from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Protocol

from mdui.domain.models import DocumentSnapshot, ExportFormat, ExportJob


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to an HTML body fragment (no <html>/<head> wrapper)."""

    def to_fragment(self, markdown_text: str) -> str: ...


class IFileService(Protocol):
    """Write files atomically: either complete or absent."""

    def write_text_atomic(self, path: Path, text: str) -> None: ...
    def write_bytes_atomic(self, path: Path, data: bytes) -> None: ...


class IDocumentStore(Protocol):
    """Read side of the storage collaborator. The export pipeline never writes records."""

    def get_document(self, document_id: int) -> DocumentSnapshot | None: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_float(
        self, section: str, key: str, default: float | None = None
    ) -> float | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...


class IExporter(ABC):
    """Export strategy interface. Implementations write one ExportJob to its destination."""

    name: str  # e.g. "html", "pdf"
    label: str  # e.g. "Export HTML…"
    file_ext: str  # e.g. "html"
    format: ExportFormat

    @property
    def filter_str(self) -> str:
        return f"{self.format.label} (*.{self.file_ext})"

    def is_available(self) -> bool:
        return True

    def ensure_available(self) -> None:
        """Raise an ExportError when this exporter cannot run on this host."""

    @abstractmethod
    def export(self, job: ExportJob) -> None:
        """Perform export. 'job.content' holds the raw Markdown of the document."""
        raise NotImplementedError


class IExporterRegistry(Protocol):
    def register(self, e: IExporter) -> None: ...
    def get(self, name: str) -> IExporter: ...
    def all(self) -> list[IExporter]: ...
