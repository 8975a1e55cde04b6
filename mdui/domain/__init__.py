"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import (
    BrowserLaunchFailed,
    BrowserUnavailable,
    DocumentNotFound,
    ExportError,
    ExtractionDefect,
    FileWriteFailed,
    NavigationFailed,
    PrintFailed,
    StorageReadFailed,
    UnsupportedFormat,
)
from .interfaces import (
    IDocumentStore,
    IExporter,
    IExporterRegistry,
    IFileService,
    IMarkdownRenderer,
)
from .models import (
    DiagramBlock,
    DocumentSnapshot,
    ExportFormat,
    ExportJob,
    ExtractionResult,
    RenderStage,
    Theme,
)

__all__ = [
    "IMarkdownRenderer",
    "IFileService",
    "IDocumentStore",
    "IExporter",
    "IExporterRegistry",
    "DocumentSnapshot",
    "DiagramBlock",
    "ExtractionResult",
    "ExportFormat",
    "ExportJob",
    "RenderStage",
    "Theme",
    "ExportError",
    "ExtractionDefect",
    "UnsupportedFormat",
    "DocumentNotFound",
    "StorageReadFailed",
    "BrowserUnavailable",
    "BrowserLaunchFailed",
    "NavigationFailed",
    "PrintFailed",
    "FileWriteFailed",
]
