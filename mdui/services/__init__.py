"""Concrete service implementations and export strategies."""

from .browser_probe import BrowserProbe
from .conversion import HtmlConversionPipeline
from .diagram_extractor import extract_diagram_blocks
from .document_store import InMemoryDocumentStore, SqliteDocumentStore
from .export_coordinator import ExportCoordinator
from .file_service import FileService
from .html_assembler import DiagramRuntime, HtmlAssembler, resolve_diagram_runtime
from .markdown_renderer import MarkdownRenderer

__all__ = [
    "BrowserProbe",
    "DiagramRuntime",
    "ExportCoordinator",
    "FileService",
    "HtmlAssembler",
    "HtmlConversionPipeline",
    "InMemoryDocumentStore",
    "MarkdownRenderer",
    "SqliteDocumentStore",
    "extract_diagram_blocks",
    "resolve_diagram_runtime",
]
