"""Exporter strategies and registry."""

from .base import ExporterRegistryInst
from .html_exporter import HtmlExporter
from .markdown_exporter import MarkdownExporter
from .pdf_exporter import PdfExporter
from .pdf_renderer import PdfRenderer, PdfSettings

__all__ = [
    "ExporterRegistryInst",
    "MarkdownExporter",
    "HtmlExporter",
    "PdfExporter",
    "PdfRenderer",
    "PdfSettings",
]
