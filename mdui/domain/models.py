from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from mdui.domain.errors import UnsupportedFormat


@dataclass(frozen=True)
class DocumentSnapshot:
    """Read-only copy of a stored document, as handed to the export pipeline."""

    id: int | None
    name: str
    content: str
    created_at: str | None = None
    updated_at: str | None = None


class ExportFormat(Enum):
    MARKDOWN = "md"
    HTML = "html"
    PDF = "pdf"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return "Markdown" if self is ExportFormat.MARKDOWN else self.name

    @classmethod
    def parse(cls, text: str) -> ExportFormat:
        key = (text or "").strip().lower()
        if key == "markdown":
            return cls.MARKDOWN
        for fmt in cls:
            if fmt.value == key:
                return fmt
        raise UnsupportedFormat(f"Unsupported format: {text}. Supported: md, html, pdf")


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, text: str | None) -> Theme:
        return cls.DARK if (text or "").strip().lower() == "dark" else cls.LIGHT


class RenderStage(Enum):
    """Lifecycle of one headless-browser PDF render."""

    IDLE = "idle"
    LAUNCHING = "launching"
    PAGE_LOADED = "page_loaded"
    AWAITING_DIAGRAM_RENDER = "awaiting_diagram_render"
    PRINTING = "printing"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class DiagramBlock:
    token: str
    source: str
    ordinal: int

    @property
    def marker(self) -> str:
        # An HTML comment survives Markdown conversion verbatim and never renders.
        return f"<!--{self.token}-->"


@dataclass(frozen=True)
class ExtractionResult:
    markdown: str
    blocks: tuple[DiagramBlock, ...] = ()


@dataclass(frozen=True)
class ExportJob:
    """One export request. Lives only for the duration of a single export call."""

    content: str
    title: str
    format: ExportFormat
    destination: Path
    theme: Theme = Theme.LIGHT
