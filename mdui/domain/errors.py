from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mdui.domain.models import RenderStage


class ExportError(Exception):
    """Base class for every failure the export pipeline reports to its caller."""

    def __init__(self, message: str, *, stage: RenderStage | None = None) -> None:
        super().__init__(message)
        self.stage = stage


class ExtractionDefect(ExportError):
    """Diagram placeholders and extracted blocks disagree (internal invariant broken)."""


class UnsupportedFormat(ExportError):
    pass


class DocumentNotFound(ExportError):
    pass


class StorageReadFailed(ExportError):
    pass


class BrowserUnavailable(ExportError):
    """No compatible browser executable could be found on this host."""


class BrowserLaunchFailed(ExportError):
    pass


class NavigationFailed(ExportError):
    pass


class PrintFailed(ExportError):
    pass


class FileWriteFailed(ExportError):
    pass
