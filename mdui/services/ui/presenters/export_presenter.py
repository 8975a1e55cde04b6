from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from mdui.domain.errors import ExportError
from mdui.domain.models import DocumentSnapshot, ExportFormat
from mdui.services.export_coordinator import ExportCoordinator
from mdui.services.ui.ports.dialogs import IFileDialogService
from mdui.services.ui.ports.messages import IMessageService

logger = logging.getLogger(__name__)


@runtime_checkable
class IExportView(Protocol):
    """Very small surface the export flow needs from the hosting window."""

    def show_status(self, text: str, msec: int = 3000) -> None: ...


class ExportPresenter:
    """
    Save dialog -> ExportCoordinator -> user feedback.

    Cancelling the dialog is a silent no-op. Every ExportError ends up in an error
    message box; none escapes to the event loop.
    """

    def __init__(
        self,
        view: IExportView,
        coordinator: ExportCoordinator,
        messages: IMessageService,
        dialogs: IFileDialogService,
    ) -> None:
        self.view = view
        self.coordinator = coordinator
        self.messages = messages
        self.dialogs = dialogs

    def available_formats(self) -> list[ExportFormat]:
        """Formats to offer in the export menu; PDF only when a browser is installed."""
        formats = [ExportFormat.MARKDOWN, ExportFormat.HTML]
        if self.coordinator.is_pdf_available():
            formats.append(ExportFormat.PDF)
        return formats

    def export_via_dialog(
        self, document: DocumentSnapshot, fmt: ExportFormat, parent: Any | None = None
    ) -> bool:
        exporter = self.coordinator.exporter_for(fmt)
        default = f"{document.name or 'document'}.{exporter.file_ext}"
        out = self.dialogs.get_save_file(parent, exporter.label, default, exporter.filter_str)
        if not out:
            return False

        try:
            written = self.coordinator.export(document, fmt, out)
        except ExportError as e:
            logger.debug("Export of %r as %s failed", document.name, fmt.label, exc_info=True)
            self.messages.error(parent, "Export Error", f"Failed to export as {fmt.label}:\n{e}")
            return False

        if written:
            self.view.show_status(f"Exported {fmt.label}: {out}", 3000)
        return written
