from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from mdui.services.ui.ports.messages import IMessageService


class QtMessageService(IMessageService):
    """Qt-backed implementation for export result dialogs."""

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)
