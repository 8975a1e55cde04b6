from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IFileDialogService(Protocol):
    """
    Abstract UI port for the native save dialog. Keeps the export flow decoupled from Qt.
    """

    def get_save_file(
            self,
            parent: Any | None,
            caption: str,
            start_path: str | None,
            filter_str: str,
    ) -> Path | None:
        """Return a selected destination path or None if cancelled."""
        ...
