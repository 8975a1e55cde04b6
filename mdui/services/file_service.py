from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from mdui.domain.interfaces import IFileService


class FileService(IFileService):
    """Atomic writes. A failed write leaves no partial file behind."""

    def write_text_atomic(self, path: Path, text: str) -> None:
        self.write_bytes_atomic(path, text.encode("utf-8"))

    def write_bytes_atomic(self, path: Path, data: bytes) -> None:
        # QSaveFile writes to a temporary sibling and renames it over `path` on commit.
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        if sf.write(data) != len(data):
            sf.cancelWriting()
            raise OSError(f"Short write to: {path}")
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
