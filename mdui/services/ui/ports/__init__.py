from __future__ import annotations

from .dialogs import IFileDialogService
from .messages import IMessageService

__all__ = [
    "IFileDialogService",
    "IMessageService",
]
