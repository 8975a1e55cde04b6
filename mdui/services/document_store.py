from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from dataclasses import dataclass, field
from pathlib import Path

from mdui.domain.errors import StorageReadFailed
from mdui.domain.interfaces import IDocumentStore
from mdui.domain.models import DocumentSnapshot

logger = logging.getLogger(__name__)

_SELECT_DOCUMENT = (
    "SELECT id, name, content, created_at, updated_at FROM documents WHERE id = ?"
)


class SqliteDocumentStore(IDocumentStore):
    """
    Read-only view over the editor's SQLite database (``documents`` table).

    The connection is opened per lookup in read-only mode, so concurrent exports
    share nothing and the pipeline can never modify a record.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path

    def get_document(self, document_id: int) -> DocumentSnapshot | None:
        uri = f"{self.db_path.resolve().as_uri()}?mode=ro"
        try:
            with closing(sqlite3.connect(uri, uri=True)) as conn:
                row = conn.execute(_SELECT_DOCUMENT, (document_id,)).fetchone()
        except sqlite3.Error as exc:
            raise StorageReadFailed(
                f"Could not read document {document_id} from {self.db_path}: {exc}"
            ) from exc

        if row is None:
            logger.debug("Document %s not found in %s", document_id, self.db_path)
            return None
        doc_id, name, content, created_at, updated_at = row
        return DocumentSnapshot(
            id=int(doc_id),
            name=str(name),
            content=str(content),
            created_at=None if created_at is None else str(created_at),
            updated_at=None if updated_at is None else str(updated_at),
        )


@dataclass
class InMemoryDocumentStore(IDocumentStore):
    """Dict-backed store for embedding the pipeline without a database."""

    _docs: dict[int, DocumentSnapshot] = field(default_factory=dict)

    def add(self, doc: DocumentSnapshot) -> None:
        if doc.id is None:
            raise ValueError("Stored documents need an id")
        self._docs[doc.id] = doc

    def get_document(self, document_id: int) -> DocumentSnapshot | None:
        return self._docs.get(document_id)
