"""Registry of the distinct root documents seen during a session."""

from __future__ import annotations

from collections.abc import Iterator
import logging
from pathlib import Path
from threading import RLock

from .diagnostics import DiagnosticEmitter, NullEmitter
from .documents import DocumentRecord
from .exceptions import UnknownDocumentError


__all__ = ["DocumentRegistry"]

logger = logging.getLogger(__name__)


class DocumentRegistry:
    """Ordered collection of document records keyed by insertion index.

    Ids are stable until `reset` is called. Paths are compared verbatim, so
    callers are expected to pass the absolute paths produced by the resolver.
    """

    def __init__(self, *, emitter: DiagnosticEmitter | None = None) -> None:
        self._records: list[DocumentRecord] = []
        self._lock = RLock()
        self.emitter: DiagnosticEmitter = emitter or NullEmitter()

    def find(self, tex_path: str | Path) -> int | None:
        """Return the id of the record for ``tex_path`` if one exists."""
        target = Path(tex_path)
        with self._lock:
            for index, record in enumerate(self._records):
                if record.tex_path == target:
                    return index
        return None

    def find_or_create(self, tex_path: str | Path) -> int:
        """Return the id for ``tex_path``, registering a new record if needed."""
        target = Path(tex_path)
        with self._lock:
            existing = self.find(target)
            if existing is not None:
                return existing
            self._records.append(DocumentRecord(tex_path=target))
            doc_id = len(self._records) - 1

        logger.debug("Registered document %d: %s", doc_id, target)
        self.emitter.event("document_registered", {"id": doc_id, "root": str(target)})
        return doc_id

    def get(self, doc_id: int) -> DocumentRecord:
        with self._lock:
            if 0 <= doc_id < len(self._records):
                return self._records[doc_id]
        raise UnknownDocumentError(doc_id)

    def list(self) -> tuple[DocumentRecord, ...]:
        """Return a snapshot of every registered record."""
        with self._lock:
            return tuple(self._records)

    def reset(self) -> None:
        """Forget every record; previously issued ids become invalid."""
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __iter__(self) -> Iterator[DocumentRecord]:
        return iter(self.list())
