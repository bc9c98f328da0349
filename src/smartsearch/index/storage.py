"""In-memory document store."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from smartsearch.errors import DuplicateDocumentError
from smartsearch.models import Document

LOGGER = logging.getLogger(__name__)


class DocumentStore:
    """Ordered collection owning every ingested document.

    Insertion order is kept across add and remove. Callers only ever receive
    tuples, never the backing list.
    """

    def __init__(self) -> None:
        self._documents: List[Document] = []

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.list())

    def __contains__(self, doc_id: object) -> bool:
        return any(doc.id == doc_id for doc in self._documents)

    def add(self, batch: Sequence[Document]) -> None:
        """Append a batch, all or nothing."""
        if not batch:
            return

        seen = {doc.id for doc in self._documents}
        for doc in batch:
            if doc.id in seen:
                raise DuplicateDocumentError(f"Document id already present: {doc.id}")
            seen.add(doc.id)

        self._documents = [*self._documents, *batch]
        LOGGER.debug("Added %d documents, collection size %d", len(batch), len(self._documents))

    def remove(self, doc_id: str) -> bool:
        """Delete the document with ``doc_id``.

        Returns:
            True if a document was removed, False if none had that id.
        """
        for position, doc in enumerate(self._documents):
            if doc.id == doc_id:
                del self._documents[position]
                LOGGER.debug("Removed document %s (%s)", doc_id, doc.name)
                return True
        return False

    def list(self) -> Tuple[Document, ...]:
        return tuple(self._documents)

    def get(self, doc_id: str) -> Optional[Document]:
        for doc in self._documents:
            if doc.id == doc_id:
                return doc
        return None

    def clear(self) -> None:
        self._documents = []

    def get_stats(self) -> Dict[str, int]:
        return {
            "document_count": len(self._documents),
            "total_size_bytes": sum(doc.size_bytes for doc in self._documents),
            "total_chars": sum(len(doc.content) for doc in self._documents),
        }
