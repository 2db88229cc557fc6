"""In-memory storage backend for documents."""

from __future__ import annotations

import threading

from docstore.models import Document, SearchRequest
from docstore.predicates import matches
from docstore.utils import generate_document_id, get_logger

logger = get_logger(__name__)


class DocumentStore:
    """Dict-based document storage keyed by document ID.

    Documents are deep-copied on the way in and on the way out, so
    callers never hold a reference into the store. Writes are serialized
    by a lock; no operation raises for any document or request.
    """

    def __init__(self) -> None:
        self._documents: dict[str, Document] = {}
        self._lock = threading.Lock()

    # -- Writes ---------------------------------------------------------------

    def save(self, document: Document) -> Document:
        """Insert or fully replace a document, assigning an ID if it has none.

        The generated ID is also set on the caller's document. The stored
        record is a copy; the returned document is another copy of it.
        """
        if document.id is None:
            document.id = generate_document_id()
            logger.debug("Assigned id %s to new document", document.id)

        stored = document.model_copy(deep=True)
        with self._lock:
            if stored.id in self._documents:
                logger.debug("Overwriting document %s", stored.id)
            self._documents[stored.id] = stored
        return stored.model_copy(deep=True)

    # -- Reads ----------------------------------------------------------------

    def find_by_id(self, doc_id: str) -> Document | None:
        """Retrieve a document, or None if not found."""
        with self._lock:
            document = self._documents.get(doc_id)
            return document.model_copy(deep=True) if document is not None else None

    def search(self, request: SearchRequest) -> list[Document]:
        """Return every document matching all dimensions of *request*.

        Order follows insertion but is not part of the contract.
        """
        with self._lock:
            results = [
                d.model_copy(deep=True)
                for d in self._documents.values()
                if matches(request, d)
            ]
            total = len(self._documents)
        logger.debug("Search matched %d of %d documents", len(results), total)
        return results

    def all(self) -> list[Document]:
        """Return every stored document, including those without a timestamp."""
        with self._lock:
            return [d.model_copy(deep=True) for d in self._documents.values()]

    def exists(self, doc_id: str) -> bool:
        with self._lock:
            return doc_id in self._documents

    def count(self) -> int:
        with self._lock:
            return len(self._documents)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, doc_id: object) -> bool:
        return isinstance(doc_id, str) and self.exists(doc_id)
