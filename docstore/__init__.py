"""
docstore - in-memory document repository

Upsert, lookup by ID, and multi-criteria filtered search over documents
held in a single process.

Call ``configure_logging()`` once at startup to apply the
``DOCSTORE_LOG_LEVEL`` / ``DOCSTORE_LOG_FILE`` settings.
"""

__version__ = "0.1.0"

from docstore.models import Author, Document, SearchRequest
from docstore.settings import DocstoreSettings, configure_logging
from docstore.storage import DocumentStore
from docstore.utils import ConfigurationError, DocstoreError

__all__ = [
    "Author",
    "Document",
    "SearchRequest",
    "DocumentStore",
    "DocstoreSettings",
    "configure_logging",
    "DocstoreError",
    "ConfigurationError",
]
