"""Shared test fixtures for the docstore test suite."""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.models import Author, Document
from docstore.storage import DocumentStore


@pytest.fixture
def store():
    """An empty document store."""
    return DocumentStore()


@pytest.fixture
def now():
    return datetime.now(timezone.utc)


@pytest.fixture
def make_document(now):
    """Factory for documents with an author derived from *author_id*."""

    def _make(
        doc_id="doc-1",
        title="Title",
        content="Content",
        author_id="author-1",
        created=now,
    ):
        author = Author(id=author_id, name=f"Author {author_id}") if author_id else None
        return Document(
            id=doc_id,
            title=title,
            content=content,
            author=author,
            created=created,
        )

    return _make


@pytest.fixture
def populated_store(store, make_document, now):
    """Store holding three timestamped documents and one without a timestamp."""
    store.save(make_document("1", "PrefixMatch", "ahahahhaha keyword hahahahah", "author-1",
                             now - timedelta(seconds=100)))
    store.save(make_document("2", "NoMatch", "cat cat cat", "author-2",
                             now + timedelta(seconds=3600)))
    store.save(make_document("3", "Prefix second", "dog keyword", "author-3", now))
    store.save(make_document("4", "PrefixUntimed", "keyword", "author-1", created=None))
    return store
