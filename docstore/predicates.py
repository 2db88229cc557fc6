"""Search predicates applied by DocumentStore.search.

Each predicate takes one request dimension and the matching document
field. An absent or empty collection places no constraint. ``matches`` is the
AND of all four.
"""

from __future__ import annotations

from datetime import datetime
from typing import Collection

from docstore.models import Author, Document, SearchRequest


def match_title_prefixes(title_prefixes: Collection[str] | None, title: str | None) -> bool:
    """True if the title starts with any of the prefixes (case-sensitive)."""
    if not title_prefixes:
        return True
    return title is not None and any(title.startswith(p) for p in title_prefixes)


def match_contains_contents(contains_contents: Collection[str] | None, content: str | None) -> bool:
    """True if the content contains any of the substrings (case-sensitive)."""
    if not contains_contents:
        return True
    return content is not None and any(s in content for s in contains_contents)


def match_author_ids(author_ids: Collection[str] | None, author: Author | None) -> bool:
    if not author_ids:
        return True
    return author is not None and author.id in author_ids


def match_created_range(
    created_from: datetime | None,
    created_to: datetime | None,
    created: datetime | None,
) -> bool:
    """True if ``created`` lies within [created_from, created_to].

    A document without a created timestamp never matches, even when
    neither bound is set.
    """
    if created is None:
        return False
    if created_from is not None and created < created_from:
        return False
    return created_to is None or created <= created_to


def matches(request: SearchRequest, document: Document) -> bool:
    return (
        match_title_prefixes(request.title_prefixes, document.title)
        and match_contains_contents(request.contains_contents, document.content)
        and match_author_ids(request.author_ids, document.author)
        and match_created_range(request.created_from, request.created_to, document.created)
    )
