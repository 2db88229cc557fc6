"""Pydantic v2 models for stored documents and search requests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def _as_utc(value: datetime | None) -> datetime | None:
    # Naive timestamps are read as UTC so range comparisons never mix
    # naive and aware datetimes.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: str | None = None
    name: str | None = None


class Document(BaseModel):
    """A stored record.

    Every field is optional. ``id`` is filled in by the store on first
    save; ``created`` must be set for the document to appear in search
    results. Assignments are validated, so a naive ``created`` is read
    as UTC whether passed to the constructor or set afterwards.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    @field_validator("created")
    @classmethod
    def _normalize_created(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


class SearchRequest(BaseModel):
    """Immutable filter over stored documents.

    Each dimension left as None (or empty) places no constraint on
    results. The string dimensions accept a list, tuple or set and are
    held as tuples; each matches when any element matches, and
    dimensions are combined with AND. ``created_from`` and
    ``created_to`` bound a closed interval.
    """

    model_config = ConfigDict(frozen=True)

    title_prefixes: tuple[str, ...] | None = None
    contains_contents: tuple[str, ...] | None = None
    author_ids: tuple[str, ...] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    @field_validator("created_from", "created_to")
    @classmethod
    def _normalize_bounds(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
