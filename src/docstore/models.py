"""Domain entities for docstore."""
from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, field_validator


def _as_utc(value: datetime | None) -> datetime | None:
    """Treat naive timestamps as UTC so they compare against stored ones."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Identity of a document's creator."""
    id: str
    name: str | None = None


class Document(BaseModel):
    """A stored record.

    ``id`` and ``created`` are filled in by the store on first save when
    the caller leaves ``id`` unset.
    """
    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    model_config = {"validate_assignment": True}

    @field_validator("created")
    @classmethod
    def _created_utc(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)

    @property
    def author_id(self) -> str | None:
        """The author's id, or None when the document has no author."""
        return self.author.id if self.author is not None else None


class SearchRequest(BaseModel):
    """Query value; every field is an independent, optional criterion.

    An empty list still counts as a present criterion. A None candidate in
    the title or content list matches a document whose field is unset. The created range
    only applies when both ends are set.
    """
    title_prefixes: list[str | None] | None = None
    contains_contents: list[str | None] | None = None
    author_ids: list[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    @field_validator("created_from", "created_to")
    @classmethod
    def _range_utc(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)

    @property
    def has_created_range(self) -> bool:
        return self.created_from is not None and self.created_to is not None

    def has_criteria(self) -> bool:
        """Return True if at least one criterion is present."""
        return (
            self.title_prefixes is not None
            or self.contains_contents is not None
            or self.author_ids is not None
            or self.has_created_range
        )
