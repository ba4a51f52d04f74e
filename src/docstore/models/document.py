"""Document model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from .author import Author
from .timestamps import to_utc


class Document(BaseModel):
    """A stored record.

    ``id`` may be left empty on input; ``DocumentStore.save`` assigns one.
    Every other field is optional so partially filled documents can be stored,
    but a missing field never matches a search constraint on that field.
    """

    model_config = ConfigDict(strict=True, extra="ignore", validate_assignment=True)

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    @field_validator("created")
    @classmethod
    def normalize_created(cls, value: datetime | None) -> datetime | None:
        return to_utc(value)

    @property
    def has_id(self) -> bool:
        return bool(self.id)

    @property
    def author_id(self) -> str | None:
        return self.author.id if self.author is not None else None
