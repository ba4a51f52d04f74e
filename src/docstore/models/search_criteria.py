"""Search criteria model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from .timestamps import to_utc


class SearchCriteria(BaseModel):
    """Filter dimensions combined with AND; list dimensions match on any value.

    ``None`` or an empty list leaves a dimension unconstrained. Both date
    bounds are inclusive.
    """

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    title_prefixes: list[str] | None = None
    contains_contents: list[str] | None = None
    author_ids: list[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    @field_validator("created_from", "created_to")
    @classmethod
    def normalize_bounds(cls, value: datetime | None) -> datetime | None:
        return to_utc(value)

    @property
    def is_unconstrained(self) -> bool:
        return not (
            self.title_prefixes
            or self.contains_contents
            or self.author_ids
            or self.created_from is not None
            or self.created_to is not None
        )
