"""Author value model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Author(BaseModel):
    """Immutable author reference embedded in a document."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    id: str
    name: str = ""
