"""JSON text encoding for documents and search criteria."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import TypeAdapter, ValidationError

from ..exceptions import DocstoreLoadError
from ..models import Document, SearchCriteria

_DOCUMENT_LIST = TypeAdapter(list[Document])


def documents_to_json(documents: Sequence[Document], *, indent: int | None = 2) -> str:
    return _DOCUMENT_LIST.dump_json(list(documents), indent=indent).decode("utf-8")


def documents_from_json(payload: str | bytes) -> list[Document]:
    """Parse a JSON array of documents.

    Raises ``DocstoreLoadError`` on invalid or unparseable input.
    Unknown fields are ignored.
    """
    try:
        return _DOCUMENT_LIST.validate_json(payload)
    except ValidationError as exc:
        raise DocstoreLoadError(f"Failed to parse documents JSON: {exc}") from exc


def criteria_to_json(criteria: SearchCriteria, *, indent: int | None = None) -> str:
    return criteria.model_dump_json(indent=indent, exclude_none=True)


def criteria_from_json(payload: str | bytes) -> SearchCriteria:
    """Parse a JSON object into ``SearchCriteria``. Raises ``DocstoreLoadError`` on failure."""
    try:
        return SearchCriteria.model_validate_json(payload)
    except ValidationError as exc:
        raise DocstoreLoadError(f"Failed to parse criteria JSON: {exc}") from exc
