"""Search criteria evaluation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime

from ..models import Document, SearchCriteria


def matches(document: Document, criteria: SearchCriteria | None) -> bool:
    """Return True when ``document`` satisfies every populated dimension of ``criteria``.

    ``None`` criteria match everything. A document field that is ``None`` never
    satisfies a populated dimension on that field.
    """
    if criteria is None:
        return True
    return (
        _matches_any(criteria.title_prefixes, document.title, str.startswith)
        and _matches_any(criteria.contains_contents, document.content, str.__contains__)
        and _matches_any(criteria.author_ids, document.author_id, str.__eq__)
        and _within_range(document.created, criteria.created_from, criteria.created_to)
    )


def filter_documents(
    documents: Sequence[Document],
    criteria: SearchCriteria | None,
) -> list[Document]:
    if criteria is None or criteria.is_unconstrained:
        return list(documents)
    return [document for document in documents if matches(document, criteria)]


def _matches_any(
    candidates: list[str] | None,
    value: str | None,
    predicate: Callable[[str, str], bool],
) -> bool:
    if not candidates:
        return True
    if value is None:
        return False
    return any(predicate(value, candidate) for candidate in candidates)


def _within_range(
    created: datetime | None,
    created_from: datetime | None,
    created_to: datetime | None,
) -> bool:
    if created_from is None and created_to is None:
        return True
    if created is None:
        return False
    if created_from is not None and created < created_from:
        return False
    return not (created_to is not None and created > created_to)
