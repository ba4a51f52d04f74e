"""Document repository abstraction."""

from __future__ import annotations

from typing import Protocol

from ..models import Document, SearchCriteria


class DocumentRepository(Protocol):
    """Protocol for upserting, fetching and searching documents."""

    def save(self, document: Document) -> Document: ...
    def find_by_id(self, document_id: str) -> Document | None: ...
    def search(self, criteria: SearchCriteria | None = None) -> list[Document]: ...
