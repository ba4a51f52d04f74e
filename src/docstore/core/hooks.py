"""Event hook protocol for observing store activity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..models import Document, SearchCriteria


@runtime_checkable
class StoreHook(Protocol):
    """Protocol for receiving store events.

    Implement any subset of these methods; missing ones are skipped.
    Hook methods must not raise; exceptions are swallowed by the dispatcher.
    """

    def on_document_saved(self, document: Document, previous: Document | None) -> None: ...
    def on_search_completed(
        self, criteria: SearchCriteria | None, results: list[Document]
    ) -> None: ...


class NullHook:
    """No-op hook. Useful as a reference implementation and in tests."""

    def on_document_saved(self, document: Document, previous: Document | None) -> None:
        pass

    def on_search_completed(self, criteria: SearchCriteria | None, results: list[Document]) -> None:
        pass
