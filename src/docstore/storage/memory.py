"""In-memory document store."""

from __future__ import annotations

import threading
import warnings

from ..core.hooks import StoreHook
from ..core.ids import IdFactory, uuid4_id_factory
from ..core.matching import filter_documents
from ..core.store_config import StoreConfig
from ..exceptions import IdGenerationError, InvalidArgumentError
from ..models import Document, SearchCriteria


class DocumentStore:
    """Thread-safe in-memory document store. Construct one per owner; nothing is shared.

    Entries are private copies. ``find_by_id`` and ``search`` return copies
    too, so no caller can change a stored document, or its id, in place.

    Error-handling contract
    ----------------------
    - ``save(None)`` or a non-``Document`` argument raises
      ``InvalidArgumentError`` immediately.
    - Lookup misses and empty searches are ordinary results (``None`` / ``[]``).
    - Hook failures are swallowed with ``warnings.warn`` so that observers can
      never break a store operation.
    """

    def __init__(
        self,
        config: StoreConfig | None = None,
        id_factory: IdFactory | None = None,
        hooks: list[StoreHook] | None = None,
    ) -> None:
        self.config = config or StoreConfig()
        self.id_factory: IdFactory = id_factory or uuid4_id_factory
        self.hooks: list[StoreHook] = hooks or []
        self._documents: dict[str, Document] = {}
        self._lock = threading.Lock()

    def save(self, document: Document) -> Document:
        """Upsert ``document``, assigning a fresh id when it has none.

        The store keeps its own deep copy, which fully replaces any previous
        document with the same id. Returns the caller's document with ``id``
        populated; later changes to it do not reach the store.
        """
        if document is None:
            raise InvalidArgumentError("Document cannot be null")
        if not isinstance(document, Document):
            raise InvalidArgumentError(f"Expected a Document, got {type(document).__name__}")

        with self._lock:
            if not document.has_id:
                document.id = self._next_free_id()
            stored = document.model_copy(deep=True)
            previous = self._documents.get(stored.id)
            self._documents[stored.id] = stored

        if previous is not None:
            previous = self._export(previous)
        self._dispatch("on_document_saved", document, previous)
        return document

    def find_by_id(self, document_id: str) -> Document | None:
        with self._lock:
            document = self._documents.get(document_id) if isinstance(document_id, str) else None
        if document is None:
            return None
        return self._export(document)

    def search(self, criteria: SearchCriteria | None = None) -> list[Document]:
        """Return every document matching ``criteria``; ``None`` returns all documents.

        Results come from a snapshot taken under the lock, in store insertion
        order. Callers must not rely on that order.
        """
        with self._lock:
            snapshot = list(self._documents.values())
        results = [self._export(document) for document in filter_documents(snapshot, criteria)]
        self._dispatch("on_search_completed", criteria, list(results))
        return results

    def list_ids(self) -> list[str]:
        with self._lock:
            return list(self._documents.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        if not isinstance(document_id, str):
            return False
        with self._lock:
            return document_id in self._documents

    def _next_free_id(self) -> str:
        # Caller holds the lock.
        for _ in range(self.config.max_id_attempts):
            candidate = self.id_factory()
            if candidate and candidate not in self._documents:
                return candidate
        raise IdGenerationError(
            f"Could not generate an unused document id in {self.config.max_id_attempts} attempts"
        )

    def _export(self, document: Document) -> Document:
        return document.model_copy(deep=True)

    def _dispatch(self, method: str, *args: object) -> None:
        for hook in self.hooks:
            callback = getattr(hook, method, None)
            if callback is None:
                continue
            try:
                callback(*args)
            except Exception:
                warnings.warn(f"docstore: hook error in {method}", stacklevel=3)
