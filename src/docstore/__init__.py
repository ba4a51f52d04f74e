"""docstore: embeddable in-memory document store with filtered search.

Construct a store and use it directly; there is no global default instance:
    from docstore import Author, Document, DocumentStore, SearchCriteria
    store = DocumentStore()
    saved = store.save(Document(title="Notes", author=Author(id="a1")))
    store.find_by_id(saved.id)
    store.search(SearchCriteria(title_prefixes=["No"]))
"""

from __future__ import annotations

from .core import (
    IdFactory,
    NullHook,
    StoreConfig,
    StoreHook,
    counter_id_factory,
    matches,
    uuid4_id_factory,
)
from .exceptions import DocstoreError, DocstoreLoadError, IdGenerationError, InvalidArgumentError
from .models import Author, Document, SearchCriteria
from .storage import DocumentRepository, DocumentStore

__all__ = [
    "Author",
    "DocstoreError",
    "DocstoreLoadError",
    "Document",
    "DocumentRepository",
    "DocumentStore",
    "IdFactory",
    "IdGenerationError",
    "InvalidArgumentError",
    "NullHook",
    "SearchCriteria",
    "StoreConfig",
    "StoreHook",
    "counter_id_factory",
    "matches",
    "uuid4_id_factory",
]
