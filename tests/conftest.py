from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from docstore.core import counter_id_factory
from docstore.models import Author, Document
from docstore.storage import DocumentStore

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC)


def make_document(
    title: str | None = "Title One",
    content: str | None = "Content One",
    author_id: str | None = "1",
    *,
    doc_id: str | None = None,
    created: datetime | None = NOW,
) -> Document:
    author = Author(id=author_id, name=f"Author {author_id}") if author_id is not None else None
    return Document(id=doc_id, title=title, content=content, author=author, created=created)


@pytest.fixture
def store() -> DocumentStore:
    return DocumentStore(id_factory=counter_id_factory())


@pytest.fixture
def populated_store(store: DocumentStore) -> DocumentStore:
    store.save(make_document("Title One", "Content One", "1", doc_id="one", created=NOW - timedelta(seconds=60)))
    store.save(make_document("Title Two", "Content Two", "2", doc_id="two", created=NOW + timedelta(seconds=60)))
    store.save(make_document("Memo", "Quarterly numbers", "3", doc_id="three", created=NOW))
    return store
