"""Basic usage example: save, look up and search documents."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from docstore import Author, Document, DocumentStore, SearchCriteria
from docstore.renderers import render_documents
from docstore.serializers import documents_to_json


def main() -> None:
    store = DocumentStore()
    now = datetime.now(UTC)
    ada = Author(id="ada", name="Ada Lovelace")
    grace = Author(id="grace", name="Grace Hopper")

    notes = store.save(
        Document(title="Engine notes", content="On the analytical engine", author=ada, created=now - timedelta(days=2))
    )
    store.save(Document(title="Engine errata", content="Corrections to note G", author=ada, created=now))
    store.save(Document(title="Compiler report", content="A-0 system overview", author=grace, created=now))

    print(f"Saved notes under generated id {notes.id}")
    print(f"Lookup miss returns: {store.find_by_id('missing')}")

    recent_engine_docs = store.search(
        SearchCriteria(title_prefixes=["Engine"], created_from=now - timedelta(days=1))
    )
    print(render_documents(recent_engine_docs, verbosity="full"))
    print(documents_to_json(store.search(SearchCriteria(author_ids=["grace"]))))


if __name__ == "__main__":
    main()
