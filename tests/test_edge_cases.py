"""Edge-case tests for hooks, concurrency and identifier generation."""

from __future__ import annotations

import asyncio
import threading
import warnings
from concurrent.futures import ThreadPoolExecutor

import pytest
from conftest import make_document

from docstore.core import NullHook, StoreHook, counter_id_factory
from docstore.models import Document, SearchCriteria
from docstore.storage import DocumentStore

# ---------------------------------------------------------------------------
# 1. Hook dispatch
# ---------------------------------------------------------------------------


class _RecordingHook:
    def __init__(self) -> None:
        self.events: list[tuple[str, object, object]] = []

    def on_document_saved(self, document: Document, previous: Document | None) -> None:
        self.events.append(("saved", document.id, previous.title if previous else None))

    def on_search_completed(self, criteria: SearchCriteria | None, results: list[Document]) -> None:
        self.events.append(("searched", criteria, len(results)))


def test_hooks_receive_saves_and_searches() -> None:
    hook = _RecordingHook()
    store = DocumentStore(hooks=[hook])
    criteria = SearchCriteria(title_prefixes=["Second"])

    store.save(make_document("First", doc_id="a"))
    store.save(make_document("Second", doc_id="a"))
    store.search(criteria)

    assert hook.events == [
        ("saved", "a", None),
        ("saved", "a", "First"),
        ("searched", criteria, 1),
    ]


def test_partial_hook_only_receives_implemented_events() -> None:
    seen: list[str] = []

    class _SaveOnly:
        def on_document_saved(self, document: Document, previous: Document | None) -> None:
            seen.append(document.id)

    store = DocumentStore(hooks=[_SaveOnly()])
    store.save(make_document(doc_id="x"))
    store.search()

    assert seen == ["x"]


def test_null_hook_is_a_store_hook() -> None:
    assert isinstance(NullHook(), StoreHook)
    store = DocumentStore(hooks=[NullHook()])
    assert store.save(make_document()).id


class _BrokenHook:
    def on_document_saved(self, document: Document, previous: Document | None) -> None:
        raise RuntimeError("hook crashed!")

    def on_search_completed(self, criteria: SearchCriteria | None, results: list[Document]) -> None:
        raise RuntimeError("hook crashed!")


def test_broken_hook_does_not_break_store() -> None:
    recorder = _RecordingHook()
    store = DocumentStore(hooks=[_BrokenHook(), recorder])

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        saved = store.save(make_document(doc_id="safe"))
        results = store.search()

    assert store.find_by_id("safe") == saved
    assert results == [saved]
    assert [event[0] for event in recorder.events] == ["saved", "searched"]
    messages = [str(w.message) for w in caught]
    assert "docstore: hook error in on_document_saved" in messages
    assert "docstore: hook error in on_search_completed" in messages


# ---------------------------------------------------------------------------
# 2. Concurrency
# ---------------------------------------------------------------------------


def test_concurrent_saves_lose_no_entries() -> None:
    store = DocumentStore()

    def save_batch(worker: int) -> list[str]:
        return [store.save(make_document(f"w{worker}-{i}")).id for i in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        batches = list(pool.map(save_batch, range(8)))

    all_ids = [doc_id for batch in batches for doc_id in batch]
    assert len(set(all_ids)) == 1600
    assert len(store) == 1600
    assert len(store.search()) == 1600


def test_concurrent_saves_on_same_id_keep_one_entry() -> None:
    store = DocumentStore()
    barrier = threading.Barrier(4)

    def overwrite(worker: int) -> None:
        barrier.wait()
        for i in range(100):
            store.save(make_document(f"w{worker}-{i}", doc_id="shared"))

    threads = [threading.Thread(target=overwrite, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert store.list_ids() == ["shared"]
    assert store.find_by_id("shared").title.endswith("-99")


def test_search_during_writes_returns_consistent_snapshots() -> None:
    store = DocumentStore(id_factory=counter_id_factory())
    stop = threading.Event()

    def writer() -> None:
        try:
            for _ in range(2000):
                store.save(make_document())
        finally:
            stop.set()

    def reader() -> tuple[list[int], list[int]]:
        sizes: list[int] = []
        duplicated: list[int] = []
        while not stop.is_set():
            results = store.search(SearchCriteria(title_prefixes=["Title"]))
            if len({document.id for document in results}) != len(results):
                duplicated.append(len(results))
            sizes.append(len(results))
        return sizes, duplicated

    with ThreadPoolExecutor(max_workers=2) as pool:
        reading = pool.submit(reader)
        writing = pool.submit(writer)
        writing.result()
        sizes, duplicated = reading.result()

    assert duplicated == []
    assert sizes == sorted(sizes)
    assert all(size <= 2000 for size in sizes)
    assert len(store.search()) == 2000


def test_hook_cannot_alter_returned_results() -> None:
    class _ClearingHook:
        def on_search_completed(self, criteria: SearchCriteria | None, results: list[Document]) -> None:
            results.clear()

    store = DocumentStore(hooks=[_ClearingHook()])
    store.save(make_document(doc_id="kept"))

    assert [document.id for document in store.search()] == ["kept"]


@pytest.mark.asyncio
async def test_saves_from_worker_threads_under_asyncio() -> None:
    store = DocumentStore(id_factory=counter_id_factory(prefix="async-"))

    saved = await asyncio.gather(
        *(asyncio.to_thread(store.save, make_document(f"task {n}")) for n in range(50))
    )

    assert len({document.id for document in saved}) == 50
    assert all(document.id.startswith("async-") for document in saved)
    assert len(store) == 50


# ---------------------------------------------------------------------------
# 3. Identifier factories
# ---------------------------------------------------------------------------


def test_counter_id_factory_is_deterministic() -> None:
    factory = counter_id_factory(prefix="n", start=10)
    assert [factory(), factory(), factory()] == ["n10", "n11", "n12"]


def test_empty_generated_id_is_retried() -> None:
    values = iter(["", "", "real"])
    store = DocumentStore(id_factory=lambda: next(values))

    assert store.save(make_document()).id == "real"
