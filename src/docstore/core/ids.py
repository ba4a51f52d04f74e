"""Identifier factories for documents saved without an id."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable
from uuid import uuid4

IdFactory = Callable[[], str]


def uuid4_id_factory() -> str:
    """Random 128-bit identifier in canonical UUID form."""
    return str(uuid4())


def counter_id_factory(prefix: str = "doc-", start: int = 1) -> IdFactory:
    """Return a thread-safe factory yielding ``prefix1``, ``prefix2``, ...

    Deterministic, which makes it the factory of choice in tests.
    """
    counter = itertools.count(start)
    lock = threading.Lock()

    def next_id() -> str:
        with lock:
            value = next(counter)
        return f"{prefix}{value}"

    return next_id
