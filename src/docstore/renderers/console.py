"""Rich-based document console rendering."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from io import StringIO
from typing import Literal

from rich.console import Console
from rich.tree import Tree

from ..models import Document

Verbosity = Literal["minimal", "standard", "full"]
_MAX_CONTENT_LEN = 80
_NO_AUTHOR = "(no author)"


def render_documents(documents: Sequence[Document], *, verbosity: Verbosity = "standard") -> str:
    """Render documents as a tree grouped by author, returned as plain text."""
    tree = Tree(f"Documents ({len(documents)})")
    by_author: dict[str, list[Document]] = defaultdict(list)
    for document in documents:
        by_author[_author_label(document)].append(document)

    for label in sorted(by_author):
        branch = tree.add(label)
        for document in sorted(by_author[label], key=_created_sort_key):
            _add_document_branch(branch, document, verbosity)

    console = Console(record=True, width=120, markup=False, file=StringIO())
    console.print(tree)
    return console.export_text()


def _add_document_branch(parent: Tree, document: Document, verbosity: Verbosity) -> None:
    title = document.title if document.title is not None else "(untitled)"
    line = f"{title} [{document.id}]"
    if verbosity == "minimal":
        parent.add(line)
        return

    created = document.created.isoformat() if document.created is not None else "unknown"
    branch = parent.add(f"{line} created {created}")
    if document.content:
        content = document.content if verbosity == "full" else _truncate(document.content)
        branch.add(f'content: "{content}"')


def _author_label(document: Document) -> str:
    author = document.author
    if author is None:
        return _NO_AUTHOR
    return f"{author.name} ({author.id})" if author.name else author.id


def _created_sort_key(document: Document) -> tuple[bool, str]:
    if document.created is None:
        return (True, "")
    return (False, document.created.isoformat())


def _truncate(value: str) -> str:
    if len(value) <= _MAX_CONTENT_LEN:
        return value
    return value[:_MAX_CONTENT_LEN] + "... [truncated]"
