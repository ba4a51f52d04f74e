"""Public exception types for docstore."""

from __future__ import annotations


class DocstoreError(Exception):
    """Base class for all docstore exceptions."""


class InvalidArgumentError(DocstoreError, ValueError):
    """Raised when a store operation receives an unusable argument."""


class IdGenerationError(DocstoreError):
    """Raised when the id factory keeps producing identifiers already in use."""


class DocstoreLoadError(DocstoreError):
    """Raised when document or criteria JSON cannot be parsed."""
