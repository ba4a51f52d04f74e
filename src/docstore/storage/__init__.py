"""Storage backends."""

from .base import DocumentRepository
from .memory import DocumentStore

__all__ = ["DocumentRepository", "DocumentStore"]
