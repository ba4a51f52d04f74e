"""Document store data models."""

from .author import Author
from .document import Document
from .search_criteria import SearchCriteria

__all__ = ["Author", "Document", "SearchCriteria"]
