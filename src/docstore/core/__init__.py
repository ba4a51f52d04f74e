"""Core store runtime: matching, id generation, hooks and configuration."""

from .hooks import NullHook, StoreHook
from .ids import IdFactory, counter_id_factory, uuid4_id_factory
from .matching import filter_documents, matches
from .store_config import StoreConfig

__all__ = [
    "IdFactory",
    "NullHook",
    "StoreConfig",
    "StoreHook",
    "counter_id_factory",
    "filter_documents",
    "matches",
    "uuid4_id_factory",
]
