"""Serialization helpers."""

from .json import criteria_from_json, criteria_to_json, documents_from_json, documents_to_json

__all__ = ["criteria_from_json", "criteria_to_json", "documents_from_json", "documents_to_json"]
