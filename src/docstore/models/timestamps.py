"""Timestamp normalization shared by the models."""

from __future__ import annotations

from datetime import UTC, datetime


def to_utc(value: datetime | None) -> datetime | None:
    """Return ``value`` as an aware UTC datetime. Naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
