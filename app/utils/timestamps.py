"""Timestamp helpers for model defaults."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time, timezone-aware (used for ``Lineup.updated_at``)."""
    return datetime.now(timezone.utc)
