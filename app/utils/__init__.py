"""Utility functions."""

from app.utils.numbers import non_negative_count, zero_if_none
from app.utils.timestamps import utcnow
from app.utils.validation import validate_formation, validate_match, validate_player

__all__ = [
    "non_negative_count",
    "zero_if_none",
    "utcnow",
    "validate_formation",
    "validate_match",
    "validate_player",
]
