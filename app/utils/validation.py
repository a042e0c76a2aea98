"""
Field-level validation rules.

Each rule returns an empty string when the input is valid, otherwise the
first violated rule as a human-readable message. Rules are short-circuiting
and never touch the database.
"""

from collections.abc import Iterable
from datetime import date as date_type
from typing import Protocol

MIN_SHIRT_NUMBER = 1
MAX_SHIRT_NUMBER = 99


class FormationSlotLike(Protocol):
    slot_id: str | None
    position: str | None


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_formation(
    name: str | None,
    shape: str | None,
    slots: Iterable[FormationSlotLike] | None,
) -> str:
    if is_blank(name):
        return "Formation name is required"
    if is_blank(shape):
        return "Formation shape is required"
    slots = list(slots) if slots is not None else []
    if not slots:
        return "Formation must include slots"

    seen: set[str] = set()
    for slot in slots:
        if is_blank(slot.slot_id):
            return "Each slot must include slotId"
        if is_blank(slot.position):
            return "Each slot must include position"
        key = slot.slot_id.strip()
        if key in seen:
            return "slotId must be unique within a formation"
        seen.add(key)
    return ""


def validate_player(name: str | None, positions: list[str] | None, number: int | None) -> str:
    if is_blank(name):
        return "name is required"
    if not positions:
        return "positions are required"
    if number is None or not MIN_SHIRT_NUMBER <= number <= MAX_SHIRT_NUMBER:
        return f"number must be {MIN_SHIRT_NUMBER}-{MAX_SHIRT_NUMBER}"
    return ""


def validate_match(
    date: date_type | None,
    opponent: str | None,
    goals_for: int | None,
    goals_against: int | None,
) -> str:
    if date is None:
        return "Date is required"
    if is_blank(opponent):
        return "Opponent is required"
    if goals_for is not None and goals_for < 0:
        return "Goals For must be 0 or more"
    if goals_against is not None and goals_against < 0:
        return "Goals Against must be 0 or more"
    return ""
