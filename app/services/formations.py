"""Formation templates and their slot definitions."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.exceptions import NotFoundError, ValidationError
from app.models import Formation, FormationSlot
from app.schemas.formation import (
    FormationCreateRequest,
    FormationSlotInput,
    FormationUpdateRequest,
)
from app.utils.validation import validate_formation

logger = logging.getLogger(__name__)


def _preset(shape: str, positions: list[tuple[str, str]]) -> dict:
    return {
        "name": shape,
        "shape": shape,
        "slots": [{"slot_id": slot_id, "position": pos} for pos, slot_id in positions],
    }


_BACK_FOUR = [("GK", "GK-1"), ("LB", "DEF-1"), ("CB", "DEF-2"), ("CB", "DEF-3"), ("RB", "DEF-4")]

FORMATION_PRESETS = [
    _preset("4-4-2", _BACK_FOUR + [
        ("LM", "MID-1"), ("CM", "MID-2"), ("CM", "MID-3"), ("RM", "MID-4"),
        ("ST", "ATT-1"), ("ST", "ATT-2"),
    ]),
    _preset("4-3-3", _BACK_FOUR + [
        ("CM", "MID-1"), ("CM", "MID-2"), ("CM", "MID-3"),
        ("LW", "ATT-1"), ("ST", "ATT-2"), ("RW", "ATT-3"),
    ]),
    _preset("4-2-3-1", _BACK_FOUR + [
        ("LM", "MID-1"), ("CDM", "MID-2"), ("CAM", "MID-3"), ("CDM", "MID-4"), ("RM", "MID-5"),
        ("ST", "ATT-1"),
    ]),
]


def _build_slots(slots: list[FormationSlotInput]) -> list[FormationSlot]:
    return [
        FormationSlot(
            sort_order=index,
            slot_id=slot.slot_id.strip(),
            position=slot.position.strip(),
            player_id=slot.player_id,
        )
        for index, slot in enumerate(slots)
    ]


def _ensure_valid(name: str | None, shape: str | None, slots) -> None:
    message = validate_formation(name, shape, slots)
    if message:
        logger.warning("formation rejected reason=%r", message)
        raise ValidationError(message)


async def list_formations(db: AsyncSession) -> list[Formation]:
    result = await db.execute(
        select(Formation).options(selectinload(Formation.slots)).order_by(Formation.id.asc())
    )
    return list(result.scalars().all())


async def get_formation(db: AsyncSession, formation_id: int) -> Formation:
    result = await db.execute(
        select(Formation)
        .where(Formation.id == formation_id)
        .options(selectinload(Formation.slots))
        .execution_options(populate_existing=True)
    )
    formation = result.scalar_one_or_none()
    if formation is None:
        raise NotFoundError("Formation not found")
    return formation


async def create_formation(db: AsyncSession, payload: FormationCreateRequest) -> Formation:
    _ensure_valid(payload.name, payload.shape, payload.slots)

    formation = Formation(
        name=payload.name.strip(),
        shape=payload.shape.strip(),
        slots=_build_slots(payload.slots),
    )
    db.add(formation)
    await db.commit()
    logger.info("formation_create formation_id=%s slots=%s", formation.id, len(formation.slots))
    return await get_formation(db, formation.id)


async def update_formation(
    db: AsyncSession, formation_id: int, payload: FormationUpdateRequest
) -> Formation:
    """Patch name/shape/slots; supplied slots replace the stored list wholesale."""
    formation = await get_formation(db, formation_id)

    name = payload.name if payload.name is not None else formation.name
    shape = payload.shape if payload.shape is not None else formation.shape
    slots = payload.slots if payload.slots is not None else formation.slots
    _ensure_valid(name, shape, slots)

    formation.name = name.strip()
    formation.shape = shape.strip()
    if payload.slots is not None:
        formation.slots.clear()
        # Old rows must be gone before re-inserting the same slot ids
        await db.flush()
        formation.slots.extend(_build_slots(payload.slots))

    await db.commit()
    logger.info("formation_update formation_id=%s", formation_id)
    return await get_formation(db, formation_id)


async def bulk_delete_formations(db: AsyncSession, ids: list[int] | None) -> None:
    if not ids:
        raise ValidationError("ids are required")

    result = await db.execute(
        select(Formation).where(Formation.id.in_(ids)).options(selectinload(Formation.slots))
    )
    formations = result.scalars().all()
    for formation in formations:
        await db.delete(formation)
    await db.commit()
    logger.info("formation_bulk_delete requested=%s deleted=%s", len(ids), len(formations))
