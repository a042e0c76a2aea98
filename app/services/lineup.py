"""
Lineup upsert and per-player stat reconciliation.

A lineup is saved as one aggregate: the incoming payload replaces the slot
list and the stat list of the match's lineup in full. Player stats come from
exactly one of two sources, chosen once per save:

- explicit: a non-empty ``playerStats`` list is stored as given;
- derived: otherwise the legacy per-slot counters are summed per player.
"""

import enum
import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.exceptions import NotFoundError, ValidationError
from app.models import Lineup, LineupPlayerStat, LineupSlot
from app.schemas.lineup import LineupSlotInput, LineupUpsertRequest, PlayerStatInput
from app.utils.numbers import non_negative_count, zero_if_none
from app.utils.validation import is_blank

logger = logging.getLogger(__name__)


class StatSource(str, enum.Enum):
    """Where the stored player stats of a save came from."""
    explicit = "explicit"
    derived = "derived"


@dataclass
class StatRow:
    player_id: int
    goals: int = 0
    assists: int = 0
    yellow_cards: int = 0
    red_cards: int = 0


@dataclass
class LineupSaveResult:
    lineup: Lineup
    stat_source: StatSource
    created: bool


def check_upsert_payload(payload: LineupUpsertRequest) -> None:
    """Reject the payload before anything is written. First violation wins."""
    if payload.formation_id is None:
        raise ValidationError("formationId is required")
    # An empty list is a legal "nobody picked yet" lineup, only null is rejected
    if payload.slots is None:
        raise ValidationError("slots are required")

    for slot in payload.slots:
        if is_blank(slot.slot_id):
            raise ValidationError("slotId is required")
        if is_blank(slot.pos):
            raise ValidationError("pos is required")

    if payload.player_stats:
        seen: set[int] = set()
        for stat in payload.player_stats:
            if stat.player_id is None:
                raise ValidationError("playerStats.playerId is required")
            if stat.player_id in seen:
                raise ValidationError("playerStats.playerId must be unique")
            seen.add(stat.player_id)


def derive_stats_from_slots(slots: list[LineupSlotInput]) -> list[StatRow]:
    """Sum slot counters per player, in order of first appearance."""
    by_player: dict[int, StatRow] = {}
    for slot in slots:
        if slot.player_id is None:
            continue
        row = by_player.setdefault(slot.player_id, StatRow(player_id=slot.player_id))
        row.goals += non_negative_count(slot.goals)
        row.assists += non_negative_count(slot.assists)
        row.yellow_cards += non_negative_count(slot.yellow_cards)
        row.red_cards += non_negative_count(slot.red_cards)
    return list(by_player.values())


def explicit_stats(player_stats: list[PlayerStatInput]) -> list[StatRow]:
    return [
        StatRow(
            player_id=stat.player_id,
            goals=zero_if_none(stat.goals),
            assists=zero_if_none(stat.assists),
            yellow_cards=zero_if_none(stat.yellow_cards),
            red_cards=zero_if_none(stat.red_cards),
        )
        for stat in player_stats
    ]


def reconcile_player_stats(
    slots: list[LineupSlotInput],
    player_stats: list[PlayerStatInput] | None,
) -> tuple[StatSource, list[StatRow]]:
    if player_stats:
        return StatSource.explicit, explicit_stats(player_stats)
    return StatSource.derived, derive_stats_from_slots(slots)


def _build_slot(slot: LineupSlotInput) -> LineupSlot:
    return LineupSlot(
        slot_id=slot.slot_id,
        pos=slot.pos,
        player_id=slot.player_id,
        is_captain=slot.captain,
        rating=slot.rating,
        goals=slot.goals,
        assists=slot.assists,
        yellow_cards=slot.yellow_cards,
        red_cards=slot.red_cards,
    )


def _build_stat(row: StatRow) -> LineupPlayerStat:
    return LineupPlayerStat(
        player_id=row.player_id,
        goals=row.goals,
        assists=row.assists,
        yellow_cards=row.yellow_cards,
        red_cards=row.red_cards,
    )


async def find_lineup_by_match_id(db: AsyncSession, match_id: int) -> Lineup | None:
    result = await db.execute(
        select(Lineup)
        .where(Lineup.match_id == match_id)
        .options(selectinload(Lineup.slots), selectinload(Lineup.player_stats))
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_lineup_for_match(db: AsyncSession, match_id: int) -> Lineup:
    lineup = await find_lineup_by_match_id(db, match_id)
    if lineup is None:
        raise NotFoundError(f"No lineup for match {match_id}")
    return lineup


async def _apply_payload(
    db: AsyncSession,
    match_id: int,
    payload: LineupUpsertRequest,
    stat_rows: list[StatRow],
) -> bool:
    lineup = await find_lineup_by_match_id(db, match_id)
    created = lineup is None
    if lineup is None:
        lineup = Lineup(match_id=match_id, slots=[], player_stats=[])
        db.add(lineup)

    lineup.match_id = match_id
    lineup.formation_id = payload.formation_id
    # Null clears a previously set captain
    lineup.captain_player_id = payload.captain_player_id

    lineup.slots.clear()
    lineup.player_stats.clear()
    # Orphans are deleted before new children go in, so (lineup_id, player_id)
    # stays unique while the same players are re-inserted.
    await db.flush()

    lineup.slots.extend(_build_slot(slot) for slot in payload.slots)
    lineup.player_stats.extend(_build_stat(row) for row in stat_rows)
    await db.flush()
    return created


async def upsert_lineup_for_match(
    db: AsyncSession,
    match_id: int,
    payload: LineupUpsertRequest,
) -> LineupSaveResult:
    """
    Create or fully replace the lineup of ``match_id``.

    Validation runs before the session is touched, so a rejected payload
    leaves any stored lineup exactly as it was. Slots and stats are
    rebuilt, never merged; child ids are not preserved across saves.
    """
    try:
        check_upsert_payload(payload)
    except ValidationError as exc:
        logger.warning("lineup_upsert rejected match_id=%s reason=%r", match_id, exc.detail)
        raise

    stat_source, stat_rows = reconcile_player_stats(payload.slots, payload.player_stats)

    try:
        created = await _apply_payload(db, match_id, payload, stat_rows)
        await db.commit()
    except IntegrityError:
        # Another writer created the lineup for this match first; overwrite it
        await db.rollback()
        logger.info("lineup_upsert retry match_id=%s reason=concurrent_create", match_id)
        created = await _apply_payload(db, match_id, payload, stat_rows)
        await db.commit()

    saved = await get_lineup_for_match(db, match_id)
    logger.info(
        "lineup_upsert match_id=%s lineup_id=%s formation_id=%s slots=%s stats=%s stat_source=%s created=%s",
        match_id, saved.id, saved.formation_id, len(saved.slots), len(saved.player_stats),
        stat_source.value, created,
    )
    return LineupSaveResult(lineup=saved, stat_source=stat_source, created=created)


async def get_lineup_summaries(db: AsyncSession, match_ids: list[int] | None) -> list[Lineup]:
    """Lineups for the given matches; matches without one are omitted."""
    if match_ids is None:
        raise ValidationError("ids are required")
    if not match_ids:
        return []

    result = await db.execute(
        select(Lineup).where(Lineup.match_id.in_(match_ids)).order_by(Lineup.match_id.asc())
    )
    return list(result.scalars().all())
