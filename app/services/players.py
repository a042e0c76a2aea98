"""Player registration and removal."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError, ValidationError
from app.models import Player
from app.schemas.player import PlayerCreateRequest
from app.utils.validation import validate_player

logger = logging.getLogger(__name__)

DUPLICATE_NUMBER_MESSAGE = "shirt number already exists"


async def list_players(db: AsyncSession) -> list[Player]:
    result = await db.execute(select(Player).order_by(Player.number.asc(), Player.id.asc()))
    return list(result.scalars().all())


async def get_player(db: AsyncSession, player_id: int) -> Player:
    result = await db.execute(select(Player).where(Player.id == player_id))
    player = result.scalar_one_or_none()
    if player is None:
        raise NotFoundError("Player not found")
    return player


async def number_exists(db: AsyncSession, number: int) -> bool:
    result = await db.execute(select(Player.id).where(Player.number == number).limit(1))
    return result.scalar_one_or_none() is not None


async def create_player(db: AsyncSession, payload: PlayerCreateRequest) -> Player:
    message = validate_player(payload.name, payload.positions, payload.number)
    if message:
        logger.warning("player_create rejected reason=%r", message)
        raise ValidationError(message)

    if await number_exists(db, payload.number):
        logger.warning("player_create rejected reason=duplicate_number number=%s", payload.number)
        raise ValidationError(DUPLICATE_NUMBER_MESSAGE)

    player = Player(
        name=payload.name.strip(),
        positions=list(payload.positions),
        number=payload.number,
    )
    db.add(player)
    try:
        await db.commit()
    except IntegrityError as exc:
        # Lost a race against a concurrent registration with the same number
        await db.rollback()
        raise ValidationError(DUPLICATE_NUMBER_MESSAGE) from exc

    await db.refresh(player)
    logger.info("player_create player_id=%s number=%s", player.id, player.number)
    return player


async def bulk_delete_players(db: AsyncSession, ids: list[int] | None) -> None:
    """Delete players by id; ids that do not exist are ignored."""
    if not ids:
        raise ValidationError("ids are required")

    result = await db.execute(delete(Player).where(Player.id.in_(ids)))
    await db.commit()
    logger.info("player_bulk_delete requested=%s deleted=%s", len(ids), result.rowcount)
