"""Match fixtures: create, partial update, bulk removal."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError, ValidationError
from app.models import Match
from app.schemas.match import MatchCreateRequest, MatchUpdateRequest
from app.utils.validation import validate_match

logger = logging.getLogger(__name__)


def _ensure_valid(match: MatchCreateRequest) -> None:
    message = validate_match(match.date, match.opponent, match.goals_for, match.goals_against)
    if message:
        logger.warning("match rejected reason=%r", message)
        raise ValidationError(message)


async def list_matches(db: AsyncSession) -> list[Match]:
    result = await db.execute(select(Match).order_by(Match.date.asc(), Match.id.asc()))
    return list(result.scalars().all())


async def get_match(db: AsyncSession, match_id: int) -> Match:
    result = await db.execute(select(Match).where(Match.id == match_id))
    match = result.scalar_one_or_none()
    if match is None:
        raise NotFoundError("Match not found")
    return match


async def create_match(db: AsyncSession, payload: MatchCreateRequest) -> Match:
    _ensure_valid(payload)

    match_data = payload.model_dump()
    # Missing or null home means an away fixture
    match_data["home"] = bool(match_data["home"])
    match = Match(**match_data)
    db.add(match)
    await db.commit()
    await db.refresh(match)
    logger.info("match_create match_id=%s date=%s", match.id, match.date)
    return match


async def update_match(db: AsyncSession, match_id: int, payload: MatchUpdateRequest) -> Match:
    """
    Apply only the fields present in the payload, then re-validate the
    merged record as a whole. Nothing is written when the merge is invalid.
    """
    match = await get_match(db, match_id)

    update_data = payload.model_dump(exclude_unset=True)
    # Home/away is a flag; an explicit null keeps the stored value
    if update_data.get("home", False) is None:
        update_data.pop("home")

    merged = {
        "date": match.date,
        "opponent": match.opponent,
        "goals_for": match.goals_for,
        "goals_against": match.goals_against,
        **update_data,
    }
    message = validate_match(
        merged["date"], merged["opponent"], merged["goals_for"], merged["goals_against"]
    )
    if message:
        logger.warning("match_update rejected match_id=%s reason=%r", match_id, message)
        raise ValidationError(message)

    for field_name, value in update_data.items():
        setattr(match, field_name, value)

    await db.commit()
    await db.refresh(match)
    logger.info("match_update match_id=%s fields=%s", match_id, sorted(update_data))
    return match


async def bulk_delete_matches(db: AsyncSession, ids: list[int] | None) -> None:
    if not ids:
        raise ValidationError("ids are required")

    result = await db.execute(delete(Match).where(Match.id.in_(ids)))
    await db.commit()
    logger.info("match_bulk_delete requested=%s deleted=%s", len(ids), result.rowcount)
