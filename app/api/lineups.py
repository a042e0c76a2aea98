"""Match lineup endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.common import IdsRequest
from app.schemas.lineup import LineupResponse, LineupSummary, LineupUpsertRequest
from app.services import lineup as lineup_service

router = APIRouter(prefix="/lineups", tags=["lineups"])


@router.get("/match/{match_id}", response_model=LineupResponse)
async def get_lineup_for_match(match_id: int, db: AsyncSession = Depends(get_db)):
    """404 when the match has no lineup yet."""
    return await lineup_service.get_lineup_for_match(db, match_id)


@router.put("/match/{match_id}", response_model=LineupResponse)
async def upsert_lineup_for_match(
    match_id: int,
    payload: LineupUpsertRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Create or replace the lineup of a match.

    Slots and player stats in the body replace the stored ones in full.
    When ``playerStats`` is empty or missing, stats are derived from the
    per-slot goal/assist/card counters.
    """
    result = await lineup_service.upsert_lineup_for_match(db, match_id, payload)
    return result.lineup


@router.post("/summaries", response_model=list[LineupSummary])
async def get_lineup_summaries(body: IdsRequest, db: AsyncSession = Depends(get_db)):
    return await lineup_service.get_lineup_summaries(db, body.ids)
