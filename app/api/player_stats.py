from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.stats import PlayerTotalsResponse
from app.services.player_stats import totals_for_player

router = APIRouter(prefix="/player-stats", tags=["player-stats"])


@router.get("/{player_id}/totals", response_model=PlayerTotalsResponse)
async def get_player_totals(player_id: int, db: AsyncSession = Depends(get_db)):
    """Career goals/assists/cards; players without stats get zeros."""
    return await totals_for_player(db, player_id)
