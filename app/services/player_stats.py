"""Career totals aggregated from per-match lineup stats."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import LineupPlayerStat
from app.schemas.stats import PlayerTotalsResponse


async def totals_for_player(db: AsyncSession, player_id: int) -> PlayerTotalsResponse:
    """Sum every stored stat row of the player; no rows means all zeros."""
    result = await db.execute(
        select(
            func.coalesce(func.sum(LineupPlayerStat.goals), 0),
            func.coalesce(func.sum(LineupPlayerStat.assists), 0),
            func.coalesce(func.sum(LineupPlayerStat.yellow_cards), 0),
            func.coalesce(func.sum(LineupPlayerStat.red_cards), 0),
        ).where(LineupPlayerStat.player_id == player_id)
    )
    goals, assists, yellow_cards, red_cards = result.one()
    return PlayerTotalsResponse(
        player_id=player_id,
        goals=int(goals),
        assists=int(assists),
        yellow_cards=int(yellow_cards),
        red_cards=int(red_cards),
    )
