from fastapi import APIRouter

from app.api.players import router as players_router
from app.api.matches import router as matches_router
from app.api.formations import router as formations_router
from app.api.lineups import router as lineups_router
from app.api.player_stats import router as player_stats_router

api_router = APIRouter()

# Squad and fixtures
api_router.include_router(players_router)
api_router.include_router(matches_router)

# Tactics
api_router.include_router(formations_router)
api_router.include_router(lineups_router)

# Aggregates
api_router.include_router(player_stats_router)
