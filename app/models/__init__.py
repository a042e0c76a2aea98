from app.models.player import Player
from app.models.match import Match
from app.models.formation import Formation, FormationSlot
from app.models.lineup import Lineup, LineupSlot, LineupPlayerStat

__all__ = [
    "Player",
    "Match",
    "Formation",
    "FormationSlot",
    "Lineup",
    "LineupSlot",
    "LineupPlayerStat",
]
