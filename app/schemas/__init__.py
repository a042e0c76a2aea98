from app.schemas.common import CamelModel, IdsRequest
from app.schemas.player import PlayerCreateRequest, PlayerResponse
from app.schemas.match import MatchCreateRequest, MatchUpdateRequest, MatchResponse
from app.schemas.formation import (
    FormationCreateRequest,
    FormationUpdateRequest,
    FormationSlotInput,
    FormationSlotResponse,
    FormationResponse,
    FormationPresetResponse,
)
from app.schemas.lineup import (
    LineupSlotInput,
    PlayerStatInput,
    LineupUpsertRequest,
    LineupSlotResponse,
    LineupPlayerStatResponse,
    LineupResponse,
    LineupSummary,
)
from app.schemas.stats import PlayerTotalsResponse

__all__ = [
    "CamelModel",
    "IdsRequest",
    "PlayerCreateRequest",
    "PlayerResponse",
    "MatchCreateRequest",
    "MatchUpdateRequest",
    "MatchResponse",
    "FormationCreateRequest",
    "FormationUpdateRequest",
    "FormationSlotInput",
    "FormationSlotResponse",
    "FormationResponse",
    "FormationPresetResponse",
    "LineupSlotInput",
    "PlayerStatInput",
    "LineupUpsertRequest",
    "LineupSlotResponse",
    "LineupPlayerStatResponse",
    "LineupResponse",
    "LineupSummary",
    "PlayerTotalsResponse",
]
