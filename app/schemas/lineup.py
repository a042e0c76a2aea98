"""Schemas for the /lineups endpoints."""

from pydantic import AliasChoices, Field

from app.schemas.common import CamelModel


class LineupSlotInput(CamelModel):
    slot_id: str | None = None
    pos: str | None = None
    player_id: int | None = None
    captain: bool = Field(
        default=False,
        validation_alias=AliasChoices("captain", "isCaptain", "is_captain"),
    )
    rating: float | None = None

    # Legacy per-slot event counters
    goals: int | None = None
    assists: int | None = None
    yellow_cards: int | None = None
    red_cards: int | None = None


class PlayerStatInput(CamelModel):
    player_id: int | None = None
    goals: int | None = None
    assists: int | None = None
    yellow_cards: int | None = None
    red_cards: int | None = None


class LineupUpsertRequest(CamelModel):
    formation_id: int | None = None
    captain_player_id: int | None = None
    slots: list[LineupSlotInput] | None = None
    player_stats: list[PlayerStatInput] | None = None


class LineupSlotResponse(CamelModel):
    id: int
    slot_id: str
    pos: str
    player_id: int | None = None
    captain: bool = Field(
        default=False,
        validation_alias=AliasChoices("captain", "is_captain"),
    )
    rating: float | None = None
    goals: int | None = None
    assists: int | None = None
    yellow_cards: int | None = None
    red_cards: int | None = None


class LineupPlayerStatResponse(CamelModel):
    id: int
    player_id: int
    goals: int = 0
    assists: int = 0
    yellow_cards: int = 0
    red_cards: int = 0


class LineupResponse(CamelModel):
    id: int
    match_id: int
    formation_id: int
    captain_player_id: int | None = None
    slots: list[LineupSlotResponse] = []
    player_stats: list[LineupPlayerStatResponse] = []


class LineupSummary(CamelModel):
    match_id: int
    formation_id: int
