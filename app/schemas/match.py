from datetime import date as date_type

from app.schemas.common import CamelModel


class MatchCreateRequest(CamelModel):
    date: date_type | None = None
    opponent: str | None = None
    home: bool | None = None
    goals_for: int | None = None
    goals_against: int | None = None


class MatchUpdateRequest(CamelModel):
    """Partial update: only fields present in the body are applied."""

    date: date_type | None = None
    opponent: str | None = None
    home: bool | None = None
    goals_for: int | None = None
    goals_against: int | None = None


class MatchResponse(CamelModel):
    id: int
    date: date_type
    opponent: str
    home: bool
    goals_for: int | None = None
    goals_against: int | None = None
