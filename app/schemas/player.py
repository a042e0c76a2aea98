from app.schemas.common import CamelModel


class PlayerCreateRequest(CamelModel):
    name: str | None = None
    positions: list[str] | None = None
    number: int | None = None


class PlayerResponse(CamelModel):
    id: int
    name: str
    number: int
    positions: list[str] = []
