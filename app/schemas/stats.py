from app.schemas.common import CamelModel


class PlayerTotalsResponse(CamelModel):
    player_id: int
    goals: int = 0
    assists: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
