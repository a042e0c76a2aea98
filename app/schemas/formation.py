from app.schemas.common import CamelModel


class FormationSlotInput(CamelModel):
    slot_id: str | None = None
    position: str | None = None
    player_id: int | None = None


class FormationCreateRequest(CamelModel):
    name: str | None = None
    shape: str | None = None
    slots: list[FormationSlotInput] | None = None


class FormationUpdateRequest(FormationCreateRequest):
    pass


class FormationSlotResponse(CamelModel):
    slot_id: str
    position: str
    player_id: int | None = None


class FormationResponse(CamelModel):
    id: int
    name: str
    shape: str
    slots: list[FormationSlotResponse] = []


class FormationPresetResponse(CamelModel):
    name: str
    shape: str
    slots: list[FormationSlotResponse]
