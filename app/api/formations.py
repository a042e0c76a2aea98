from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.common import IdsRequest
from app.schemas.formation import (
    FormationCreateRequest,
    FormationPresetResponse,
    FormationResponse,
    FormationUpdateRequest,
)
from app.services import formations as formation_service

router = APIRouter(prefix="/formations", tags=["formations"])


@router.get("", response_model=list[FormationResponse])
async def list_formations(db: AsyncSession = Depends(get_db)):
    return await formation_service.list_formations(db)


@router.get("/presets", response_model=list[FormationPresetResponse])
async def list_formation_presets():
    """Built-in shapes a client can post back as new formations."""
    return formation_service.FORMATION_PRESETS


@router.get("/{formation_id}", response_model=FormationResponse)
async def get_formation(formation_id: int, db: AsyncSession = Depends(get_db)):
    return await formation_service.get_formation(db, formation_id)


@router.post("", response_model=FormationResponse, status_code=status.HTTP_201_CREATED)
async def create_formation(payload: FormationCreateRequest, db: AsyncSession = Depends(get_db)):
    return await formation_service.create_formation(db, payload)


@router.put("/{formation_id}", response_model=FormationResponse)
async def update_formation(
    formation_id: int,
    payload: FormationUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    return await formation_service.update_formation(db, formation_id, payload)


@router.post("/bulk-delete", status_code=status.HTTP_204_NO_CONTENT)
async def bulk_delete_formations(body: IdsRequest, db: AsyncSession = Depends(get_db)):
    await formation_service.bulk_delete_formations(db, body.ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
