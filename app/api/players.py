from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.common import IdsRequest
from app.schemas.player import PlayerCreateRequest, PlayerResponse
from app.services import players as player_service

router = APIRouter(prefix="/players", tags=["players"])


@router.get("", response_model=list[PlayerResponse])
async def list_players(db: AsyncSession = Depends(get_db)):
    """All players, ordered by shirt number."""
    return await player_service.list_players(db)


@router.get("/{player_id}", response_model=PlayerResponse)
async def get_player(player_id: int, db: AsyncSession = Depends(get_db)):
    return await player_service.get_player(db, player_id)


@router.post("", response_model=PlayerResponse, status_code=status.HTTP_201_CREATED)
async def create_player(payload: PlayerCreateRequest, db: AsyncSession = Depends(get_db)):
    return await player_service.create_player(db, payload)


@router.post("/bulk-delete", status_code=status.HTTP_204_NO_CONTENT)
async def bulk_delete_players(body: IdsRequest, db: AsyncSession = Depends(get_db)):
    await player_service.bulk_delete_players(db, body.ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
