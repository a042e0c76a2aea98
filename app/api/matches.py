from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.common import IdsRequest
from app.schemas.match import MatchCreateRequest, MatchResponse, MatchUpdateRequest
from app.services import matches as match_service

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get("", response_model=list[MatchResponse])
async def list_matches(db: AsyncSession = Depends(get_db)):
    return await match_service.list_matches(db)


@router.get("/{match_id}", response_model=MatchResponse)
async def get_match(match_id: int, db: AsyncSession = Depends(get_db)):
    return await match_service.get_match(db, match_id)


@router.post("", response_model=MatchResponse, status_code=status.HTTP_201_CREATED)
async def create_match(payload: MatchCreateRequest, db: AsyncSession = Depends(get_db)):
    return await match_service.create_match(db, payload)


@router.api_route("/{match_id}", methods=["PUT", "PATCH"], response_model=MatchResponse)
async def update_match(
    match_id: int,
    payload: MatchUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Partial update. Omitted fields keep their stored value; the merged
    match is validated as a whole before anything is written.
    """
    return await match_service.update_match(db, match_id, payload)


@router.post("/bulk-delete", status_code=status.HTTP_204_NO_CONTENT)
async def bulk_delete_matches(body: IdsRequest, db: AsyncSession = Depends(get_db)):
    await match_service.bulk_delete_matches(db, body.ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
