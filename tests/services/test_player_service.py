import pytest
from sqlalchemy import func, select

from app.exceptions import ValidationError
from app.models import Player
from app.schemas.player import PlayerCreateRequest
from app.services import players as player_service


@pytest.mark.asyncio
async def test_duplicate_number_lost_race_reported_as_validation_error(
    test_session, sample_players, monkeypatch
):
    async def number_free(db, number):
        # Another request registered the number after this one checked
        return False

    monkeypatch.setattr(player_service, "number_exists", number_free)

    payload = PlayerCreateRequest(name="Late Signing", positions=["ST"], number=9)
    with pytest.raises(ValidationError, match="shirt number already exists"):
        await player_service.create_player(test_session, payload)

    count = await test_session.execute(
        select(func.count()).select_from(Player).where(Player.number == 9)
    )
    assert count.scalar() == 1


@pytest.mark.asyncio
async def test_session_usable_after_duplicate_number_rollback(
    test_session, sample_players, monkeypatch
):
    async def number_free(db, number):
        return False

    monkeypatch.setattr(player_service, "number_exists", number_free)

    with pytest.raises(ValidationError):
        await player_service.create_player(
            test_session, PlayerCreateRequest(name="Clash", positions=["GK"], number=1)
        )

    player = await player_service.create_player(
        test_session, PlayerCreateRequest(name="Fresh", positions=["CM"], number=14)
    )
    assert player.id is not None
    assert player.number == 14
