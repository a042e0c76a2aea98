import pytest
from sqlalchemy import func, select

from app.exceptions import NotFoundError, ValidationError
from app.models import Lineup, LineupPlayerStat
from app.schemas.lineup import LineupSlotInput, LineupUpsertRequest, PlayerStatInput
from app.services import lineup as lineup_service
from app.services.lineup import (
    StatRow,
    StatSource,
    get_lineup_for_match,
    reconcile_player_stats,
    upsert_lineup_for_match,
)


def _slot(slot_id: str, player_id: int | None = None, **counters) -> LineupSlotInput:
    return LineupSlotInput(slot_id=slot_id, pos="CM", player_id=player_id, **counters)


class TestReconcilePlayerStats:
    def test_derived_sums_per_player_and_clamps_negatives(self):
        slots = [
            _slot("MID-1", 7, goals=2),
            _slot("MID-2", 7, goals=1, assists=-3),
        ]
        source, rows = reconcile_player_stats(slots, None)
        assert source == StatSource.derived
        assert rows == [StatRow(player_id=7, goals=3, assists=0, yellow_cards=0, red_cards=0)]

    def test_derived_skips_empty_slots_and_keeps_first_seen_order(self):
        slots = [
            _slot("ATT-1", 11, yellow_cards=1),
            _slot("ATT-2"),
            _slot("DEF-1", 4, red_cards=1),
            _slot("DEF-2", 11, yellow_cards=1),
        ]
        source, rows = reconcile_player_stats(slots, [])
        assert source == StatSource.derived
        assert [row.player_id for row in rows] == [11, 4]
        assert rows[0].yellow_cards == 2
        assert rows[1].red_cards == 1

    def test_derived_for_players_without_counters(self):
        _, rows = reconcile_player_stats([_slot("GK-1", 1)], None)
        assert rows == [StatRow(player_id=1)]

    def test_explicit_ignores_slot_counters(self):
        slots = [_slot("ATT-1", 9, goals=4)]
        stats = [PlayerStatInput(player_id=9, goals=1), PlayerStatInput(player_id=3, red_cards=1)]
        source, rows = reconcile_player_stats(slots, stats)
        assert source == StatSource.explicit
        assert rows == [
            StatRow(player_id=9, goals=1),
            StatRow(player_id=3, red_cards=1),
        ]

    def test_no_slots_no_stats(self):
        assert reconcile_player_stats([], None) == (StatSource.derived, [])


@pytest.mark.asyncio
async def test_upsert_reports_stat_source(test_session):
    derived = await upsert_lineup_for_match(
        test_session,
        31,
        LineupUpsertRequest(formation_id=2, slots=[_slot("MID-1", 8, goals=1)]),
    )
    assert derived.created is True
    assert derived.stat_source == StatSource.derived

    explicit = await upsert_lineup_for_match(
        test_session,
        31,
        LineupUpsertRequest(
            formation_id=2,
            slots=[_slot("MID-1", 8, goals=1)],
            player_stats=[PlayerStatInput(player_id=8, goals=2)],
        ),
    )
    assert explicit.created is False
    assert explicit.stat_source == StatSource.explicit
    assert explicit.lineup.id == derived.lineup.id
    assert [(s.player_id, s.goals) for s in explicit.lineup.player_stats] == [(8, 2)]


@pytest.mark.asyncio
async def test_upsert_same_player_stats_twice_keeps_single_row(test_session):
    payload = LineupUpsertRequest(
        formation_id=1,
        slots=[_slot("GK-1", 1)],
        player_stats=[PlayerStatInput(player_id=1, goals=0)],
    )
    await upsert_lineup_for_match(test_session, 2, payload)
    await upsert_lineup_for_match(test_session, 2, payload)

    count = await test_session.execute(
        select(func.count()).select_from(LineupPlayerStat).where(LineupPlayerStat.player_id == 1)
    )
    assert count.scalar() == 1
    lineups = await test_session.execute(select(func.count()).select_from(Lineup))
    assert lineups.scalar() == 1


@pytest.mark.asyncio
async def test_upsert_validation_happens_before_write(test_session):
    payload = LineupUpsertRequest(
        formation_id=1,
        slots=[_slot("GK-1", 1)],
        player_stats=[PlayerStatInput(player_id=None, goals=1)],
    )
    with pytest.raises(ValidationError, match="playerStats.playerId is required"):
        await upsert_lineup_for_match(test_session, 40, payload)

    with pytest.raises(NotFoundError):
        await get_lineup_for_match(test_session, 40)


@pytest.mark.asyncio
async def test_upsert_overwrites_lineup_created_concurrently(test_session, monkeypatch):
    await upsert_lineup_for_match(
        test_session,
        50,
        LineupUpsertRequest(formation_id=4, slots=[_slot("GK-1", 2)]),
    )

    real_finder = lineup_service.find_lineup_by_match_id
    calls = []

    async def stale_first_lookup(db, match_id):
        calls.append(match_id)
        if len(calls) == 1:
            # Row committed by another writer is not visible yet
            return None
        return await real_finder(db, match_id)

    monkeypatch.setattr(lineup_service, "find_lineup_by_match_id", stale_first_lookup)

    result = await upsert_lineup_for_match(
        test_session,
        50,
        LineupUpsertRequest(
            formation_id=9,
            slots=[_slot("ATT-1", 1)],
            player_stats=[PlayerStatInput(player_id=1, goals=1)],
        ),
    )

    assert len(calls) >= 2
    assert result.created is False
    assert result.lineup.formation_id == 9
    assert [s.slot_id for s in result.lineup.slots] == ["ATT-1"]
    assert [(s.player_id, s.goals) for s in result.lineup.player_stats] == [(1, 1)]

    lineups = await test_session.execute(select(func.count()).select_from(Lineup))
    assert lineups.scalar() == 1
