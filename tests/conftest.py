import pytest
from datetime import date
from typing import AsyncGenerator

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base
from app.api.deps import get_db  # Import from where routes actually use it
from app.models import Formation, FormationSlot, Match, Player


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# Note: Using pytest-asyncio's built-in event_loop fixture (asyncio_mode = auto)


@pytest.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(scope="function")
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture(scope="function")
async def client(test_session) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with overridden database dependency."""

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# --- Data Fixtures ---

@pytest.fixture
async def sample_players(test_session) -> list[Player]:
    """Create a goalkeeper, a defender and a striker."""
    players = [
        Player(name="Keeper", number=1, positions=["GK"]),
        Player(name="Stopper", number=5, positions=["CB", "RB"]),
        Player(name="Striker", number=9, positions=["ST"]),
    ]
    test_session.add_all(players)
    await test_session.commit()
    for player in players:
        await test_session.refresh(player)
    return players


@pytest.fixture
async def sample_match(test_session) -> Match:
    """Create a sample match."""
    match = Match(
        date=date(2025, 9, 13),
        opponent="Riverside FC",
        home=True,
        goals_for=2,
        goals_against=1,
    )
    test_session.add(match)
    await test_session.commit()
    await test_session.refresh(match)
    return match


@pytest.fixture
async def sample_formation(test_session) -> Formation:
    """Create a 4-4-2 formation."""
    positions = [
        ("GK-1", "GK"), ("DEF-1", "LB"), ("DEF-2", "CB"), ("DEF-3", "CB"), ("DEF-4", "RB"),
        ("MID-1", "LM"), ("MID-2", "CM"), ("MID-3", "CM"), ("MID-4", "RM"),
        ("ATT-1", "ST"), ("ATT-2", "ST"),
    ]
    formation = Formation(
        name="Classic",
        shape="4-4-2",
        slots=[
            FormationSlot(sort_order=index, slot_id=slot_id, position=position)
            for index, (slot_id, position) in enumerate(positions)
        ],
    )
    test_session.add(formation)
    await test_session.commit()
    await test_session.refresh(formation)
    return formation
