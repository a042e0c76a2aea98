from datetime import datetime

from sqlalchemy import (
    Boolean, DateTime, Float, ForeignKey, Integer, String, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.sql_types import ID_SQL_TYPE
from app.utils.timestamps import utcnow


class Lineup(Base):
    """
    Team sheet for a single match.
    Owns its slots and per-player stats; both are replaced on every save.
    """
    __tablename__ = "lineups"
    __table_args__ = (
        UniqueConstraint("match_id", name="uq_lineup_match"),
    )

    id: Mapped[int] = mapped_column(ID_SQL_TYPE, primary_key=True, autoincrement=True)
    # Referenced by id only, no FK cascade from matches
    match_id: Mapped[int] = mapped_column(ID_SQL_TYPE, nullable=False)
    formation_id: Mapped[int] = mapped_column(ID_SQL_TYPE, nullable=False)
    captain_player_id: Mapped[int | None] = mapped_column(ID_SQL_TYPE)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    slots: Mapped[list["LineupSlot"]] = relationship(
        "LineupSlot",
        back_populates="lineup",
        cascade="all, delete-orphan",
        order_by="LineupSlot.id",
    )
    player_stats: Mapped[list["LineupPlayerStat"]] = relationship(
        "LineupPlayerStat",
        back_populates="lineup",
        cascade="all, delete-orphan",
        order_by="LineupPlayerStat.id",
    )


class LineupSlot(Base):
    __tablename__ = "lineup_slots"

    id: Mapped[int] = mapped_column(ID_SQL_TYPE, primary_key=True, autoincrement=True)
    lineup_id: Mapped[int] = mapped_column(
        ID_SQL_TYPE, ForeignKey("lineups.id", ondelete="CASCADE"), nullable=False, index=True
    )

    slot_id: Mapped[str] = mapped_column(String(255), nullable=False)  # DEF-1, MID-3
    pos: Mapped[str] = mapped_column(String(255), nullable=False)  # LB, CM, ST
    player_id: Mapped[int | None] = mapped_column(ID_SQL_TYPE)  # None = unfilled
    is_captain: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    rating: Mapped[float | None] = mapped_column(Float)

    # Legacy per-slot counters, kept as sent by older clients
    goals: Mapped[int | None] = mapped_column(Integer)
    assists: Mapped[int | None] = mapped_column(Integer)
    yellow_cards: Mapped[int | None] = mapped_column(Integer)
    red_cards: Mapped[int | None] = mapped_column(Integer)

    lineup: Mapped["Lineup"] = relationship("Lineup", back_populates="slots")


class LineupPlayerStat(Base):
    """Per-player match statistics, one row per (lineup, player)."""

    __tablename__ = "lineup_player_stats"
    __table_args__ = (
        UniqueConstraint("lineup_id", "player_id", name="uq_lineup_player_stat"),
    )

    id: Mapped[int] = mapped_column(ID_SQL_TYPE, primary_key=True, autoincrement=True)
    lineup_id: Mapped[int] = mapped_column(
        ID_SQL_TYPE, ForeignKey("lineups.id", ondelete="CASCADE"), nullable=False, index=True
    )
    player_id: Mapped[int] = mapped_column(ID_SQL_TYPE, nullable=False, index=True)

    goals: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    assists: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    yellow_cards: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    red_cards: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    lineup: Mapped["Lineup"] = relationship("Lineup", back_populates="player_stats")
