from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.sql_types import ID_SQL_TYPE


class Formation(Base):
    """Tactical template: a named shape and the slots it offers."""

    __tablename__ = "formations"

    id: Mapped[int] = mapped_column(ID_SQL_TYPE, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    shape: Mapped[str] = mapped_column(String(255), nullable=False)  # e.g. "4-4-2"

    slots: Mapped[list["FormationSlot"]] = relationship(
        "FormationSlot",
        back_populates="formation",
        cascade="all, delete-orphan",
        order_by="FormationSlot.sort_order",
    )


class FormationSlot(Base):
    __tablename__ = "formation_slots"
    __table_args__ = (
        UniqueConstraint("formation_id", "slot_id", name="uq_formation_slot_id"),
    )

    id: Mapped[int] = mapped_column(ID_SQL_TYPE, primary_key=True, autoincrement=True)
    formation_id: Mapped[int] = mapped_column(
        ID_SQL_TYPE, ForeignKey("formations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Stable id referenced by lineup slots, e.g. "GK-1", "DEF-2"
    slot_id: Mapped[str] = mapped_column(String(255), nullable=False)
    # Label shown on the pitch, e.g. "GK", "LB", "CB"
    position: Mapped[str] = mapped_column(String(255), nullable=False)
    # Optional default occupant
    player_id: Mapped[int | None] = mapped_column(ID_SQL_TYPE)

    formation: Mapped["Formation"] = relationship("Formation", back_populates="slots")
