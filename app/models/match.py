from datetime import date

from sqlalchemy import Boolean, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.sql_types import ID_SQL_TYPE


class Match(Base):
    __tablename__ = "matches"

    id: Mapped[int] = mapped_column(ID_SQL_TYPE, primary_key=True, autoincrement=True)
    date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    opponent: Mapped[str] = mapped_column(String(255), nullable=False)
    home: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)  # True = home, False = away

    # Final score, unknown until played
    goals_for: Mapped[int | None] = mapped_column(Integer)
    goals_against: Mapped[int | None] = mapped_column(Integer)
