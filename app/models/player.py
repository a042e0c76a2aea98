from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.sql_types import ID_SQL_TYPE


class Player(Base):
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(ID_SQL_TYPE, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Shirt number, unique across the squad
    number: Mapped[int] = mapped_column(Integer, nullable=False, unique=True, index=True)
    # Position labels, e.g. ["CB", "RB"]
    positions: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
