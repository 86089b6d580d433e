"""Vehicle type taxonomy (e.g. sedan, van). Referenced by vehicles.v_type."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from rental.models.base import Base


class VehicleType(Base):
    __tablename__ = "vehicle_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<VehicleType(id={self.id}, name='{self.name}')>"
