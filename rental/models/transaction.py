"""
Transaction history model.

Append-only ledger of rentals and returns. Rows are written by the
gateway and never read, updated or deleted by it.
"""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from rental.models.base import Base


class TransactionHistory(Base):
    """
    One money movement tied to a user and a vehicle.

    Attributes:
        id: Auto-incrementing primary key
        timestamp: Insertion time, set by the writer (not the caller)
        user_id: Foreign key to users.id
        vehicle_id: Foreign key to vehicles.id
        total_amount: Amount charged or refunded
        transaction_type: Application-defined integer code
    """

    __tablename__ = "transaction_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    vehicle_id: Mapped[int] = mapped_column(Integer, ForeignKey("vehicles.id"), nullable=False)
    total_amount: Mapped[float] = mapped_column(Float, nullable=False)
    transaction_type: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<TransactionHistory(id={self.id}, user_id={self.user_id}, "
            f"vehicle_id={self.vehicle_id}, amount={self.total_amount})>"
        )
