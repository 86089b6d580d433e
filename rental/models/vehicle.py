"""
Vehicle model.

A Vehicle is one rentable unit. Occupancy is stored as an integer flag
(is_taken: 0 or 1) together with the id of the current renter.

curr_user_id holds NO_RENTER_ID (-1) while the vehicle is free, so it
carries no foreign key constraint.
"""

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from rental.core.constants import NO_RENTER_ID, NOT_TAKEN
from rental.models.base import Base


class Vehicle(Base):
    """
    Rentable vehicle.

    Attributes:
        id: Primary key
        model_name: Make/model label shown to renters
        color: Paint color
        min_capacity: Seats
        daily_price: Price per rental day
        v_type: Foreign key to vehicle_types.id
        is_taken: 0=available, 1=rented
        curr_user_id: Renter id, -1 when available

    Example:
        vehicle = Vehicle(model_name="Corolla", color="red", min_capacity=5,
                          daily_price=39.5, v_type=1)
        db.add(vehicle)
        db.commit()
    """

    __tablename__ = "vehicles"

    # ========================================
    # Primary Key
    # ========================================

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # ========================================
    # Description
    # ========================================

    model_name: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(String(50), nullable=False)
    min_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    daily_price: Mapped[float] = mapped_column(Float, nullable=False)

    v_type: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("vehicle_types.id"),
        nullable=False,
    )

    # ========================================
    # Occupancy
    # ========================================

    is_taken: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=NOT_TAKEN,
        server_default=str(NOT_TAKEN),
    )

    curr_user_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=NO_RENTER_ID,
        server_default=str(NO_RENTER_ID),
    )

    def is_available(self) -> bool:
        """True while the taken flag is 0."""
        return self.is_taken == NOT_TAKEN

    def __repr__(self) -> str:
        status = "available" if self.is_available() else f"taken by {self.curr_user_id}"
        return f"<Vehicle(id={self.id}, model='{self.model_name}', {status})>"
