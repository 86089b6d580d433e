from pydantic import BaseModel, Field

from rental.core.constants import NO_RENTER_ID, NOT_TAKEN
from rental.models.vehicle import Vehicle


class VehicleRecord(BaseModel):
    """Schema for a vehicle row as seen by renters."""
    id: int = Field(..., description="Vehicle id")
    model_name: str = Field(..., description="Make/model label")
    color: str = Field(..., description="Paint color")
    min_capacity: int = Field(..., description="Seats")
    price_per_day: float = Field(..., description="Daily rental price")
    vehicle_type: int = Field(..., description="vehicle_types.id")
    is_available: bool = Field(..., description="True when the taken flag is 0")
    current_renter_id: int = Field(NO_RENTER_ID, description="Renter id, -1 when available")

    model_config = {
        "protected_namespaces": (),
        "json_schema_extra": {
            "example": {
                "id": 7,
                "model_name": "Corolla",
                "color": "red",
                "min_capacity": 5,
                "price_per_day": 39.5,
                "vehicle_type": 1,
                "is_available": False,
                "current_renter_id": 42,
            }
        }
    }

    @classmethod
    def from_row(cls, row: Vehicle) -> "VehicleRecord":
        """
        Copy a vehicles row, deriving is_available from is_taken.

        Legacy rows may hold NULL occupancy columns: a NULL is_taken reads
        as not taken and a NULL curr_user_id as NO_RENTER_ID.
        """
        is_taken = NOT_TAKEN if row.is_taken is None else row.is_taken
        renter_id = NO_RENTER_ID if row.curr_user_id is None else row.curr_user_id
        return cls(
            id=row.id,
            model_name=row.model_name,
            color=row.color,
            min_capacity=row.min_capacity,
            price_per_day=row.daily_price,
            vehicle_type=row.v_type,
            is_available=is_taken == NOT_TAKEN,
            current_renter_id=renter_id,
        )
