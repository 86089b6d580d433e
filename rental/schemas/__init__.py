"""Plain in-memory records returned by the gateway."""

from rental.schemas.user import UserRecord
from rental.schemas.vehicle import VehicleRecord

__all__ = [
    "UserRecord",
    "VehicleRecord",
]
