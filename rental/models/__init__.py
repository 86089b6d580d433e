"""
Database models package.

Contains the SQLAlchemy ORM models for the rental schema.
"""

from rental.models.base import Base
from rental.models.user import User
from rental.models.vehicle_type import VehicleType
from rental.models.vehicle import Vehicle
from rental.models.transaction import TransactionHistory

__all__ = [
    "Base",
    "User",
    "VehicleType",
    "Vehicle",
    "TransactionHistory",
]
