"""
Data access layer (Repository pattern).

RentalRepository runs the SQL and reports structured results.
RentalDataGateway adapts it to plain default values.
"""

from rental.repositories.rental_repository import RentalRepository
from rental.repositories.gateway import RentalDataGateway

__all__ = [
    "RentalRepository",
    "RentalDataGateway",
]
