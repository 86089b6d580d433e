"""
Fail-soft gateway over RentalRepository.

Callers that only need a yes/no answer use this instead of inspecting
OperationResult. Every failure collapses into a default value:

    reads               -> {}
    add_user            -> FAILED_USER_ID (-1)
    everything else     -> False

Reads cannot tell "no rows" apart from "query failed".
"""

from typing import Dict, Optional

from rental.config import Settings
from rental.core.constants import FAILED_USER_ID, NO_RENTER_ID
from rental.repositories.rental_repository import RentalRepository
from rental.schemas import UserRecord, VehicleRecord


class RentalDataGateway:
    """
    Single point of access to the rental tables.

    Create one at startup and pass it to whatever needs it:

        gateway = RentalDataGateway.from_settings()
        if gateway.set_vehicle_taken(7, True, 42):
            gateway.add_transaction_entry(42, 7, 79.0, 1)
    """

    def __init__(self, repository: RentalRepository):
        self.repository = repository

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "RentalDataGateway":
        return cls(RentalRepository.from_settings(config))

    def fetch_all_vehicles(self) -> Dict[int, VehicleRecord]:
        return self.repository.fetch_all_vehicles().unwrap_or({})

    def set_vehicle_taken(self, vehicle_id: int, taken_status: bool, user_id: int = NO_RENTER_ID) -> bool:
        """True if the update ran, whether or not the vehicle exists."""
        return self.repository.set_vehicle_taken(vehicle_id, taken_status, user_id).ok

    def add_transaction_entry(self, user_id: int, vehicle_id: int, amount: float, transaction_type: int) -> bool:
        return self.repository.add_transaction_entry(user_id, vehicle_id, amount, transaction_type).ok

    def fetch_all_users(self) -> Dict[int, UserRecord]:
        return self.repository.fetch_all_users().unwrap_or({})

    def add_user(self, first_name: str, last_name: str, email: str, phone_number: str) -> int:
        """Returns the new user id, or FAILED_USER_ID."""
        return self.repository.add_user(first_name, last_name, email, phone_number).unwrap_or(FAILED_USER_ID)

    def add_user_record(self, user: UserRecord) -> int:
        return self.repository.add_user_record(user).unwrap_or(FAILED_USER_ID)

    def delete_user(self, user_id: int) -> bool:
        """True if the delete ran, whether or not the user exists."""
        return self.repository.delete_user(user_id).ok

    def modify_user(self, user: UserRecord) -> bool:
        """Always False; modifying users is not supported."""
        return self.repository.modify_user(user).ok
