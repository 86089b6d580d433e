"""
Rental repository.

One method per table operation. Each method opens its own session, runs
exactly one parameterized statement, releases the session and returns an
OperationResult. Database and row-mapping errors are logged and reported
as ErrorKind.CONNECTIVITY_OR_STATEMENT; nothing is raised to the caller.

Tables touched:
    users [id, timestamp, first_name, last_name, email, phone_num]
    vehicles [id, model_name, color, min_capacity, daily_price, v_type, is_taken, curr_user_id]
    transaction_history [id, timestamp, user_id, vehicle_id, total_amount, transaction_type]
"""

import logging
from datetime import datetime, UTC
from typing import Dict, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from rental.config import Settings
from rental.core.constants import ErrorKind, NO_RENTER_ID, NOT_TAKEN, TAKEN
from rental.core.result import OperationResult
from rental.database.session import create_db_engine, create_session_factory, session_scope
from rental.models import TransactionHistory, User, Vehicle
from rental.schemas import UserRecord, VehicleRecord

logger = logging.getLogger(__name__)

# Row mapping raises pydantic ValidationError, a ValueError subclass
DATA_ERRORS = (SQLAlchemyError, ValueError)


class RentalRepository:
    """
    Strict data access over the rental schema.

    Example:
        repository = RentalRepository.from_settings()
        result = repository.fetch_all_vehicles()
        if result.ok:
            for vehicle_id, vehicle in result.value.items():
                print(vehicle_id, vehicle.model_name)
        else:
            print(result.error_kind, result.message)
    """

    def __init__(self, session_factory: sessionmaker):
        """
        Args:
            session_factory: Factory producing sessions bound to the rental database
        """
        self._session_factory = session_factory

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "RentalRepository":
        """Build a repository from connection settings. Does not connect."""
        engine = create_db_engine(config)
        return cls(create_session_factory(engine))

    # ========================================
    # Vehicles
    # ========================================

    def fetch_all_vehicles(self) -> OperationResult[Dict[int, VehicleRecord]]:
        """
        Read every vehicle.

        Returns:
            Mapping of vehicle id to VehicleRecord. A failure mid-scan
            discards the partial mapping.
        """
        logger.debug("fetch_all_vehicles -- BEGIN")
        try:
            with session_scope(self._session_factory) as db:
                rows = db.scalars(select(Vehicle)).all()
                vehicles = {row.id: VehicleRecord.from_row(row) for row in rows}
        except DATA_ERRORS as e:
            return self._failure("fetch_all_vehicles", "Exception getting all vehicles", e)

        logger.debug("fetch_all_vehicles -- END (%d vehicles)", len(vehicles))
        return OperationResult.success(vehicles)

    def set_vehicle_taken(
        self,
        vehicle_id: int,
        taken_status: bool,
        user_id: int = NO_RENTER_ID,
    ) -> OperationResult[int]:
        """
        Mark a vehicle as taken or returned.

        taken_status=True stores is_taken=1, False stores is_taken=0.
        user_id is written to curr_user_id as given.

        Args:
            vehicle_id: Vehicle to update
            taken_status: True when the vehicle is being rented out
            user_id: Renter id, NO_RENTER_ID when returning the vehicle

        Returns:
            Number of rows matched (0 when the id does not exist)
        """
        logger.debug("set_vehicle_taken -- BEGIN")
        logger.info("Updating vehicle %s with taken=%s, user_id=%s", vehicle_id, taken_status, user_id)

        stmt = (
            update(Vehicle)
            .where(Vehicle.id == vehicle_id)
            .values(is_taken=TAKEN if taken_status else NOT_TAKEN, curr_user_id=user_id)
        )
        try:
            with session_scope(self._session_factory) as db:
                rowcount = db.execute(stmt).rowcount
        except DATA_ERRORS as e:
            return self._failure("set_vehicle_taken", f"Exception updating vehicle {vehicle_id}", e)

        if rowcount == 0:
            logger.warning("set_vehicle_taken matched no vehicle with id=%s", vehicle_id)
        logger.debug("set_vehicle_taken -- END")
        return OperationResult.success(rowcount)

    # ========================================
    # Transactions
    # ========================================

    def add_transaction_entry(
        self,
        user_id: int,
        vehicle_id: int,
        amount: float,
        transaction_type: int,
    ) -> OperationResult[None]:
        """
        Append a transaction_history row stamped with the current UTC time.

        Args:
            user_id: User that paid or was refunded
            vehicle_id: Vehicle the transaction concerns
            amount: Total amount
            transaction_type: Application-defined code
        """
        logger.debug("add_transaction_entry -- BEGIN")
        logger.info(
            "Adding transaction entry [user_id=%s, vehicle_id=%s, amount=%s, type=%s]",
            user_id, vehicle_id, amount, transaction_type,
        )

        stmt = insert(TransactionHistory).values(
            timestamp=datetime.now(UTC),
            user_id=user_id,
            vehicle_id=vehicle_id,
            total_amount=amount,
            transaction_type=transaction_type,
        )
        try:
            with session_scope(self._session_factory) as db:
                db.execute(stmt)
        except DATA_ERRORS as e:
            return self._failure("add_transaction_entry", "Exception adding transaction entry", e)

        logger.debug("add_transaction_entry -- END")
        return OperationResult.success()

    # ========================================
    # Users
    # ========================================

    def fetch_all_users(self) -> OperationResult[Dict[int, UserRecord]]:
        """Read every user, keyed by id."""
        logger.debug("fetch_all_users -- BEGIN")
        try:
            with session_scope(self._session_factory) as db:
                rows = db.scalars(select(User)).all()
                users = {row.id: UserRecord.from_row(row) for row in rows}
        except DATA_ERRORS as e:
            return self._failure("fetch_all_users", "Exception getting all users", e)

        logger.debug("fetch_all_users -- END (%d users)", len(users))
        return OperationResult.success(users)

    def add_user(self, first_name: str, last_name: str, email: str, phone_number: str) -> OperationResult[int]:
        """
        Insert a user and return the id the database assigned.

        All four values are bound as parameters.
        """
        logger.debug("add_user -- BEGIN")

        stmt = (
            insert(User)
            .values(first_name=first_name, last_name=last_name, email=email, phone_num=phone_number)
            .returning(User.id)
        )
        try:
            with session_scope(self._session_factory) as db:
                user_id = db.execute(stmt).scalar_one()
        except DATA_ERRORS as e:
            return self._failure("add_user", "Exception adding user", e)

        logger.info("Added new user. Generated user id=%s", user_id)
        logger.debug("add_user -- END")
        return OperationResult.success(user_id)

    def add_user_record(self, user: UserRecord) -> OperationResult[int]:
        """Insert a UserRecord. Its id, if set, is ignored."""
        logger.debug("add_user_record -- BEGIN")
        result = self.add_user(user.first_name, user.last_name, user.email, user.phone_number)
        logger.debug("add_user_record -- END")
        return result

    def delete_user(self, user_id: int) -> OperationResult[int]:
        """
        Delete a user by id.

        Returns:
            Number of rows deleted (0 when the id does not exist)
        """
        logger.debug("delete_user -- BEGIN")
        logger.info("Deleting user with id=%s", user_id)

        stmt = delete(User).where(User.id == user_id)
        try:
            with session_scope(self._session_factory) as db:
                rowcount = db.execute(stmt).rowcount
        except DATA_ERRORS as e:
            return self._failure("delete_user", f"Exception deleting user {user_id}", e)

        logger.debug("delete_user -- END")
        return OperationResult.success(rowcount)

    def modify_user(self, user: UserRecord) -> OperationResult[None]:
        """Not implemented. Users are replaced by delete + add."""
        logger.debug("modify_user -- BEGIN")
        logger.warning("modify_user is not supported (user id=%s)", user.id)
        logger.debug("modify_user -- END")
        return OperationResult.failure(ErrorKind.UNSUPPORTED, "modify_user is not implemented")

    # ========================================
    # Helpers
    # ========================================

    @staticmethod
    def _failure(operation: str, message: str, exc: Exception) -> OperationResult:
        cause = describe_error(exc)
        logger.error("%s -- %s: %s", operation, message, cause)
        return OperationResult.failure(ErrorKind.CONNECTIVITY_OR_STATEMENT, f"{message}: {cause}")


def describe_error(exc: Exception) -> str:
    """
    One-line cause safe to log.

    Only the first line of the driver message is kept. Later lines carry
    the SQL parameters, libpq DETAIL (offending key values) or pydantic
    input values, any of which may hold personal data.
    """
    cause = getattr(exc, "orig", None) or exc
    lines = str(cause).strip().splitlines()
    first = lines[0] if lines else ""
    return f"{type(cause).__name__}: {first}" if first else type(cause).__name__

