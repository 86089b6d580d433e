"""Tests for the fail-soft RentalDataGateway."""

from rental.config import Settings
from rental.core.constants import FAILED_USER_ID, NO_RENTER_ID
from rental.database import create_all_tables, create_db_engine, create_session_factory
from rental.repositories import RentalDataGateway, RentalRepository
from rental.schemas import UserRecord


def test_rent_and_return_vehicle(gateway, seeded):
    assert gateway.set_vehicle_taken(7, True, 42) is True

    vehicle = gateway.fetch_all_vehicles()[7]
    assert vehicle.is_available is False
    assert vehicle.current_renter_id == 42

    assert gateway.set_vehicle_taken(7, False) is True
    vehicle = gateway.fetch_all_vehicles()[7]
    assert vehicle.is_available is True
    assert vehicle.current_renter_id == NO_RENTER_ID


def test_set_vehicle_taken_unknown_vehicle_reports_success(gateway, seeded):
    assert gateway.set_vehicle_taken(999, True, 42) is True


def test_user_lifecycle(gateway, seeded):
    user_id = gateway.add_user("Ada", "Lovelace", "ada@example.com", "555-0100")
    assert user_id != FAILED_USER_ID

    assert gateway.add_transaction_entry(user_id, 3, 39.5, 1) is True
    assert gateway.fetch_all_users()[user_id].email == "ada@example.com"

    other_id = gateway.add_user_record(
        UserRecord(first_name="Grace", last_name="Hopper", email="grace@example.com", phone_number="555-0199")
    )
    assert gateway.delete_user(other_id) is True
    assert other_id not in gateway.fetch_all_users()
    assert user_id in gateway.fetch_all_users()


def test_modify_user_always_false(gateway):
    user_id = gateway.add_user("Ada", "Lovelace", "ada@example.com", "555-0100")
    record = gateway.fetch_all_users()[user_id]

    assert gateway.modify_user(record.model_copy(update={"email": "new@example.com"})) is False
    assert gateway.fetch_all_users()[user_id].email == "ada@example.com"


def test_unreachable_database_falls_back_to_defaults(unreachable_session_factory):
    gateway = RentalDataGateway(RentalRepository(unreachable_session_factory))
    user = UserRecord(first_name="Ada", last_name="Lovelace", email="ada@example.com", phone_number="555-0100")

    assert gateway.fetch_all_vehicles() == {}
    assert gateway.fetch_all_users() == {}
    assert gateway.set_vehicle_taken(7, True, 42) is False
    assert gateway.add_transaction_entry(1, 7, 10.0, 1) is False
    assert gateway.add_user("Ada", "Lovelace", "ada@example.com", "555-0100") == FAILED_USER_ID
    assert gateway.add_user_record(user) == FAILED_USER_ID
    assert gateway.delete_user(1) is False
    assert gateway.modify_user(user) is False


def test_from_settings_does_not_connect(tmp_path):
    # Construction only builds the engine; the file appears on first use
    db_file = tmp_path / "data" / "rental.db"
    gateway = RentalDataGateway.from_settings(Settings(database_url=f"sqlite:///{db_file}"))
    assert not db_file.exists()

    assert gateway.fetch_all_vehicles() == {}
    assert db_file.exists()


def test_from_settings_against_file_database(tmp_path):
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'rental.db'}")
    create_all_tables(create_db_engine(settings))
    gateway = RentalDataGateway.from_settings(settings)

    user_id = gateway.add_user("Ada", "Lovelace", "ada@example.com", "555-0100")

    # A second gateway on the same file sees the committed row
    assert RentalDataGateway.from_settings(settings).fetch_all_users()[user_id].first_name == "Ada"


def test_driver_qualified_memory_url_keeps_its_tables():
    engine = create_db_engine(Settings(database_url="sqlite+pysqlite:///:memory:"))
    create_all_tables(engine)
    gateway = RentalDataGateway(RentalRepository(create_session_factory(engine)))

    user_id = gateway.add_user("Ada", "Lovelace", "ada@example.com", "555-0100")

    assert user_id != FAILED_USER_ID
    assert user_id in gateway.fetch_all_users()
    engine.dispose()
