"""Shared fixtures: an in-memory rental database per test."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

from rental.config import Settings
from rental.database import (
    create_all_tables,
    create_db_engine,
    create_session_factory,
    session_scope,
)
from rental.models import Vehicle, VehicleType
from rental.repositories import RentalDataGateway, RentalRepository


@pytest.fixture
def engine():
    engine = create_db_engine(Settings(database_url="sqlite://"))
    create_all_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def seeded(session_factory):
    """Two vehicle types and three vehicles; vehicle 9 is rented by user 5."""
    with session_scope(session_factory) as db:
        db.add_all([VehicleType(id=1, name="Sedan"), VehicleType(id=2, name="Van")])
        db.flush()
        db.add_all([
            Vehicle(id=3, model_name="Corolla", color="red", min_capacity=5, daily_price=39.5, v_type=1),
            Vehicle(id=7, model_name="Sienna", color="silver", min_capacity=8, daily_price=79.0, v_type=2),
            Vehicle(id=9, model_name="Accord", color="black", min_capacity=5, daily_price=45.0, v_type=1,
                    is_taken=1, curr_user_id=5),
        ])
    return session_factory


@pytest.fixture
def repository(session_factory):
    return RentalRepository(session_factory)


@pytest.fixture
def gateway(repository):
    return RentalDataGateway(repository)


@pytest.fixture
def unreachable_session_factory(tmp_path):
    """SQLite file inside a directory that does not exist: every connect fails."""
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'rental.db'}", poolclass=NullPool)
    yield create_session_factory(engine)
    engine.dispose()
