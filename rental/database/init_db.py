"""
Database initialization and seeding.

This script:
- Creates all database tables
- Seeds the vehicle type taxonomy
- Optionally adds sample vehicles for development/testing
- Can reset the database (drop and recreate)

It is a development helper, not a migration tool.

Usage:
    # Initialize with vehicle types
    python -m rental.database.init_db

    # Reset database (drops all tables and recreates)
    python -m rental.database.init_db --reset

    # Add sample vehicles for testing
    python -m rental.database.init_db --sample-data
"""

import argparse
import logging
from typing import Dict

from sqlalchemy import Engine, func, select

from rental.config import print_settings
from rental.core.logging import configure_logging
from rental.database.session import (
    create_all_tables,
    create_db_engine,
    create_session_factory,
    drop_all_tables,
    session_scope,
)
from rental.models import TransactionHistory, User, Vehicle, VehicleType

logger = logging.getLogger(__name__)


VEHICLE_TYPES = ["Economy", "Sedan", "SUV", "Van"]

SAMPLE_VEHICLES = [
    {"model_name": "Yaris", "color": "white", "min_capacity": 4, "daily_price": 29.0, "type": "Economy"},
    {"model_name": "Corolla", "color": "red", "min_capacity": 5, "daily_price": 39.5, "type": "Sedan"},
    {"model_name": "Accord", "color": "black", "min_capacity": 5, "daily_price": 45.0, "type": "Sedan"},
    {"model_name": "RAV4", "color": "blue", "min_capacity": 5, "daily_price": 59.0, "type": "SUV"},
    {"model_name": "Sienna", "color": "silver", "min_capacity": 8, "daily_price": 79.0, "type": "Van"},
]


def create_tables(engine: Engine, reset: bool = False) -> None:
    """
    Create all database tables.

    Args:
        engine: Target engine
        reset: If True, drop existing tables first
    """
    if reset:
        print("🗑️  Dropping existing tables...")
        drop_all_tables(engine)
        print("✅ Tables dropped")

    print("📊 Creating database tables...")
    create_all_tables(engine)
    print("✅ Tables created")


def seed_vehicle_types(session_factory) -> Dict[str, int]:
    """
    Insert any missing vehicle types.

    Returns:
        Mapping of type name to id
    """
    print("\n🌱 Seeding vehicle types...")

    with session_scope(session_factory) as db:
        existing = {vt.name: vt.id for vt in db.scalars(select(VehicleType))}
        for name in VEHICLE_TYPES:
            if name in existing:
                print(f"  ⏭️  Vehicle type '{name}' already exists (skipping)")
                continue
            vehicle_type = VehicleType(name=name)
            db.add(vehicle_type)
            db.flush()
            existing[name] = vehicle_type.id
            print(f"  ✅ Created: {vehicle_type}")

    print("✅ Vehicle types seeded")
    return existing


def seed_sample_data(session_factory, type_ids: Dict[str, int]) -> None:
    """Add sample vehicles, skipping models that are already present."""
    print("\n🌱 Seeding sample vehicles...")

    with session_scope(session_factory) as db:
        present = set(db.scalars(select(Vehicle.model_name)))
        for data in SAMPLE_VEHICLES:
            if data["model_name"] in present:
                print(f"    ⏭️  Vehicle '{data['model_name']}' already exists")
                continue
            vehicle = Vehicle(
                model_name=data["model_name"],
                color=data["color"],
                min_capacity=data["min_capacity"],
                daily_price=data["daily_price"],
                v_type=type_ids[data["type"]],
            )
            db.add(vehicle)
            db.flush()
            print(f"    ✅ {vehicle}")

    print("✅ Sample data seeded")


def count_rows(session_factory) -> Dict[str, int]:
    """Row count per table."""
    with session_scope(session_factory) as db:
        return {
            model.__tablename__: db.scalar(select(func.count()).select_from(model))
            for model in (User, VehicleType, Vehicle, TransactionHistory)
        }


def print_database_status(session_factory) -> None:
    """Print current database status and counts."""
    print("\n" + "=" * 60)
    print("📊 Database Status")
    print("=" * 60)

    for table, count in count_rows(session_factory).items():
        print(f"  {table:<20} {count}")

    print("=" * 60)


def initialize_database(engine: Engine, reset: bool = False, sample_data: bool = False) -> None:
    """
    Initialize the database.

    Args:
        engine: Target engine
        reset: Drop existing tables before creating
        sample_data: Add sample vehicles for testing
    """
    print("=" * 60)
    print("🗄️  Database Initialization")
    print("=" * 60)

    session_factory = create_session_factory(engine)

    # Step 1: Create tables
    create_tables(engine, reset=reset)

    # Step 2: Seed vehicle types (always)
    type_ids = seed_vehicle_types(session_factory)

    # Step 3: Seed sample data (optional)
    if sample_data:
        seed_sample_data(session_factory, type_ids)

    # Step 4: Show status
    print_database_status(session_factory)

    print("\n✅ Database initialization complete!")


def main():
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Initialize and seed the vehicle rental database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create tables and vehicle types
  python -m rental.database.init_db

  # Reset database (drop all tables and recreate)
  python -m rental.database.init_db --reset

  # Full reset with sample vehicles
  python -m rental.database.init_db --reset --sample-data
        """
    )

    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop existing tables before creating (WARNING: deletes all data!)"
    )

    parser.add_argument(
        "--sample-data",
        action="store_true",
        help="Add sample vehicles for development/testing"
    )

    parser.add_argument(
        "--show-settings",
        action="store_true",
        help="Print the effective connection settings first"
    )

    args = parser.parse_args()
    configure_logging()

    if args.show_settings:
        print_settings()

    # Confirm reset if requested
    if args.reset:
        print("⚠️  WARNING: This will DELETE ALL DATA in the database!")
        response = input("Are you sure? Type 'yes' to continue: ")
        if response.lower() != 'yes':
            print("❌ Aborted")
            return

    engine = create_db_engine()
    logger.info("Initializing database at %s", engine.url.render_as_string(hide_password=True))
    initialize_database(engine, reset=args.reset, sample_data=args.sample_data)


if __name__ == "__main__":
    main()
