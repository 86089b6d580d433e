"""
User model.

A User is a renter. Ids are assigned by the database on insert.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from rental.models.base import Base


class User(Base):
    """
    Rental customer.

    Attributes:
        id: Auto-incrementing primary key
        timestamp: When the row was inserted (server default)
        first_name: Given name
        last_name: Family name
        email: Contact email
        phone_num: Contact phone number
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_num: Mapped[str] = mapped_column(String(32), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name='{self.first_name} {self.last_name}')>"
