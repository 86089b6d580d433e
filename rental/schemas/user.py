from typing import Optional

from pydantic import BaseModel, Field

from rental.models.user import User


class UserRecord(BaseModel):
    """Schema for a user row. id is None until the database assigns one."""
    id: Optional[int] = Field(None, description="Database-assigned user id")
    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    email: str = Field(..., description="Contact email")
    phone_number: str = Field(..., description="Contact phone number")

    @classmethod
    def from_row(cls, row: User) -> "UserRecord":
        return cls(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            phone_number=row.phone_num,
        )
