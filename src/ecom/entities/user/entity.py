"""User domain entity."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from src.ecom.entities._base import Entity


class UserRole(str, Enum):
    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


class Address(BaseModel):
    """Postal address owned by exactly one user."""

    id: str | None = Field(default=None, description="Identifier of the stored address")
    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zipcode: str | None = None


class User(Entity):
    """User entity representing a customer or administrator."""

    first_name: str | None = Field(default=None, description="User's first name")
    last_name: str | None = Field(default=None, description="User's last name")
    email: str | None = Field(default=None, description="User's email address")
    phone: str | None = Field(default=None, description="User's phone number")
    role: UserRole = Field(default=UserRole.CUSTOMER, description="User's role")
    active: bool = Field(default=True, description="False once the user is soft deleted")
    address: Address | None = Field(default=None, description="User's address")

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.email == other.email
            and self.phone == other.phone
            and self.role == other.role
            and self.active == other.active
            and self.address == other.address
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.first_name,
            self.last_name,
            self.email,
            self.phone,
            self.role,
        ))
