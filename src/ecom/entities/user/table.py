"""User database table models."""

from sqlalchemy import Column, Enum as SAEnum
from sqlmodel import Field

from src.ecom.entities._base import EntityTable
from src.ecom.entities.user.entity import UserRole


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = Field(default=None, index=True)
    phone: str | None = None
    role: UserRole = Field(
        default=UserRole.CUSTOMER,
        sa_column=Column(SAEnum(UserRole), nullable=False),
    )
    active: bool = Field(default=True, index=True)


class AddressTable(EntityTable, table=True):
    """Database persistence model for addresses, one row per owning user."""

    user_id: str = Field(foreign_key="usertable.id", unique=True, index=True)
    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zipcode: str | None = None
