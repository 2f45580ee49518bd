"""Request and response shapes for users."""

from datetime import datetime

from pydantic import BaseModel

from src.ecom.entities.user.entity import UserRole


class AddressDTO(BaseModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zipcode: str | None = None


class UserRequest(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    role: UserRole | None = None
    address: AddressDTO | None = None


class UserResponse(BaseModel):
    id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    role: UserRole
    active: bool
    address: AddressDTO | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
