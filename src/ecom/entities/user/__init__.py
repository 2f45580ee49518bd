"""User entity module.

This module contains all User-related classes organized by responsibility:
- User, Address, UserRole: Domain entities
- UserTable, AddressTable: Database persistence models
- UserRepository: Data access layer
- UserRequest, UserResponse, AddressDTO: Request and response shapes
- UserMapper: Conversion between the shapes above
"""

from .dto import AddressDTO, UserRequest, UserResponse
from .entity import Address, User, UserRole
from .mapper import UserMapper
from .repository import UserRepository
from .table import AddressTable, UserTable

__all__ = [
    "Address",
    "AddressDTO",
    "AddressTable",
    "User",
    "UserMapper",
    "UserRepository",
    "UserRequest",
    "UserResponse",
    "UserRole",
    "UserTable",
]
