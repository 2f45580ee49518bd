"""Mapping between user requests, entities and responses."""

from src.ecom.entities.user.dto import AddressDTO, UserRequest, UserResponse
from src.ecom.entities.user.entity import Address, User, UserRole

_SCALAR_FIELDS = ("first_name", "last_name", "email", "phone", "role")


class UserMapper:
    @staticmethod
    def to_address(dto: AddressDTO, existing: Address | None = None) -> Address:
        """Build an address from ``dto``, keeping the stored address id if any.

        Every address field is replaced; fields missing from the DTO become None.
        """
        return Address(
            id=existing.id if existing is not None else None,
            **dto.model_dump(),
        )

    @staticmethod
    def to_entity(request: UserRequest, user: User | None = None) -> User:
        """Copy every request field onto ``user`` (or a fresh one)."""
        if request is None:
            raise TypeError("user request must not be None")
        user = user if user is not None else User()
        for field_name in _SCALAR_FIELDS:
            setattr(user, field_name, getattr(request, field_name))
        if user.role is None:
            user.role = UserRole.CUSTOMER
        user.address = (
            UserMapper.to_address(request.address, user.address)
            if request.address is not None
            else None
        )
        return user

    @staticmethod
    def apply_update(request: UserRequest, user: User) -> User:
        """Overwrite only the fields present (not None) in ``request``.

        A missing address leaves the stored address untouched.
        """
        if request is None:
            raise TypeError("user request must not be None")
        for field_name in _SCALAR_FIELDS:
            value = getattr(request, field_name)
            if value is not None:
                setattr(user, field_name, value)
        if request.address is not None:
            user.address = UserMapper.to_address(request.address, user.address)
        return user

    @staticmethod
    def to_response(user: User) -> UserResponse:
        if user is None:
            raise TypeError("user must not be None")
        return UserResponse(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            phone=user.phone,
            role=user.role,
            active=user.active,
            address=(
                AddressDTO.model_validate(user.address, from_attributes=True)
                if user.address is not None
                else None
            ),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
