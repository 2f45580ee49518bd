"""Data-access layer for users and their addresses."""

from sqlalchemy import func, or_
from sqlmodel import Session, col, select

from src.ecom.entities._base import utc_now
from src.ecom.entities.user.entity import Address, User
from src.ecom.entities.user.table import AddressTable, UserTable

_ADDRESS_FIELDS = ("street", "city", "state", "country", "zipcode")


class UserRepository:
    """Data-access layer for users.

    The address is stored in its own table keyed by the owning user and is
    read and written together with the user.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _address_row(self, user_id: str) -> AddressTable | None:
        statement = select(AddressTable).where(AddressTable.user_id == user_id)
        return self._session.exec(statement).first()

    def _to_entity(self, row: UserTable) -> User:
        user = User.model_validate(row, from_attributes=True)
        address_row = self._address_row(row.id)
        if address_row is not None:
            user.address = Address.model_validate(address_row, from_attributes=True)
        return user

    def get(self, user_id: str | None) -> User | None:
        if user_id is None:
            return None
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return self._to_entity(row)

    def exists_active(self, user_id: str | None) -> bool:
        """True only for a stored user that has not been soft deleted."""
        if user_id is None:
            return False
        row = self._session.get(UserTable, user_id)
        return row is not None and row.active

    def list_all(self) -> list[User]:
        statement = select(UserTable).order_by(col(UserTable.created_at))
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def list_active(self) -> list[User]:
        statement = (
            select(UserTable)
            .where(col(UserTable.active).is_(True))
            .order_by(col(UserTable.created_at))
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def search(self, keyword: str | None) -> list[User]:
        """Active users whose first name, last name or email contains ``keyword``."""
        if keyword is None:
            return []
        pattern = f"%{keyword.lower()}%"
        statement = (
            select(UserTable)
            .where(col(UserTable.active).is_(True))
            .where(
                or_(
                    func.lower(col(UserTable.first_name)).like(pattern),
                    func.lower(col(UserTable.last_name)).like(pattern),
                    func.lower(col(UserTable.email)).like(pattern),
                )
            )
            .order_by(col(UserTable.created_at))
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def save(self, user: User) -> User:
        """Insert the user, or overwrite the stored row with the same id.

        A user without an address keeps whatever address row is stored.
        """
        row = self._session.get(UserTable, user.id)
        if row is None:
            row = UserTable.model_validate(user, from_attributes=True)
            self._session.add(row)
        else:
            row.sqlmodel_update(user.model_dump(exclude={"id", "created_at", "address"}))
            row.updated_at = utc_now()
        self._session.flush()

        if user.address is not None:
            self._save_address(user.id, user.address)

        self._session.refresh(row)
        return self._to_entity(row)

    def _save_address(self, user_id: str, address: Address) -> None:
        values = {name: getattr(address, name) for name in _ADDRESS_FIELDS}
        address_row = self._address_row(user_id)
        if address_row is None:
            self._session.add(AddressTable(user_id=user_id, **values))
        else:
            address_row.sqlmodel_update(values)
            address_row.updated_at = utc_now()
        self._session.flush()
