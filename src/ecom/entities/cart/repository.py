"""Data-access layer for cart items."""

from sqlmodel import Session, col, select

from src.ecom.entities._base import utc_now
from src.ecom.entities.cart.entity import CartItem
from src.ecom.entities.cart.table import CartItemTable


class CartItemRepository:
    """Data-access layer for cart items."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_user_and_product(self, user_id: str, product_id: str) -> CartItem | None:
        statement = select(CartItemTable).where(
            (CartItemTable.user_id == user_id) & (CartItemTable.product_id == product_id)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return CartItem.model_validate(row, from_attributes=True)

    def list_by_user(self, user_id: str) -> list[CartItem]:
        statement = (
            select(CartItemTable)
            .where(CartItemTable.user_id == user_id)
            .order_by(col(CartItemTable.created_at))
        )
        rows = self._session.exec(statement).all()
        return [CartItem.model_validate(row, from_attributes=True) for row in rows]

    def save(self, item: CartItem) -> CartItem:
        """Insert the item, or overwrite the stored row with the same id."""
        row = self._session.get(CartItemTable, item.id)
        if row is None:
            row = CartItemTable.model_validate(item, from_attributes=True)
            self._session.add(row)
        else:
            row.quantity = item.quantity
            row.price = item.price
            row.updated_at = utc_now()
        self._session.flush()
        self._session.refresh(row)
        return CartItem.model_validate(row, from_attributes=True)

    def delete(self, item_id: str) -> bool:
        row = self._session.get(CartItemTable, item_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def delete_by_user(self, user_id: str) -> int:
        """Delete every cart row of ``user_id`` and return how many were removed."""
        statement = select(CartItemTable).where(CartItemTable.user_id == user_id)
        rows = self._session.exec(statement).all()
        for row in rows:
            self._session.delete(row)
        self._session.flush()
        return len(rows)
