"""Data-access layer for orders."""

from sqlmodel import Session, col, select

from src.ecom.entities._base import utc_now
from src.ecom.entities.order.entity import Order, OrderItem
from src.ecom.entities.order.table import OrderItemTable, OrderTable


class OrderRepository:
    """Data-access layer for orders and the items they own."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _item_rows(self, order_id: str) -> list[OrderItemTable]:
        statement = (
            select(OrderItemTable)
            .where(OrderItemTable.order_id == order_id)
            .order_by(col(OrderItemTable.position))
        )
        return list(self._session.exec(statement).all())

    def _to_entity(self, row: OrderTable) -> Order:
        order = Order.model_validate(row, from_attributes=True)
        order.items = [
            OrderItem.model_validate(item_row, from_attributes=True)
            for item_row in self._item_rows(row.id)
        ]
        return order

    def get(self, order_id: str | None) -> Order | None:
        if order_id is None:
            return None
        row = self._session.get(OrderTable, order_id)
        if row is None:
            return None
        return self._to_entity(row)

    def list_by_user(self, user_id: str) -> list[Order]:
        statement = (
            select(OrderTable)
            .where(OrderTable.user_id == user_id)
            .order_by(col(OrderTable.created_at))
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def save(self, order: Order) -> Order:
        """Insert the order with its items, or update the stored order's status."""
        row = self._session.get(OrderTable, order.id)
        if row is None:
            row = OrderTable.model_validate(order, from_attributes=True)
            self._session.add(row)
            self._session.flush()
            for position, item in enumerate(order.items):
                item_row = OrderItemTable.model_validate(
                    item, from_attributes=True, update={"order_id": order.id, "position": position}
                )
                self._session.add(item_row)
        else:
            # Items are a frozen snapshot; only the order header changes
            row.status = order.status
            row.updated_at = utc_now()
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, order_id: str) -> bool:
        row = self._session.get(OrderTable, order_id)
        if row is None:
            return False
        for item_row in self._item_rows(order_id):
            self._session.delete(item_row)
        self._session.delete(row)
        self._session.flush()
        return True
