"""Entity: Order."""

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

from pydantic import Field, model_validator

from src.ecom.entities._base import Entity

CENT = Decimal("0.01")


def to_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class OrderItem(Entity):
    """Snapshot of one product line at the time the order was placed."""

    product_id: str = Field(description="Ordered product")
    quantity: int = Field(gt=0, description="Number of units")
    price: Decimal = Field(description="Unit price when the order was placed")
    subtotal: Decimal | None = Field(
        default=None, description="quantity × price; computed when omitted"
    )

    @model_validator(mode="after")
    def check_subtotal(self) -> "OrderItem":
        expected = to_money(self.price * self.quantity)
        if self.subtotal is None:
            self.subtotal = expected
        elif to_money(self.subtotal) != expected:
            raise ValueError(
                f"subtotal {self.subtotal} does not match quantity {self.quantity} "
                f"× price {self.price}"
            )
        return self


class Order(Entity):
    """An order owns an ordered collection of items."""

    user_id: str = Field(description="Customer who placed the order")
    status: OrderStatus = Field(default=OrderStatus.PENDING, description="Order status")
    items: list[OrderItem] = Field(default_factory=list, description="Ordered lines")
    total_amount: Decimal = Field(default=Decimal("0"), description="Sum of item subtotals")

    @classmethod
    def from_items(cls, user_id: str, items: list[OrderItem], **kwargs: Any) -> "Order":
        total = sum((item.subtotal for item in items), Decimal("0"))
        return cls(user_id=user_id, items=items, total_amount=to_money(total), **kwargs)

    def __eq__(self, other: Any) -> bool:
        """Compare orders by business attributes, ignoring timestamps."""
        if not isinstance(other, Order):
            return False

        return (
            self.id == other.id
            and self.user_id == other.user_id
            and self.status == other.status
            and self.total_amount == other.total_amount
            and [item.id for item in self.items] == [item.id for item in other.items]
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.user_id,
            self.status,
        ))
