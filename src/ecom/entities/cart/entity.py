"""Entity: CartItem."""

from decimal import Decimal
from typing import Any

from pydantic import Field

from src.ecom.entities._base import Entity


class CartItem(Entity):
    """One product line in a user's cart.

    A cart holds at most one item per (user_id, product_id) pair.
    """

    user_id: str = Field(description="Owner of the cart")
    product_id: str = Field(description="Product in the cart")
    quantity: int = Field(default=0, description="Number of units")
    price: Decimal = Field(default=Decimal("0"), description="Unit price at the last add")

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity

    def __eq__(self, other: Any) -> bool:
        """Compare cart items by business attributes, ignoring timestamps."""
        if not isinstance(other, CartItem):
            return False

        return (
            self.id == other.id
            and self.user_id == other.user_id
            and self.product_id == other.product_id
            and self.quantity == other.quantity
            and self.price == other.price
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.user_id,
            self.product_id,
        ))
