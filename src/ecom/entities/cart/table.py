"""CartItem database table model."""

from decimal import Decimal

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from src.ecom.entities._base import EntityTable


class CartItemTable(EntityTable, table=True):
    """Database persistence model for cart items."""

    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_cart_user_product"),
    )

    user_id: str = Field(index=True)
    product_id: str = Field(index=True)
    quantity: int = 0
    price: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
