"""Order database table models."""

from decimal import Decimal

from sqlalchemy import Column, Enum as SAEnum
from sqlmodel import Field

from src.ecom.entities._base import EntityTable
from src.ecom.entities.order.entity import OrderStatus


class OrderTable(EntityTable, table=True):
    """Database persistence model for orders."""

    user_id: str = Field(index=True)
    status: OrderStatus = Field(
        default=OrderStatus.PENDING,
        sa_column=Column(SAEnum(OrderStatus), nullable=False),
    )
    total_amount: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)


class OrderItemTable(EntityTable, table=True):
    """Database persistence model for order items."""

    order_id: str = Field(foreign_key="ordertable.id", index=True, ondelete="CASCADE")
    position: int = Field(default=0, description="Position of the item within its order")
    product_id: str
    quantity: int
    price: Decimal = Field(max_digits=12, decimal_places=2)
    subtotal: Decimal = Field(max_digits=12, decimal_places=2)
