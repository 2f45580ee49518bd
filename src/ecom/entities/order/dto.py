"""Request and response shapes for orders."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from src.ecom.entities.order.entity import OrderStatus


class OrderItemDTO(BaseModel):
    id: str
    product_id: str
    quantity: int
    price: Decimal
    subtotal: Decimal


class OrderResponse(BaseModel):
    id: str
    user_id: str
    status: OrderStatus
    total_amount: Decimal
    items: list[OrderItemDTO]
    created_at: datetime | None = None
