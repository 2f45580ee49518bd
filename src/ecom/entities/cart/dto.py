"""Request and response shapes for cart items."""

from decimal import Decimal

from pydantic import BaseModel


class CartItemRequest(BaseModel):
    product_id: str
    quantity: int = 1


class CartItemResponse(BaseModel):
    id: str
    user_id: str
    product_id: str
    quantity: int
    price: Decimal
    subtotal: Decimal
