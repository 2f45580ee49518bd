"""Request and response shapes for products."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class ProductRequest(BaseModel):
    name: str | None = None
    description: str | None = None
    # Same precision as ProductTable.price
    price: Decimal | None = Field(default=None, max_digits=12, decimal_places=2)
    stock_quantity: int | None = None
    category: str | None = None
    image_url: str | None = None


class ProductResponse(BaseModel):
    id: str
    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    stock_quantity: int | None = None
    category: str | None = None
    image_url: str | None = None
    active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
