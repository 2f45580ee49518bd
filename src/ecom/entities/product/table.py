"""Product database table model."""

from decimal import Decimal

from sqlmodel import Field

from src.ecom.entities._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products."""

    name: str | None = Field(default=None, index=True)
    description: str | None = None
    price: Decimal | None = Field(default=None, max_digits=12, decimal_places=2)
    stock_quantity: int | None = None
    category: str | None = Field(default=None, index=True)
    image_url: str | None = None
    active: bool = Field(default=True, index=True)
