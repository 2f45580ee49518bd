"""Entity: Product."""

from decimal import Decimal
from typing import Any

from pydantic import Field

from src.ecom.entities._base import Entity


class Product(Entity):
    """Product entity representing an item in the catalog.

    A product is never removed; ``active`` is cleared instead so orders and
    carts that reference it stay valid.
    """

    name: str | None = Field(default=None, description="Product name")
    description: str | None = Field(default=None, description="Product description")
    price: Decimal | None = Field(default=None, description="Unit price")
    stock_quantity: int | None = Field(default=None, description="Units in stock")
    category: str | None = Field(default=None, description="Catalog category")
    image_url: str | None = Field(default=None, description="Product image URL")
    active: bool = Field(default=True, description="False once the product is soft deleted")

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.price == other.price
            and self.stock_quantity == other.stock_quantity
            and self.category == other.category
            and self.image_url == other.image_url
            and self.active == other.active
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.price,
            self.active,
        ))
