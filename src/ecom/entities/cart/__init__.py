"""Entity package: CartItem."""

from .dto import CartItemRequest, CartItemResponse
from .entity import CartItem
from .mapper import CartItemMapper
from .repository import CartItemRepository
from .table import CartItemTable

__all__ = [
    "CartItem",
    "CartItemMapper",
    "CartItemRepository",
    "CartItemRequest",
    "CartItemResponse",
    "CartItemTable",
]
