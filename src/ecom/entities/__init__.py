"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
- dto.py: Request and response shapes
- mapper.py: Conversion between the shapes above
"""

from .cart import CartItem, CartItemRepository, CartItemTable
from .order import Order, OrderItem, OrderItemTable, OrderRepository, OrderTable
from .product import Product, ProductRepository, ProductTable
from .user import Address, AddressTable, User, UserRepository, UserTable

__all__ = [
    "Address",
    "AddressTable",
    "CartItem",
    "CartItemRepository",
    "CartItemTable",
    "Order",
    "OrderItem",
    "OrderItemTable",
    "OrderRepository",
    "OrderTable",
    "Product",
    "ProductRepository",
    "ProductTable",
    "User",
    "UserRepository",
    "UserTable",
]
