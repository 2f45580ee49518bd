"""Entity package: Order and OrderItem."""

from .dto import OrderItemDTO, OrderResponse
from .entity import Order, OrderItem, OrderStatus
from .mapper import OrderMapper
from .repository import OrderRepository
from .table import OrderItemTable, OrderTable

__all__ = [
    "Order",
    "OrderItem",
    "OrderItemDTO",
    "OrderItemTable",
    "OrderMapper",
    "OrderRepository",
    "OrderResponse",
    "OrderStatus",
    "OrderTable",
]
