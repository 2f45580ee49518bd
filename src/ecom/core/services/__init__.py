"""Core services exports."""

from .cart_service import CartService
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .order_service import OrderService
from .product_service import ProductService
from .user_service import UserService

__all__ = [
    "CartService",
    "DbManageService",
    "DbSessionService",
    "OrderService",
    "ProductService",
    "UserService",
]
