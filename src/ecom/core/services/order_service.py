from loguru import logger
from sqlmodel import Session

from src.ecom.core.models.result import ServiceResult
from src.ecom.entities.cart import CartItemRepository
from src.ecom.entities.order import (
    Order,
    OrderItem,
    OrderMapper,
    OrderRepository,
    OrderResponse,
    OrderStatus,
)
from src.ecom.entities.order.entity import to_money
from src.ecom.entities.user import UserRepository
from src.ecom.runtime.config.config_data import CartConfig
from src.ecom.runtime.context import get_config


class OrderService:
    def __init__(self, db_session: Session, config: CartConfig | None = None):
        self._db_session = db_session
        self._config = config or get_config().cart
        self._order_repo = OrderRepository(db_session)
        self._cart_repo = CartItemRepository(db_session)
        self._user_repo = UserRepository(db_session)

    def place_order(self, user_id: str) -> ServiceResult[OrderResponse]:
        """Turn the user's cart into a confirmed order and empty the cart.

        Each cart row is frozen into an order item carrying its unit price and
        subtotal. The order, its items and the cart removal commit together.
        """
        if self._config.require_known_user and not self._user_repo.exists_active(user_id):
            return ServiceResult.not_found(f"User not found with id: {user_id}")

        cart_items = self._cart_repo.list_by_user(user_id)
        if not cart_items:
            return ServiceResult.invalid(f"Cart of user {user_id} is empty")

        items = [
            OrderItem(
                product_id=cart_item.product_id,
                quantity=cart_item.quantity,
                price=to_money(cart_item.price),
            )
            for cart_item in cart_items
        ]
        order = Order.from_items(user_id, items, status=OrderStatus.CONFIRMED)

        saved = self._order_repo.save(order)
        self._cart_repo.delete_by_user(user_id)
        self._db_session.commit()
        logger.info(
            "Placed order {} for user {}: {} item(s), total {}",
            saved.id,
            user_id,
            len(saved.items),
            saved.total_amount,
        )
        return ServiceResult.success(OrderMapper.to_response(saved))

    def get_order(self, order_id: str) -> ServiceResult[OrderResponse]:
        order = self._order_repo.get(order_id)
        if order is None:
            return ServiceResult.not_found(f"Order not found with id: {order_id}")
        return ServiceResult.success(OrderMapper.to_response(order))

    def list_orders(self, user_id: str) -> list[OrderResponse]:
        return [OrderMapper.to_response(o) for o in self._order_repo.list_by_user(user_id)]
