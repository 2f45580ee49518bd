from decimal import Decimal

from loguru import logger
from sqlmodel import Session

from src.ecom.core.models.result import ServiceResult
from src.ecom.entities.cart import (
    CartItem,
    CartItemMapper,
    CartItemRepository,
    CartItemRequest,
    CartItemResponse,
)
from src.ecom.entities.product import ProductRepository
from src.ecom.entities.user import UserRepository
from src.ecom.runtime.config.config_data import CartConfig
from src.ecom.runtime.context import get_config


class CartService:
    """Cart operations keyed by (user_id, product_id).

    Adding a product that is already in the cart increments its quantity
    instead of creating a second row. The unit price is read from the
    catalog on every add.
    """

    def __init__(self, db_session: Session, config: CartConfig | None = None):
        self._db_session = db_session
        self._config = config or get_config().cart
        self._cart_repo = CartItemRepository(db_session)
        self._product_repo = ProductRepository(db_session)
        self._user_repo = UserRepository(db_session)

    def add_to_cart(self, user_id: str, request: CartItemRequest) -> ServiceResult[CartItemResponse]:
        if request is None:
            raise TypeError("cart item request must not be None")
        if request.quantity <= 0:
            return ServiceResult.invalid(f"Quantity must be positive, got {request.quantity}")

        if self._config.require_known_user and not self._user_repo.exists_active(user_id):
            return ServiceResult.not_found(f"User not found with id: {user_id}")

        product = self._product_repo.get(request.product_id)
        if product is None or not product.active:
            return ServiceResult.not_found(f"Product not found with id: {request.product_id}")

        item = self._cart_repo.get_by_user_and_product(user_id, request.product_id)
        new_quantity = request.quantity + (item.quantity if item is not None else 0)

        if self._config.enforce_stock and new_quantity > (product.stock_quantity or 0):
            logger.debug(
                "Rejected cart add for user {}: {} units of {} requested, {} in stock",
                user_id,
                new_quantity,
                product.id,
                product.stock_quantity,
            )
            return ServiceResult.invalid(
                f"Insufficient stock for product {product.id}: "
                f"requested {new_quantity}, available {product.stock_quantity or 0}"
            )

        price = product.price if product.price is not None else Decimal("0")
        if item is None:
            item = CartItem(
                user_id=user_id,
                product_id=request.product_id,
                quantity=request.quantity,
                price=price,
            )
        else:
            item.quantity = new_quantity
            item.price = price

        saved = self._cart_repo.save(item)
        self._db_session.commit()
        logger.info(
            "Cart of user {} now holds {} × {}", user_id, saved.quantity, saved.product_id
        )
        return ServiceResult.success(CartItemMapper.to_response(saved))

    def remove_from_cart(self, user_id: str, product_id: str) -> ServiceResult[None]:
        item = self._cart_repo.get_by_user_and_product(user_id, product_id)
        if item is None:
            return ServiceResult.not_found(
                f"Product {product_id} is not in the cart of user {user_id}"
            )

        self._cart_repo.delete(item.id)
        self._db_session.commit()
        logger.info("Removed product {} from cart of user {}", product_id, user_id)
        return ServiceResult.success()

    def get_cart(self, user_id: str) -> list[CartItemResponse]:
        return [CartItemMapper.to_response(i) for i in self._cart_repo.list_by_user(user_id)]

    def cart_total(self, user_id: str) -> Decimal:
        return sum(
            (item.subtotal for item in self._cart_repo.list_by_user(user_id)),
            Decimal("0"),
        )

    def clear_cart(self, user_id: str) -> int:
        removed = self._cart_repo.delete_by_user(user_id)
        self._db_session.commit()
        logger.info("Cleared {} item(s) from cart of user {}", removed, user_id)
        return removed
