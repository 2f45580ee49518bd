"""Tests for OrderService."""

from decimal import Decimal

import pytest
from sqlmodel import Session

from src.ecom.core.services.cart_service import CartService
from src.ecom.core.services.order_service import OrderService
from src.ecom.core.services.product_service import ProductService
from src.ecom.core.services.user_service import UserService
from src.ecom.entities.cart import CartItemRequest
from src.ecom.entities.order import OrderStatus
from src.ecom.entities.product import ProductRepository, ProductResponse
from src.ecom.entities.user import UserResponse
from src.ecom.runtime.config.config_data import CartConfig
from tests.fixtures.dummies import make_product_request


@pytest.fixture
def service(session: Session, cart_config: CartConfig) -> OrderService:
    return OrderService(session, cart_config)


@pytest.fixture
def cart_service(session: Session, cart_config: CartConfig) -> CartService:
    return CartService(session, cart_config)


@pytest.fixture
def filled_cart(
    cart_service: CartService,
    saved_user: UserResponse,
    saved_product: ProductResponse,
    second_product: ProductResponse,
) -> str:
    cart_service.add_to_cart(saved_user.id, CartItemRequest(product_id=saved_product.id, quantity=2))
    cart_service.add_to_cart(saved_user.id, CartItemRequest(product_id=second_product.id, quantity=1))
    return saved_user.id


class TestPlaceOrder:
    def test_place_order(self, service: OrderService, filled_cart: str, saved_product: ProductResponse):
        result = service.place_order(filled_cart)

        assert result.ok
        order = result.value
        assert order.user_id == filled_cart
        assert order.status == OrderStatus.CONFIRMED
        assert order.total_amount == Decimal("45.48")
        assert len(order.items) == 2
        first = next(i for i in order.items if i.product_id == saved_product.id)
        assert first.quantity == 2
        assert first.price == Decimal("19.99")
        assert first.subtotal == Decimal("39.98")

    def test_place_order_empties_cart(
        self, service: OrderService, cart_service: CartService, filled_cart: str
    ):
        service.place_order(filled_cart)

        assert cart_service.get_cart(filled_cart) == []

    def test_price_is_frozen_at_order_time(
        self,
        service: OrderService,
        session: Session,
        filled_cart: str,
        saved_product: ProductResponse,
    ):
        order = service.place_order(filled_cart).value
        ProductService(session).update(saved_product.id, make_product_request(price=Decimal("1.00")))

        stored = service.get_order(order.id).value

        assert stored.total_amount == Decimal("45.48")

    def test_stock_is_not_decremented(
        self, service: OrderService, session: Session, filled_cart: str, saved_product: ProductResponse
    ):
        service.place_order(filled_cart)

        assert ProductRepository(session).get(saved_product.id).stock_quantity == 10

    def test_empty_cart_is_invalid(self, service: OrderService, saved_user: UserResponse):
        result = service.place_order(saved_user.id)

        assert result.is_invalid
        assert service.list_orders(saved_user.id) == []

    def test_unknown_user(self, service: OrderService):
        assert service.place_order("nobody").is_not_found

    def test_deactivated_user_cannot_order(
        self, service: OrderService, cart_service: CartService, session: Session, filled_cart: str
    ):
        UserService(session).soft_delete(filled_cart)

        result = service.place_order(filled_cart)

        assert result.is_not_found
        assert service.list_orders(filled_cart) == []
        assert len(cart_service.get_cart(filled_cart)) == 2


class TestQueries:
    def test_get_order(self, service: OrderService, filled_cart: str):
        placed = service.place_order(filled_cart).value

        result = service.get_order(placed.id)

        assert result.ok
        assert result.value.id == placed.id
        assert [i.id for i in result.value.items] == [i.id for i in placed.items]

    def test_get_missing_order(self, service: OrderService):
        assert service.get_order("missing").is_not_found

    def test_list_orders(
        self,
        service: OrderService,
        cart_service: CartService,
        filled_cart: str,
        saved_product: ProductResponse,
    ):
        first = service.place_order(filled_cart).value
        cart_service.add_to_cart(filled_cart, CartItemRequest(product_id=saved_product.id))
        second = service.place_order(filled_cart).value

        assert [o.id for o in service.list_orders(filled_cart)] == [first.id, second.id]
        assert service.list_orders("nobody") == []
