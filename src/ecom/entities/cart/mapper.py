"""Mapping between cart items and their response shape."""

from src.ecom.entities.cart.dto import CartItemResponse
from src.ecom.entities.cart.entity import CartItem


class CartItemMapper:
    @staticmethod
    def to_response(item: CartItem) -> CartItemResponse:
        if item is None:
            raise TypeError("cart item must not be None")
        return CartItemResponse(
            id=item.id,
            user_id=item.user_id,
            product_id=item.product_id,
            quantity=item.quantity,
            price=item.price,
            subtotal=item.subtotal,
        )
