"""Mapping between orders and their response shape."""

from src.ecom.entities.order.dto import OrderItemDTO, OrderResponse
from src.ecom.entities.order.entity import Order


class OrderMapper:
    @staticmethod
    def to_response(order: Order) -> OrderResponse:
        if order is None:
            raise TypeError("order must not be None")
        return OrderResponse(
            id=order.id,
            user_id=order.user_id,
            status=order.status,
            total_amount=order.total_amount,
            items=[
                OrderItemDTO.model_validate(item, from_attributes=True)
                for item in order.items
            ],
            created_at=order.created_at,
        )
