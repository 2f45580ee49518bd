"""Mapping between product requests, entities and responses."""

from src.ecom.entities.product.dto import ProductRequest, ProductResponse
from src.ecom.entities.product.entity import Product

# Fields a request may set; id, active and the audit timestamps are owned by the service
_REQUEST_FIELDS = (
    "name",
    "description",
    "price",
    "stock_quantity",
    "category",
    "image_url",
)


class ProductMapper:
    @staticmethod
    def to_entity(request: ProductRequest, product: Product | None = None) -> Product:
        """Copy every request field onto ``product`` (or a fresh one)."""
        if request is None:
            raise TypeError("product request must not be None")
        product = product if product is not None else Product()
        for field_name in _REQUEST_FIELDS:
            setattr(product, field_name, getattr(request, field_name))
        return product

    @staticmethod
    def to_response(product: Product) -> ProductResponse:
        if product is None:
            raise TypeError("product must not be None")
        return ProductResponse.model_validate(product, from_attributes=True)
