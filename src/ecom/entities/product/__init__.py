"""Entity package: Product."""

from .dto import ProductRequest, ProductResponse
from .entity import Product
from .mapper import ProductMapper
from .repository import ProductRepository
from .table import ProductTable

__all__ = [
    "Product",
    "ProductMapper",
    "ProductRepository",
    "ProductRequest",
    "ProductResponse",
    "ProductTable",
]
