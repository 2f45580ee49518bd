from loguru import logger
from sqlmodel import Session

from src.ecom.core.models.result import ServiceResult
from src.ecom.entities.product import (
    ProductMapper,
    ProductRepository,
    ProductRequest,
    ProductResponse,
)


class ProductService:
    """Catalog operations over the product repository.

    Products are never hard deleted: ``soft_delete`` clears the ``active``
    flag, and inactive products are hidden from ``get_by_id``, ``list_active``
    and ``search``.
    """

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._product_repo = ProductRepository(db_session)

    def create(self, request: ProductRequest) -> ProductResponse:
        """Create an active product from ``request``. No duplicate check is made."""
        product = ProductMapper.to_entity(request)
        product.active = True
        saved = self._product_repo.save(product)
        self._db_session.commit()
        logger.info("Created product {} ({})", saved.id, saved.name)
        return ProductMapper.to_response(saved)

    def update(self, product_id: str, request: ProductRequest) -> ServiceResult[ProductResponse]:
        """Overwrite every request field on an existing product."""
        product = self._product_repo.get(product_id)
        if product is None:
            logger.debug("Product {} not found for update", product_id)
            return ServiceResult.not_found(f"Product not found with id: {product_id}")

        ProductMapper.to_entity(request, product)
        saved = self._product_repo.save(product)
        self._db_session.commit()
        logger.info("Updated product {}", saved.id)
        return ServiceResult.success(ProductMapper.to_response(saved))

    def get_by_id(self, product_id: str) -> ServiceResult[ProductResponse]:
        product = self._product_repo.get(product_id)
        if product is None or not product.active:
            return ServiceResult.not_found(f"Product not found with id: {product_id}")
        return ServiceResult.success(ProductMapper.to_response(product))

    def list_active(self) -> list[ProductResponse]:
        return [ProductMapper.to_response(p) for p in self._product_repo.list_active()]

    def soft_delete(self, product_id: str) -> ServiceResult[None]:
        """Mark the product inactive. Deleting an inactive product succeeds again."""
        product = self._product_repo.get(product_id)
        if product is None:
            return ServiceResult.not_found(f"Product not found with id: {product_id}")

        product.active = False
        self._product_repo.save(product)
        self._db_session.commit()
        logger.info("Deactivated product {}", product_id)
        return ServiceResult.success()

    def search(self, keyword: str | None) -> list[ProductResponse]:
        """Search active products; the keyword is passed to the repository as is."""
        return [ProductMapper.to_response(p) for p in self._product_repo.search(keyword)]
