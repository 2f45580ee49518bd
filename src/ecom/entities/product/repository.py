"""Data-access layer for products."""

from sqlalchemy import func, or_
from sqlmodel import Session, col, select

from src.ecom.entities._base import utc_now
from src.ecom.entities.product.entity import Product
from src.ecom.entities.product.table import ProductTable


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, product_id: str | None) -> Product | None:
        if product_id is None:
            return None
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def list_all(self) -> list[Product]:
        statement = select(ProductTable).order_by(col(ProductTable.created_at))
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def list_active(self) -> list[Product]:
        statement = (
            select(ProductTable)
            .where(col(ProductTable.active).is_(True))
            .order_by(col(ProductTable.created_at))
        )
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def search(self, keyword: str | None) -> list[Product]:
        """Active products whose name, description or category contains ``keyword``.

        Matching is case-insensitive. ``None`` matches nothing and an empty
        keyword matches every active product.
        """
        if keyword is None:
            return []
        pattern = f"%{keyword.lower()}%"
        statement = (
            select(ProductTable)
            .where(col(ProductTable.active).is_(True))
            .where(
                or_(
                    func.lower(col(ProductTable.name)).like(pattern),
                    func.lower(col(ProductTable.description)).like(pattern),
                    func.lower(col(ProductTable.category)).like(pattern),
                )
            )
            .order_by(col(ProductTable.created_at))
        )
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def save(self, product: Product) -> Product:
        """Insert the product, or overwrite the stored row with the same id."""
        row = self._session.get(ProductTable, product.id)
        if row is None:
            row = ProductTable.model_validate(product, from_attributes=True)
            self._session.add(row)
        else:
            row.sqlmodel_update(product.model_dump(exclude={"id", "created_at"}))
            row.updated_at = utc_now()
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def delete(self, product_id: str) -> bool:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
