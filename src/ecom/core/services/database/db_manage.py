"""Schema management for the application database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


def register_tables() -> None:
    """Import every table model so it is registered with the SQLModel metadata."""
    from src.ecom.entities.cart import CartItemTable  # noqa: F401
    from src.ecom.entities.order import OrderItemTable, OrderTable  # noqa: F401
    from src.ecom.entities.product import ProductTable  # noqa: F401
    from src.ecom.entities.user import AddressTable, UserTable  # noqa: F401


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        register_tables()
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all database tables."""
        register_tables()
        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Dropped all database tables.")
