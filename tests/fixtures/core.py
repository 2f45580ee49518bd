from __future__ import annotations

from collections.abc import Generator

import pytest
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from src.ecom.core.services.database.db_manage import register_tables
from src.ecom.runtime.config.config_data import CartConfig


@pytest.fixture
def engine() -> Generator[Engine]:
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    register_tables()
    SQLModel.metadata.create_all(engine)

    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a database session bound to the per-test engine."""
    with Session(engine) as session:
        try:
            yield session
        finally:
            session.rollback()
            session.close()


@pytest.fixture
def cart_config() -> CartConfig:
    """Cart rules with every validation switched on."""
    return CartConfig(enforce_stock=True, require_known_user=True)
