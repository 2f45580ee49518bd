"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal, InvalidOperation

import typer
from rich.console import Console
from sqlmodel import Session

from src.ecom.core.exceptions import EcomError
from src.ecom.core.models.result import ServiceResult
from src.ecom.core.services.database.db_session import DbSessionService
from src.ecom.entities.order.entity import to_money

console = Console()


@contextmanager
def db_session() -> Iterator[Session]:
    """Open a session on the configured database for one command."""
    database_service = DbSessionService()
    try:
        with database_service.session_scope() as session:
            yield session
    finally:
        database_service.dispose()


def parse_price(value: str | None) -> Decimal | None:
    if value is None:
        return None
    try:
        price = Decimal(value)
    except InvalidOperation as e:
        raise typer.BadParameter(f"'{value}' is not a valid price") from e
    if not price.is_finite():
        raise typer.BadParameter(f"'{value}' is not a valid price")
    if price != to_money(price):
        raise typer.BadParameter(f"'{value}' must have at most 2 decimal places")
    return price


def unwrap_or_exit(result: ServiceResult):
    """Return the result's value or print its message and exit with code 1."""
    try:
        return result.unwrap()
    except EcomError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e


def format_money(value: Decimal | None) -> str:
    return "-" if value is None else f"{value:.2f}"
