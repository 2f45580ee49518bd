"""Main CLI application module."""

import typer
from loguru import logger

from src.ecom.runtime.logging_setup import configure_logging

from .cart_commands import cart_app
from .db_commands import db_app
from .order_commands import orders_app
from .product_commands import products_app
from .user_commands import users_app

app = typer.Typer(
    help="🛍️  ecom - catalog, cart and order administration",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(products_app, name="products")
app.add_typer(users_app, name="users")
app.add_typer(cart_app, name="cart")
app.add_typer(orders_app, name="orders")


@app.callback()
def setup(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    """Configure logging before any command runs."""
    configure_logging("DEBUG" if verbose else None)
    logger.configure(extra={"operation": ctx.invoked_subcommand or "-"})


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
