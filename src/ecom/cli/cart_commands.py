"""Cart CLI commands."""

import typer
from rich.table import Table

from src.ecom.core.services.cart_service import CartService
from src.ecom.entities.cart import CartItemRequest

from .utils import console, db_session, format_money, unwrap_or_exit

cart_app = typer.Typer(help="🛒 Manage user carts")


@cart_app.command("add")
def add_to_cart(
    user_id: str = typer.Argument(..., help="User ID"),
    product_id: str = typer.Argument(..., help="Product ID"),
    quantity: int = typer.Option(1, "--quantity", "-q", help="Units to add"),
) -> None:
    """Add units of a product to a cart."""
    request = CartItemRequest(product_id=product_id, quantity=quantity)
    with db_session() as session:
        result = CartService(session).add_to_cart(user_id, request)
    item = unwrap_or_exit(result)
    console.print(
        f"[green]✅ Cart now holds {item.quantity} × {item.product_id}[/green]"
    )


@cart_app.command("remove")
def remove_from_cart(
    user_id: str = typer.Argument(..., help="User ID"),
    product_id: str = typer.Argument(..., help="Product ID"),
) -> None:
    """Remove a product from a cart."""
    with db_session() as session:
        result = CartService(session).remove_from_cart(user_id, product_id)
    unwrap_or_exit(result)
    console.print(f"[green]✅ Removed {product_id} from cart[/green]")


@cart_app.command("show")
def show_cart(user_id: str = typer.Argument(..., help="User ID")) -> None:
    """Show the items in a cart."""
    with db_session() as session:
        service = CartService(session)
        items = service.get_cart(user_id)
        total = service.cart_total(user_id)

    if not items:
        console.print(f"[yellow]Cart of user {user_id} is empty[/yellow]")
        return

    table = Table(title=f"Cart of user {user_id}")
    table.add_column("Product", style="cyan", no_wrap=True)
    table.add_column("Quantity", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Subtotal", justify="right", style="green")
    for item in items:
        table.add_row(
            item.product_id,
            str(item.quantity),
            format_money(item.price),
            format_money(item.subtotal),
        )

    console.print(table)
    console.print(f"\n[green]Total: {format_money(total)}[/green]")


@cart_app.command("clear")
def clear_cart(user_id: str = typer.Argument(..., help="User ID")) -> None:
    """Remove every item from a cart."""
    with db_session() as session:
        removed = CartService(session).clear_cart(user_id)
    console.print(f"[green]✅ Removed {removed} item(s)[/green]")
