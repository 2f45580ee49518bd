"""Order CLI commands."""

import typer
from rich.table import Table

from src.ecom.core.services.order_service import OrderService
from src.ecom.entities.order import OrderResponse

from .utils import console, db_session, format_money, unwrap_or_exit

orders_app = typer.Typer(help="🧾 Place and inspect orders")


def _print_order(order: OrderResponse) -> None:
    table = Table(title=f"Order {order.id} ({order.status.value})")
    table.add_column("Product", style="cyan", no_wrap=True)
    table.add_column("Quantity", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Subtotal", justify="right", style="green")
    for item in order.items:
        table.add_row(
            item.product_id,
            str(item.quantity),
            format_money(item.price),
            format_money(item.subtotal),
        )
    console.print(table)
    console.print(f"[green]Total: {format_money(order.total_amount)}[/green]")


@orders_app.command("place")
def place_order(user_id: str = typer.Argument(..., help="User ID")) -> None:
    """Place an order from the user's cart."""
    with db_session() as session:
        result = OrderService(session).place_order(user_id)
    order = unwrap_or_exit(result)
    console.print(f"[green]✅ Placed order {order.id}[/green]")
    _print_order(order)


@orders_app.command("list")
def list_orders(user_id: str = typer.Argument(..., help="User ID")) -> None:
    """List a user's orders."""
    with db_session() as session:
        orders = OrderService(session).list_orders(user_id)

    if not orders:
        console.print(f"[yellow]No orders for user {user_id}[/yellow]")
        return

    table = Table(title=f"Orders of user {user_id}")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Status", style="magenta")
    table.add_column("Items", justify="right")
    table.add_column("Total", justify="right", style="green")
    for order in orders:
        table.add_row(
            order.id,
            order.status.value,
            str(len(order.items)),
            format_money(order.total_amount),
        )
    console.print(table)


@orders_app.command("show")
def show_order(order_id: str = typer.Argument(..., help="Order ID")) -> None:
    """Show one order and its items."""
    with db_session() as session:
        result = OrderService(session).get_order(order_id)
    order = unwrap_or_exit(result)
    _print_order(order)
