"""Product catalog CLI commands."""

import typer
from rich.table import Table

from src.ecom.core.services.product_service import ProductService
from src.ecom.entities.product import ProductRequest, ProductResponse

from .utils import console, db_session, format_money, parse_price, unwrap_or_exit

products_app = typer.Typer(help="📦 Manage the product catalog")


def _print_products(products: list[ProductResponse], title: str) -> None:
    if not products:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right")
    table.add_column("Stock", justify="right")

    for product in products:
        table.add_row(
            product.id,
            product.name or "",
            product.category or "",
            format_money(product.price),
            str(product.stock_quantity if product.stock_quantity is not None else "-"),
        )

    console.print(table)
    console.print(f"\n[green]Found {len(products)} products[/green]")


@products_app.command("add")
def add_product(
    name: str = typer.Argument(..., help="Product name"),
    price: str = typer.Option(..., "--price", "-p", help="Unit price"),
    stock: int = typer.Option(0, "--stock", "-s", help="Units in stock"),
    category: str | None = typer.Option(None, "--category", "-c", help="Catalog category"),
    description: str | None = typer.Option(None, "--description", "-d", help="Description"),
    image_url: str | None = typer.Option(None, "--image-url", help="Image URL"),
) -> None:
    """Add a product to the catalog."""
    request = ProductRequest(
        name=name,
        price=parse_price(price),
        stock_quantity=stock,
        category=category,
        description=description,
        image_url=image_url,
    )
    with db_session() as session:
        product = ProductService(session).create(request)
    console.print(f"[green]✅ Created product {product.id}[/green]")


@products_app.command("list")
def list_products() -> None:
    """List active products."""
    with db_session() as session:
        products = ProductService(session).list_active()
    _print_products(products, "Active products")


@products_app.command("show")
def show_product(product_id: str = typer.Argument(..., help="Product ID")) -> None:
    """Show one active product."""
    with db_session() as session:
        result = ProductService(session).get_by_id(product_id)
    product = unwrap_or_exit(result)
    _print_products([product], f"Product {product_id}")


@products_app.command("update")
def update_product(
    product_id: str = typer.Argument(..., help="Product ID"),
    name: str = typer.Option(..., "--name", "-n", help="Product name"),
    price: str = typer.Option(..., "--price", "-p", help="Unit price"),
    stock: int = typer.Option(0, "--stock", "-s", help="Units in stock"),
    category: str | None = typer.Option(None, "--category", "-c", help="Catalog category"),
    description: str | None = typer.Option(None, "--description", "-d", help="Description"),
    image_url: str | None = typer.Option(None, "--image-url", help="Image URL"),
) -> None:
    """Replace every field of a product."""
    request = ProductRequest(
        name=name,
        price=parse_price(price),
        stock_quantity=stock,
        category=category,
        description=description,
        image_url=image_url,
    )
    with db_session() as session:
        result = ProductService(session).update(product_id, request)
    product = unwrap_or_exit(result)
    console.print(f"[green]✅ Updated product {product.id}[/green]")


@products_app.command("delete")
def delete_product(product_id: str = typer.Argument(..., help="Product ID")) -> None:
    """Deactivate a product. The row is kept."""
    with db_session() as session:
        result = ProductService(session).soft_delete(product_id)
    unwrap_or_exit(result)
    console.print(f"[green]✅ Deactivated product {product_id}[/green]")


@products_app.command("search")
def search_products(keyword: str = typer.Argument(..., help="Text to look for")) -> None:
    """Search active products by name, description or category."""
    with db_session() as session:
        products = ProductService(session).search(keyword)
    _print_products(products, f"Products matching '{keyword}'")
