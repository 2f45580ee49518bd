"""User management CLI commands."""

import typer
from rich.table import Table

from src.ecom.core.services.user_service import UserService
from src.ecom.entities.user import AddressDTO, UserRequest, UserResponse, UserRole

from .utils import console, db_session, unwrap_or_exit

users_app = typer.Typer(help="👤 Manage users")


def _address_from_options(
    street: str | None,
    city: str | None,
    state: str | None,
    country: str | None,
    zipcode: str | None,
) -> AddressDTO | None:
    if not any((street, city, state, country, zipcode)):
        return None
    return AddressDTO(street=street, city=city, state=state, country=country, zipcode=zipcode)


def _print_users(users: list[UserResponse], title: str) -> None:
    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Email", style="blue")
    table.add_column("Role", style="magenta")
    table.add_column("City")
    table.add_column("Active", style="yellow")

    for user in users:
        table.add_row(
            user.id,
            f"{user.first_name or ''} {user.last_name or ''}".strip(),
            user.email or "",
            user.role.value,
            user.address.city or "" if user.address else "",
            "✅" if user.active else "❌",
        )

    console.print(table)
    console.print(f"\n[green]Found {len(users)} users[/green]")


@users_app.command("add")
def add_user(
    first_name: str = typer.Argument(..., help="First name"),
    last_name: str = typer.Argument(..., help="Last name"),
    email: str | None = typer.Option(None, "--email", "-e", help="Email address"),
    phone: str | None = typer.Option(None, "--phone", help="Phone number"),
    role: UserRole = typer.Option(UserRole.CUSTOMER, "--role", "-r", help="User role"),
    street: str | None = typer.Option(None, "--street", help="Street"),
    city: str | None = typer.Option(None, "--city", help="City"),
    state: str | None = typer.Option(None, "--state", help="State"),
    country: str | None = typer.Option(None, "--country", help="Country"),
    zipcode: str | None = typer.Option(None, "--zipcode", help="Zip code"),
) -> None:
    """Add a new user."""
    request = UserRequest(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        role=role,
        address=_address_from_options(street, city, state, country, zipcode),
    )
    with db_session() as session:
        user = UserService(session).create(request)
    console.print(f"[green]✅ Created user {user.id}[/green]")


@users_app.command("list")
def list_users(
    include_inactive: bool = typer.Option(
        False, "--all", "-a", help="Include deactivated users"
    ),
) -> None:
    """List users."""
    with db_session() as session:
        service = UserService(session)
        users = service.list_all() if include_inactive else service.list_active()
    _print_users(users, "Users")


@users_app.command("show")
def show_user(user_id: str = typer.Argument(..., help="User ID")) -> None:
    """Show one user."""
    with db_session() as session:
        result = UserService(session).get_by_id(user_id)
    user = unwrap_or_exit(result)
    _print_users([user], f"User {user_id}")


@users_app.command("update")
def update_user(
    user_id: str = typer.Argument(..., help="User ID"),
    first_name: str | None = typer.Option(None, "--first-name", "-f", help="First name"),
    last_name: str | None = typer.Option(None, "--last-name", "-l", help="Last name"),
    email: str | None = typer.Option(None, "--email", "-e", help="Email address"),
    phone: str | None = typer.Option(None, "--phone", help="Phone number"),
    role: UserRole | None = typer.Option(None, "--role", "-r", help="User role"),
    street: str | None = typer.Option(None, "--street", help="Street"),
    city: str | None = typer.Option(None, "--city", help="City"),
    state: str | None = typer.Option(None, "--state", help="State"),
    country: str | None = typer.Option(None, "--country", help="Country"),
    zipcode: str | None = typer.Option(None, "--zipcode", help="Zip code"),
) -> None:
    """Update the given fields of a user; omitted fields keep their value."""
    request = UserRequest(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        role=role,
        address=_address_from_options(street, city, state, country, zipcode),
    )
    with db_session() as session:
        result = UserService(session).update(user_id, request)
    user = unwrap_or_exit(result)
    console.print(f"[green]✅ Updated user {user.id}[/green]")


@users_app.command("delete")
def delete_user(user_id: str = typer.Argument(..., help="User ID")) -> None:
    """Deactivate a user. The row is kept."""
    with db_session() as session:
        result = UserService(session).soft_delete(user_id)
    unwrap_or_exit(result)
    console.print(f"[green]✅ Deactivated user {user_id}[/green]")
