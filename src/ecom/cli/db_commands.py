"""Database management CLI commands."""

import typer

from src.ecom.core.services.database.db_manage import DbManageService
from src.ecom.core.services.database.db_session import DbSessionService
from src.ecom.runtime.context import get_config

from .utils import console

db_app = typer.Typer(help="🗄️  Database management commands")


@db_app.command("init")
def init(
    drop: bool = typer.Option(False, "--drop", help="Drop existing tables first"),
) -> None:
    """Create all database tables."""
    database_service = DbSessionService()
    try:
        manager = DbManageService(database_service.engine)
        if drop:
            manager.drop_all()
        manager.create_all()
    finally:
        database_service.dispose()
    console.print("[green]✅ Database initialized[/green]")


@db_app.command("status")
def status() -> None:
    """Check database connectivity."""
    config = get_config()
    database_service = DbSessionService()
    try:
        healthy = database_service.health_check()
        pool_status = database_service.get_pool_status()
    finally:
        database_service.dispose()

    kind = "sqlite" if config.database.is_sqlite else "postgresql"
    if not healthy:
        console.print(f"[red]❌ Database ({kind}) is unreachable[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]✅ Database ({kind}) is healthy[/green]")
    console.print(f"Pool: {pool_status}")
