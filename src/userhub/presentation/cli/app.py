"""UserHub CLI application using Typer.

Command-line utilities for operating the service: schema management,
a read-only user listing and a uvicorn launcher.
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import async_sessionmaker

from userhub.application.dtos import UserDTO
from userhub.application.services import UserService
from userhub.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_from_settings,
    create_tables,
    describe_database_url,
    drop_tables,
)
from userhub.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from userhub_config.settings import get_settings

app = typer.Typer(
    name="userhub",
    help="UserHub - user CRUD service CLI",
    no_args_is_help=True,
)
console = Console()


db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)

users_app = typer.Typer(
    name="users",
    help="Inspect stored users",
    no_args_is_help=True,
)
app.add_typer(users_app)


def _print_database() -> None:
    url = describe_database_url(get_settings().database_url)
    console.print(f"[dim]Database: {url}[/dim]")


@db_app.command("init")
def db_init() -> None:
    """Create all tables (existing tables are left untouched)."""
    _print_database()
    asyncio.run(create_tables())
    console.print("[bold green]Database initialized.[/bold green]")


@db_app.command("drop")
def db_drop(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Drop all tables. This deletes every stored user."""
    _print_database()
    if not yes:
        typer.confirm(
            "This will DELETE ALL DATA in the database. Continue?",
            abort=True,
        )
    asyncio.run(drop_tables())
    console.print("[yellow]Database tables dropped.[/yellow]")


async def _fetch_users() -> tuple[list[UserDTO], int]:
    engine = create_engine_from_settings()
    session_maker = async_sessionmaker(engine, expire_on_commit=False)
    try:
        async with session_maker() as session:
            repo = UserRepositorySQLAlchemy(session)
            users = await UserService(user_repository=repo).list_users()
            total = await repo.count()
    finally:
        await engine.dispose()
    return users, total


@users_app.command("list")
def users_list() -> None:
    """List stored users (passwords are never shown)."""
    users, total = asyncio.run(_fetch_users())

    table = Table(title=f"Users ({total})")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("Email", style="green")
    for user in users:
        table.add_row(str(user.id), user.name or "", user.email or "")

    console.print(table)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Bind port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the REST API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "userhub.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
