"""Donare CLI application using Typer.

Command-line utilities for deployment: secret generation and database
schema setup.
"""

import asyncio
import secrets

import typer
from rich.console import Console

app = typer.Typer(
    name="donare",
    help="Donare - donor and health facility user management CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Donare configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Donare Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256 signing
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


@db_app.command("init")
def init_database() -> None:
    """Create all tables that do not exist yet."""
    # Imported here so `secrets generate` works without database settings
    from donare.presentation.api.dependencies import create_tables, get_engine

    async def _run() -> None:
        try:
            await create_tables()
        finally:
            await get_engine().dispose()

    try:
        asyncio.run(_run())
    except ConnectionRefusedError:
        console.print("[red]Could not connect to the database.[/red]")
        raise typer.Exit(code=1) from None

    console.print("[green]Database schema is up to date.[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
