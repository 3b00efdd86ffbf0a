"""Main CLI entry point for AR Product Preview."""

import asyncio

import click
from rich.console import Console
from rich.table import Table

from arpreview import __version__
from arpreview.utils import setup_logging

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="AR Product Preview")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """AR Product Preview - catalog, favorites and AR placement backend."""
    from arpreview.config import get_settings

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging("DEBUG" if verbose else get_settings().log_level)


@cli.command()
@click.option("--host", default=None, help="Bind address (defaults to ARP_API_HOST)")
@click.option("--port", "-p", type=int, default=None, help="Port (defaults to ARP_API_PORT)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the REST API server."""
    import uvicorn
    from arpreview.config import get_settings

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(f"[bold]Serving AR Product Preview API on http://{host}:{port}/api[/bold]")
    uvicorn.run("arpreview.api:app", host=host, port=port, reload=reload, log_config=None)


@cli.group()
def db() -> None:
    """Database commands."""
    pass


@db.command("init")
def db_init() -> None:
    """Create the database tables."""
    from arpreview.db import init_db, close_db

    async def run():
        await init_db()
        await close_db()

    asyncio.run(run())
    console.print("[green]Database initialized[/green]")


@db.command("seed")
@click.option("--keep", is_flag=True, help="Keep existing models instead of replacing them")
def db_seed(keep: bool) -> None:
    """Load the sample product catalog."""
    from arpreview.db import init_db, close_db, get_session
    from arpreview.db.seed import seed_catalog

    async def run():
        await init_db()
        try:
            async with get_session() as session:
                models = await seed_catalog(session, replace=not keep)
                return [m.to_dict() for m in models]
        finally:
            await close_db()

    models = asyncio.run(run())

    table = Table(title=f"Inserted {len(models)} sample models")
    table.add_column("ID", style="dim")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Scale", justify="right")
    for m in models:
        table.add_row(m["_id"], m["name"], m["category"], f"{m['scale']:.1f}")
    console.print(table)


@cli.command()
def status() -> None:
    """Show configuration."""
    from arpreview.config import get_settings

    settings = get_settings()

    console.print("[bold]AR Product Preview Status[/bold]")
    console.print(f"Version: {__version__}")
    console.print()
    console.print("[bold]Configuration:[/bold]")
    console.print(f"  Data Directory: {settings.data_dir}")
    console.print(f"  Database: {settings.database_url}")
    console.print(f"  API: {settings.api_host}:{settings.api_port}")
    console.print(f"  Client Base URL: {settings.api_base_url}")
    default_secret = settings.jwt_secret_key == "dev-secret-key-change-in-production"
    console.print(f"  JWT Secret: {'[yellow]Default (change it)[/yellow]' if default_secret else '[green]Configured[/green]'}")


if __name__ == "__main__":
    cli()
