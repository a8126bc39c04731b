"""Main CLI application module."""

import typer
from rich.panel import Panel

from .product_commands import products_app
from .utils import console

app = typer.Typer(
    help="🛒 TinyShop CLI - run the catalog API and manage its products",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(products_app, name="products")


@app.command(name="serve")
def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to app.host)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to app.port)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """🚀 Start the catalog API server."""
    import uvicorn

    from tinyshop.runtime.context import get_config

    app_config = get_config().app
    host = host or app_config.host
    port = port or app_config.port

    console.print(
        Panel.fit("[bold green]Starting TinyShop Products API[/bold green]", border_style="green")
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    uvicorn.run(
        "tinyshop.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,
    )


@app.command(name="init-db")
def init_db() -> None:
    """🗄️ Create the catalog tables."""
    from tinyshop.runtime.init_db import init_db as create_tables

    create_tables()
    console.print("[green]✅ Database initialized[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
