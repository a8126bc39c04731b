"""Catalog commands that drive the API through the typed client."""

import asyncio
from collections.abc import Awaitable, Callable
from decimal import Decimal
from typing import TypeVar

import typer
from rich.table import Table

from tinyshop.core.services import ProductService
from tinyshop.entities.service.product import Product

from .utils import console

T = TypeVar("T")

products_app = typer.Typer(help="📦 Manage catalog products through the API")

BaseUrlOption = typer.Option(
    None, "--base-url", help="API base URL (defaults to client.base_url from config)"
)
PriceOption = typer.Option("0", parser=Decimal, help="Unit price")


def _run(base_url: str | None, call: Callable[[ProductService], Awaitable[T]]) -> T:
    async def _go() -> T:
        async with ProductService.from_config(base_url) as service:
            return await call(service)

    return asyncio.run(_go())


def _render(products: list[Product]) -> Table:
    table = Table(title="Products")
    table.add_column("Id", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("Description")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Image URL", style="dim")
    for product in products:
        table.add_row(
            str(product.id),
            product.name or "",
            product.description or "",
            str(product.price),
            product.image_url or "",
        )
    return table


@products_app.command("list")
def list_products(base_url: str | None = BaseUrlOption) -> None:
    """List all products."""
    products = _run(base_url, lambda service: service.get_products())
    if not products:
        console.print("[yellow]No products found[/yellow]")
        return
    console.print(_render(products))


@products_app.command("get")
def get_product(
    product_id: int = typer.Argument(..., help="Product id"),
    base_url: str | None = BaseUrlOption,
) -> None:
    """Show a single product."""
    product = _run(base_url, lambda service: service.get_product_by_id(product_id))
    if product is None:
        console.print(f"[red]Product {product_id} not found[/red]")
        raise typer.Exit(1)
    console.print(_render([product]))


@products_app.command("create")
def create_product(
    name: str = typer.Option(..., help="Product name"),
    price: Decimal = PriceOption,
    description: str | None = typer.Option(None, help="Description"),
    image_url: str | None = typer.Option(None, help="Image URL"),
    base_url: str | None = BaseUrlOption,
) -> None:
    """Create a product; the server assigns its id."""
    product = Product(name=name, description=description, price=price, image_url=image_url)
    created = _run(base_url, lambda service: service.create_product(product))
    if created is None:
        console.print("[red]Failed to create product[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✅ Created product {created.id}[/green]")


@products_app.command("update")
def update_product(
    product_id: int = typer.Argument(..., help="Product id"),
    name: str | None = typer.Option(None, help="Product name"),
    price: Decimal = PriceOption,
    description: str | None = typer.Option(None, help="Description"),
    image_url: str | None = typer.Option(None, help="Image URL"),
    base_url: str | None = BaseUrlOption,
) -> None:
    """Overwrite every field of a product. Omitted options are cleared."""
    product = Product(name=name, description=description, price=price, image_url=image_url)
    if not _run(base_url, lambda service: service.update_product(product_id, product)):
        console.print(f"[red]Failed to update product {product_id}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✅ Updated product {product_id}[/green]")


@products_app.command("delete")
def delete_product(
    product_id: int = typer.Argument(..., help="Product id"),
    base_url: str | None = BaseUrlOption,
) -> None:
    """Delete a product."""
    if not _run(base_url, lambda service: service.delete_product(product_id)):
        console.print(f"[red]Failed to delete product {product_id}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✅ Deleted product {product_id}[/green]")
