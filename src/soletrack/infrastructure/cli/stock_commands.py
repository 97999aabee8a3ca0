"""CLI commands for variant stock."""

from __future__ import annotations

import click

from soletrack.application.add_variant import AddVariantHandler
from soletrack.application.set_stock import SetStockHandler
from soletrack.domain.exceptions import DomainException
from soletrack.infrastructure.cli.wiring import open_shop


@click.command("set")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--index", "variant_index", required=True, type=int, help="Variant number (see 'product show').")
@click.option("--quantity", required=True, type=int, help="New stock count.")
def stock_set(product_id: str, variant_index: int, quantity: int) -> None:
    """Set the stock count of one variant."""
    handler = SetStockHandler(store=open_shop())

    try:
        stock = handler.handle(product_id, variant_index, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for product #{product_id} variant #{variant_index} set to {stock}")


@click.command("adjust")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--index", "variant_index", required=True, type=int, help="Variant number.")
@click.option("--delta", required=True, type=int, help="Units to add (negative to remove).")
def stock_adjust(product_id: str, variant_index: int, delta: int) -> None:
    """Add or remove units from one variant."""
    handler = SetStockHandler(store=open_shop())

    try:
        stock = handler.adjust(product_id, variant_index, delta)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for product #{product_id} variant #{variant_index} is now {stock}")


@click.command("add-variant")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--color", required=True, help="Colorway.")
@click.option("--size", required=True, help="Size (e.g. 42).")
@click.option("--stock", default=10, show_default=True, type=int, help="Initial stock.")
def stock_add_variant(product_id: str, color: str, size: str, stock: int) -> None:
    """Add a new color/size variant to a product."""
    handler = AddVariantHandler(store=open_shop())

    try:
        variant = handler.handle(product_id, color, size, stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Variant #{variant.index} {variant.color} / {variant.size} added "
        f"with {variant.stock} in stock (id {variant.id})"
    )
