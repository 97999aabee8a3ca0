"""CLI commands for the sales counter and AI billing."""

from __future__ import annotations

from pathlib import Path

import click

from soletrack.application.dto import SaleDTO
from soletrack.application.recognize import (
    AiBillingHandler,
    CameraSearchHandler,
    ScanStatus,
)
from soletrack.application.sell import SellHandler
from soletrack.application.show_sales import ListSalesHandler, ShowSaleHandler
from soletrack.domain.exceptions import DomainException, GatewayError
from soletrack.infrastructure.cli.wiring import open_recognition, open_shop

BUSY_MESSAGE = "AI service busy. Please try again."


def _display_sale(dto: SaleDTO) -> None:
    click.echo(f"Sale {dto.id}  (bill {dto.bill_number})")
    click.echo(f"Sold:     {dto.sold_at}")
    click.echo(f"Item:     {dto.product_name}  {dto.color} / Sz: {dto.size}")
    click.echo(f"Quantity: {dto.quantity} x {dto.unit_price}")
    click.echo(f"Total:    {dto.total_price}")


@click.command("sell")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--variant-id", default=None, help="Variant ID (see 'product show').")
@click.option("--color", default=None, help="Variant color, if no --variant-id.")
@click.option("--size", default=None, help="Variant size, if no --variant-id.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units sold.")
def sale_sell(
    product_id: str,
    variant_id: str | None,
    color: str | None,
    size: str | None,
    quantity: int,
) -> None:
    """Sell units of a variant (records the sale, deducts stock)."""
    handler = SellHandler(store=open_shop())

    try:
        dto = handler.handle(
            product_id=product_id,
            quantity=quantity,
            variant_id=variant_id,
            color=color,
            size=size,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_sale(dto)


@click.command("list")
@click.option("--limit", default=20, show_default=True, type=int, help="How many to show.")
def sale_list(limit: int) -> None:
    """List recent sales, newest first."""
    sales = ListSalesHandler(store=open_shop()).handle(limit=limit)

    if not sales:
        click.echo("No sales recorded yet.")
        return

    click.echo(f"{'Bill':<8} {'Date':<22} {'Item':<24} {'Qty':>4} {'Total':>12}")
    click.echo("-" * 74)
    for s in sales:
        click.echo(
            f"{s.bill_number:<8} {s.sold_at:<22} {s.product_name:<24} {s.quantity:>4} {s.total_price:>12}"
        )


@click.command("show")
@click.option("--id", "sale_id", required=True, help="Sale ID.")
def sale_show(sale_id: str) -> None:
    """Show one recorded sale."""
    try:
        dto = ShowSaleHandler(store=open_shop()).handle(sale_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_sale(dto)


@click.command("scan")
@click.option(
    "--image", "image_path", required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JPEG photo of the shoe.",
)
@click.option("--yes", "assume_yes", is_flag=True, default=False, help="Record the sale without asking.")
def sale_scan(image_path: Path, assume_yes: bool) -> None:
    """Identify a shoe from a photo and bill it (AI billing)."""
    store = open_shop()
    handler = AiBillingHandler(store=store, gateway=open_recognition(store))

    try:
        result = handler.scan(image_path.read_bytes())
    except GatewayError:
        raise click.ClickException(BUSY_MESSAGE)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result.status != ScanStatus.MATCH or result.detection is None:
        click.echo(result.message or "Shoe not clearly detected. Try again.")
        return

    d = result.detection
    symbol = store.settings.currency_symbol
    click.echo(f"Detected: {d.brand} {d.color}  Sz: {d.size}  ({d.confidence:.0%} confidence)")
    click.echo(f"Retail {d.retailer_price.format(symbol)}   Wholesale {d.wholesale_price.format(symbol)}")
    if d.notes:
        click.echo(d.notes)

    if not assume_yes and not click.confirm("Record this sale?", default=True):
        click.echo("Sale discarded.")
        return

    try:
        dto = handler.complete(d)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_sale(dto)


@click.command("find")
@click.option(
    "--image", "image_path", required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JPEG photo of the shoe.",
)
def sale_find(image_path: Path) -> None:
    """Find a catalog product from a photo (visual search)."""
    store = open_shop()
    handler = CameraSearchHandler(store=store, gateway=open_recognition(store))

    try:
        result = handler.handle(image_path.read_bytes())
    except GatewayError:
        raise click.ClickException("Identification failed. Please try again.")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result.product is None:
        click.echo(result.message)
        return

    p = result.product
    click.echo(f"Match: product #{p.id} {p.name} ({p.brand}), {p.total_stock} in stock")
