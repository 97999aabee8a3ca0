"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from soletrack.application.add_product import AddProductHandler
from soletrack.application.delete_product import DeleteProductHandler
from soletrack.application.dto import ProductDTO
from soletrack.application.list_products import ListProductsHandler, ShowProductHandler
from soletrack.domain.exceptions import DomainException
from soletrack.domain.model.product import VariantSpec
from soletrack.infrastructure.cli.wiring import open_shop


def _parse_variant(raw: str) -> VariantSpec:
    """Parse 'Red/Black:42:12' into a VariantSpec (stock optional)."""
    parts = [p.strip() for p in raw.rsplit(":", 2)]
    if len(parts) == 2:
        parts.append("0")
    if len(parts) != 3:
        raise click.BadParameter(
            f"Invalid variant '{raw}'. Expected 'Color:Size' or 'Color:Size:Stock'."
        )
    color, size, stock_str = parts
    try:
        stock = int(stock_str)
    except ValueError:
        raise click.BadParameter(f"Invalid stock '{stock_str}' for variant '{raw}'.")
    return VariantSpec(color=color, size=size, stock=stock)


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}  {dto.name}  ({dto.brand})")
    click.echo(f"Retail: {dto.retailer_price}   Wholesale: {dto.wholesale_price}")
    if dto.description:
        click.echo(dto.description)
    click.echo()
    click.echo(f"  {'#':>3} {'Color':<16} {'Size':<10} {'Stock':>6}  {'Variant ID'}")
    click.echo(f"  {'-'*52}")
    for v in dto.variants:
        click.echo(f"  {v.index:>3} {v.color:<16} {v.size:<10} {v.stock:>6}  {v.id}")
    click.echo(f"  {'-'*52}")
    click.echo(f"  {'Total stock':<31} {dto.total_stock:>6}")


@click.command("add")
@click.option("--name", required=True, help="Model name.")
@click.option("--brand", required=True, help="Brand.")
@click.option("--price", required=True, help="Retail price (e.g. 12500).")
@click.option("--wholesale", default="0", show_default=True, help="Wholesale cost.")
@click.option("--description", default="", help="Short description.")
@click.option("--image-url", default="", help="Product image URL.")
@click.option(
    "--variant", "variants", multiple=True,
    help="Variant as 'Color:Size:Stock'. Repeat for more.",
)
def product_add(
    name: str,
    brand: str,
    price: str,
    wholesale: str,
    description: str,
    image_url: str,
    variants: tuple[str, ...],
) -> None:
    """Add a new product to the catalog."""
    specs = [_parse_variant(raw) for raw in variants]
    handler = AddProductHandler(store=open_shop())

    try:
        product = handler.handle(
            name=name,
            brand=brand,
            retailer_price=price,
            wholesale_price=wholesale,
            image_url=image_url,
            description=description,
            variants=specs,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added with {len(product.variants)} variant(s)"
    )


@click.command("list")
@click.option("--search", default="", help="Filter by name or brand.")
def product_list(search: str) -> None:
    """List products in the catalog."""
    products = ListProductsHandler(store=open_shop()).handle(search=search)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<14} {'Name':<20} {'Brand':<12} {'Price':>12} {'Stock':>6}")
    click.echo("-" * 68)
    for p in products:
        click.echo(
            f"{p.id:<14} {p.name:<20} {p.brand:<12} {p.retailer_price:>12} {p.total_stock:>6}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a product with its variants."""
    try:
        dto = ShowProductHandler(store=open_shop()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Delete this product? Past sales are kept.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    try:
        name = DeleteProductHandler(store=open_shop()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} '{name}' deleted.")
