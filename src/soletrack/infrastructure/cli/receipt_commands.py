"""CLI commands for receipts."""

from __future__ import annotations

import click

from soletrack.application.print_receipt import PrintReceiptHandler
from soletrack.domain.exceptions import DomainException
from soletrack.infrastructure.cli.wiring import open_printer, open_shop


@click.command("print")
@click.option("--id", "sale_id", required=True, help="Sale ID.")
@click.option(
    "--device", default=None,
    help="Raw ESC/POS device or file (default: SOLETRACK_PRINTER_DEVICE, else console).",
)
def receipt_print(sale_id: str, device: str | None) -> None:
    """Print the receipt for a sale."""
    handler = PrintReceiptHandler(store=open_shop(), printer=open_printer(device))

    try:
        name = handler.handle(sale_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Receipt sent to {name}", err=True)
