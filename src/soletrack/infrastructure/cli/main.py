import logging

import click

from soletrack.infrastructure.cli.data_commands import data_export, data_import
from soletrack.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
)
from soletrack.infrastructure.cli.receipt_commands import receipt_print
from soletrack.infrastructure.cli.report_commands import report_show
from soletrack.infrastructure.cli.sale_commands import (
    sale_find,
    sale_list,
    sale_scan,
    sale_sell,
    sale_show,
)
from soletrack.infrastructure.cli.settings_commands import settings_set, settings_show
from soletrack.infrastructure.cli.stock_commands import (
    stock_add_variant,
    stock_adjust,
    stock_set,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log what happens.")
def cli(verbose: bool) -> None:
    """SoleTrack — shoe inventory and point of sale"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage the catalog."""


@cli.group()
def stock() -> None:
    """Manage variant stock."""


@cli.group()
def sale() -> None:
    """Sell and review sales."""


@cli.group()
def report() -> None:
    """Sales analytics."""


@cli.group()
def receipt() -> None:
    """Print receipts."""


@cli.group()
def settings() -> None:
    """Shop settings."""


@cli.group()
def data() -> None:
    """Backup and restore."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
stock.add_command(stock_add_variant)
stock.add_command(stock_adjust)
stock.add_command(stock_set)
sale.add_command(sale_find)
sale.add_command(sale_list)
sale.add_command(sale_scan)
sale.add_command(sale_sell)
sale.add_command(sale_show)
report.add_command(report_show)
receipt.add_command(receipt_print)
settings.add_command(settings_set)
settings.add_command(settings_show)
data.add_command(data_export)
data.add_command(data_import)
