"""CLI commands for sales analytics."""

from __future__ import annotations

import click

from soletrack.application.show_report import ShowReportHandler
from soletrack.infrastructure.cli.wiring import open_shop


@click.command("show")
@click.option("--top", "top_n", default=5, show_default=True, type=int, help="Best sellers to list.")
@click.option(
    "--by-weekday", is_flag=True, default=False,
    help="Group the trend by weekday name across all weeks (legacy chart).",
)
def report_show(top_n: int, by_weekday: bool) -> None:
    """Revenue, units, weekly trend and best sellers."""
    report = ShowReportHandler(store=open_shop()).handle(top_n=top_n, by_weekday=by_weekday)

    if report.order_count == 0:
        click.echo("No sales recorded yet.")
        return

    click.echo(f"Total revenue:       {report.total_revenue}")
    click.echo(f"Units sold:          {report.total_units}")
    click.echo(f"Orders:              {report.order_count}")
    click.echo(f"Average order value: {report.average_order_value}")
    click.echo()
    click.echo("Revenue trend")
    click.echo("-" * 30)
    for point in report.trend:
        label = f"{point.label} {point.date}".strip()
        click.echo(f"  {label:<16} {point.revenue:>12}")
    click.echo()
    click.echo("Top products")
    click.echo("-" * 30)
    for rank, product in enumerate(report.top_products, start=1):
        click.echo(f"  {rank}. {product.name:<20} {product.units:>4}")
