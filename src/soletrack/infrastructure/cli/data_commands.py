"""CLI commands for backup (export) and restore (import)."""

from __future__ import annotations

from pathlib import Path

import click

from soletrack.application.snapshot import ExportSnapshotHandler, ImportSnapshotHandler
from soletrack.domain.exceptions import DomainException
from soletrack.infrastructure.bootstrap import snapshot_codec
from soletrack.infrastructure.cli.wiring import open_shop


@click.command("export")
@click.option(
    "--output", type=click.Path(dir_okay=False, path_type=Path), default=None,
    help="File to write (default: stdout).",
)
def data_export(output: Path | None) -> None:
    """Export catalog, sales and settings as one JSON document."""
    text = ExportSnapshotHandler(store=open_shop(), codec=snapshot_codec()).handle()

    if output is None:
        click.echo(text, nl=False)
        return
    output.write_text(text, encoding="utf-8")
    click.echo(f"Exported to {output}")


@click.command("import")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--yes", "assume_yes", is_flag=True, default=False, help="Skip the confirmation prompt.")
def data_import(source: Path, assume_yes: bool) -> None:
    """Replace ALL products, sales and settings with an exported snapshot."""
    confirmed = assume_yes or click.confirm(
        "This replaces all products, sales and settings. Continue?", default=False
    )
    if not confirmed:
        click.echo("Import cancelled.")
        return

    handler = ImportSnapshotHandler(store=open_shop(), codec=snapshot_codec())
    try:
        snapshot = handler.handle(source.read_text(encoding="utf-8"), confirmed=True)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Imported {len(snapshot.products)} products and {len(snapshot.sales)} sales."
    )
