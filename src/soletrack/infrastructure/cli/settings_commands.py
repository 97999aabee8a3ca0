"""CLI commands for shop settings."""

from __future__ import annotations

import click

from soletrack.application.update_settings import UpdateSettingsHandler
from soletrack.domain.exceptions import DomainException
from soletrack.domain.model.settings import Currency, Settings
from soletrack.infrastructure.cli.wiring import open_shop


def _display_settings(settings: Settings) -> None:
    click.echo(f"Currency:    {settings.currency.value} ({settings.currency_symbol})")
    click.echo(f"AI billing:  {'enabled' if settings.ai_recognition_enabled else 'disabled'}")
    click.echo(f"Company:     {settings.company.name}")
    click.echo(f"Address:     {settings.company.address}")
    click.echo(f"Phone:       {settings.company.phone}")
    if settings.company.logo:
        click.echo(f"Logo:        {settings.company.logo}")


@click.command("show")
def settings_show() -> None:
    """Show current settings."""
    _display_settings(open_shop().settings)


@click.command("set")
@click.option(
    "--currency", default=None,
    type=click.Choice([c.value for c in Currency], case_sensitive=False),
    help="Display currency.",
)
@click.option("--ai/--no-ai", "ai_enabled", default=None, help="Enable or disable AI billing.")
@click.option("--company-name", default=None, help="Name printed on receipts.")
@click.option("--company-address", default=None, help="Address printed on receipts.")
@click.option("--company-phone", default=None, help="Phone printed on receipts.")
@click.option("--company-logo", default=None, help="Logo URL or path.")
def settings_set(
    currency: str | None,
    ai_enabled: bool | None,
    company_name: str | None,
    company_address: str | None,
    company_phone: str | None,
    company_logo: str | None,
) -> None:
    """Change one or more settings."""
    handler = UpdateSettingsHandler(store=open_shop())

    try:
        settings = handler.handle(
            currency=currency,
            ai_recognition_enabled=ai_enabled,
            company_name=company_name,
            company_address=company_address,
            company_phone=company_phone,
            company_logo=company_logo,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_settings(settings)
