"""Composition-root calls as seen from the CLI.

Building the store reads the data files and the environment, so it can
fail like any command. Those failures are reported as usage errors
instead of tracebacks.
"""

from __future__ import annotations

import click

from soletrack.domain.exceptions import DomainException
from soletrack.domain.gateway.printer import PrinterDevice
from soletrack.domain.gateway.recognition import RecognitionGateway
from soletrack.domain.model.shop import ShopStore
from soletrack.infrastructure import bootstrap


def open_shop() -> ShopStore:
    try:
        return bootstrap.shop_store()
    except DomainException as exc:
        raise click.ClickException(str(exc))


def open_recognition(store: ShopStore) -> RecognitionGateway:
    try:
        return bootstrap.recognition_gateway(store)
    except DomainException as exc:
        raise click.ClickException(str(exc))


def open_printer(device: str | None) -> PrinterDevice:
    try:
        return bootstrap.printer_device(device)
    except DomainException as exc:
        raise click.ClickException(str(exc))
