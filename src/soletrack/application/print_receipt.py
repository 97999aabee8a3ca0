"""Application service: Print Receipt use case."""

from __future__ import annotations

import logging

from soletrack.domain.exceptions import NotFoundError
from soletrack.domain.gateway.printer import PrinterDevice
from soletrack.domain.model.shop import ShopStore
from soletrack.domain.service.receipt import receipt_lines

logger = logging.getLogger(__name__)


class PrintReceiptHandler:

    def __init__(self, store: ShopStore, printer: PrinterDevice) -> None:
        self._store = store
        self._printer = printer

    def handle(self, sale_id: str) -> str:
        """Print the receipt for ``sale_id``; returns the device name.

        The device is released even when the job fails.
        """
        sale = self._store.get_sale(sale_id)
        if sale is None:
            raise NotFoundError(f"Sale '{sale_id}' not found")

        settings = self._store.settings
        lines = receipt_lines(sale, settings.company, settings.currency_symbol)

        name = self._printer.open()
        try:
            self._printer.print_lines(lines)
        finally:
            self._printer.close()

        logger.info("Printed bill %s on %s", sale.bill_number, name)
        return name
