"""ShopStore — the single owner of catalog, ledger and settings.

The store is created once by the composition root and handed to every
handler. All mutations go through it. Observers (persistence, UI
refresh) subscribe to change topics and are notified once per topic when
the outermost transaction completes, so a sale that touches both the
catalog and the ledger is observed as one change.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime

from soletrack.domain.exceptions import NotFoundError, ValidationError
from soletrack.domain.model.product import Product, Variant
from soletrack.domain.model.sale import SaleRecord
from soletrack.domain.model.settings import Settings

logger = logging.getLogger(__name__)

CATALOG = "catalog"
LEDGER = "ledger"
SETTINGS = "settings"
TOPICS = (CATALOG, LEDGER, SETTINGS)

Listener = Callable[[str, "ShopStore"], None]


class ShopStore:

    def __init__(
        self,
        products: list[Product] | None = None,
        sales: list[SaleRecord] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._catalog: list[Product] = list(products or [])
        self._ledger: list[SaleRecord] = list(sales or [])
        self._settings = settings or Settings()
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()
        self._depth = 0
        self._dirty: set[str] = set()

    # --- Observers ------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @contextmanager
    def transaction(self) -> Iterator[ShopStore]:
        """Group mutations; listeners fire once, after the outermost block.

        Callers validate before mutating, so a block that raises has not
        changed anything and nothing is announced.
        """
        with self._lock:
            self._depth += 1
            try:
                yield self
            except BaseException:
                self._depth -= 1
                if self._depth == 0:
                    self._dirty.clear()
                raise
            self._depth -= 1
            if self._depth == 0 and self._dirty:
                changed = [t for t in TOPICS if t in self._dirty]
                self._dirty.clear()
                for topic in changed:
                    self._notify(topic)

    def _touch(self, topic: str) -> None:
        self._dirty.add(topic)

    def _notify(self, topic: str) -> None:
        logger.debug("Store changed: %s", topic)
        for listener in list(self._listeners):
            listener(topic, self)

    # --- Reads ----------------------------------------------------------------

    @property
    def settings(self) -> Settings:
        return self._settings

    def products(self) -> list[Product]:
        return list(self._catalog)

    def sales(self) -> list[SaleRecord]:
        return list(self._ledger)

    def get_product(self, product_id: str) -> Product | None:
        for product in self._catalog:
            if product.id == product_id:
                return product
        return None

    def require_product(self, product_id: str) -> Product:
        product = self.get_product(product_id)
        if product is None:
            raise NotFoundError(f"Product '{product_id}' not found")
        return product

    def get_sale(self, sale_id: str) -> SaleRecord | None:
        for sale in self._ledger:
            if sale.id == sale_id:
                return sale
        return None

    # --- Identifiers ----------------------------------------------------------

    def next_product_id(self, now: datetime) -> str:
        taken = {p.id for p in self._catalog}
        return _timestamp_id(now, taken)

    def next_sale_id(self, now: datetime, prefix: str = "") -> str:
        taken = {s.id for s in self._ledger}
        return _timestamp_id(now, taken, prefix)

    # --- Catalog mutations ----------------------------------------------------

    def add_product(self, product: Product) -> None:
        with self.transaction():
            if self.get_product(product.id) is not None:
                raise ValidationError(f"Product id '{product.id}' already exists")
            self._catalog.append(product)
            self._touch(CATALOG)

    def delete_product(self, product_id: str) -> Product:
        with self.transaction():
            product = self.require_product(product_id)
            self._catalog.remove(product)
            self._touch(CATALOG)
            return product

    def set_stock(self, product_id: str, variant_index: int, new_stock: int) -> Variant:
        with self.transaction():
            variant = self.require_product(product_id).set_stock(variant_index, new_stock)
            self._touch(CATALOG)
            return variant

    def add_variant(self, product_id: str, color: str, size: str, stock: int = 0) -> Variant:
        with self.transaction():
            variant = self.require_product(product_id).add_variant(color, size, stock)
            self._touch(CATALOG)
            return variant

    # --- Ledger / settings mutations ------------------------------------------

    def append_sale(self, sale: SaleRecord) -> None:
        with self.transaction():
            if self.get_sale(sale.id) is not None:
                raise ValidationError(f"Sale id '{sale.id}' already recorded")
            self._ledger.append(sale)
            self._touch(LEDGER)

    def update_settings(self, settings: Settings) -> None:
        with self.transaction():
            self._settings = settings
            self._touch(SETTINGS)

    def replace_all(
        self,
        products: list[Product],
        sales: list[SaleRecord],
        settings: Settings,
    ) -> None:
        """Swap in a complete state, e.g. from an imported snapshot."""
        with self.transaction():
            self._catalog = list(products)
            self._ledger = list(sales)
            self._settings = settings
            self._dirty.update(TOPICS)


def _timestamp_id(now: datetime, taken: set[str], prefix: str = "") -> str:
    millis = int(now.timestamp() * 1000)
    candidate = f"{prefix}{millis}"
    while candidate in taken:
        millis += 1
        candidate = f"{prefix}{millis}"
    return candidate
