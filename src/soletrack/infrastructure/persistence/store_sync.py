"""Loading the ShopStore from a gateway and writing it back on change."""

from __future__ import annotations

import logging
from collections.abc import Callable

from soletrack.domain.gateway.persistence import PersistenceGateway
from soletrack.domain.model.product import Product
from soletrack.domain.model.shop import CATALOG, LEDGER, SETTINGS, ShopStore

logger = logging.getLogger(__name__)


def open_store(
    gateway: PersistenceGateway,
    default_catalog: Callable[[], list[Product]] = list,
) -> ShopStore:
    """Build a store from persisted state and keep it persisted.

    Each blob that was never stored starts from its default; that is not
    an error.
    """
    products = gateway.load_catalog()
    if products is None:
        logger.info("No stored catalog, starting from defaults")
        products = default_catalog()
    sales = gateway.load_ledger()
    settings = gateway.load_settings()

    store = ShopStore(products=products, sales=sales or [], settings=settings)
    store.subscribe(PersistOnChange(gateway))
    return store


class PersistOnChange:
    """Store listener that rewrites whichever blob changed."""

    def __init__(self, gateway: PersistenceGateway) -> None:
        self._gateway = gateway

    def __call__(self, topic: str, store: ShopStore) -> None:
        if topic == CATALOG:
            self._gateway.save_catalog(store.products())
        elif topic == LEDGER:
            self._gateway.save_ledger(store.sales())
        elif topic == SETTINGS:
            self._gateway.save_settings(store.settings)
