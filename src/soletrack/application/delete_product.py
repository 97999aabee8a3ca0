"""Application service: Delete Product use case.

Past sales keep their own copy of the product name and variant, so the
ledger is unaffected.
"""

from __future__ import annotations

import logging

from soletrack.domain.model.shop import ShopStore

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, store: ShopStore) -> None:
        self._store = store

    def handle(self, product_id: str) -> str:
        product = self._store.delete_product(product_id)
        logger.info("Deleted product %s '%s'", product.id, product.name)
        return product.name
