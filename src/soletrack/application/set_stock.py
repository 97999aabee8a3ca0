"""Application service: manual stock edits on a single variant."""

from __future__ import annotations

import logging

from soletrack.domain.exceptions import ValidationError
from soletrack.domain.model.shop import ShopStore

logger = logging.getLogger(__name__)


class SetStockHandler:

    def __init__(self, store: ShopStore) -> None:
        self._store = store

    def handle(self, product_id: str, variant_index: int, new_stock: int) -> int:
        """Replace the stock count of one variant; returns the new count."""
        if isinstance(new_stock, int) and new_stock < 0:
            raise ValidationError(f"Stock cannot go below zero (asked for {new_stock})")
        variant = self._store.set_stock(product_id, variant_index, new_stock)
        logger.info(
            "Stock for product %s variant #%d (%s / %s) set to %d",
            product_id, variant_index, variant.color, variant.size, variant.stock,
        )
        return variant.stock

    def adjust(self, product_id: str, variant_index: int, delta: int) -> int:
        """Nudge stock up or down by ``delta`` (the +/- buttons)."""
        with self._store.transaction():
            product = self._store.require_product(product_id)
            current = (
                product.variants[variant_index].stock
                if 0 <= variant_index < len(product.variants)
                else 0
            )
            return self.handle(product_id, variant_index, current + delta)
