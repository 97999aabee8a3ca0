"""Application service: Add Variant use case."""

from __future__ import annotations

import logging

from soletrack.application.dto import VariantLineDTO
from soletrack.domain.model.shop import ShopStore

logger = logging.getLogger(__name__)


class AddVariantHandler:

    def __init__(self, store: ShopStore) -> None:
        self._store = store

    def handle(self, product_id: str, color: str, size: str, stock: int = 10) -> VariantLineDTO:
        variant = self._store.add_variant(product_id, color, size, stock)
        product = self._store.require_product(product_id)
        logger.info("Added variant %s / %s to product %s", variant.color, variant.size, product_id)
        return VariantLineDTO(
            index=product.index_of(variant.id),
            id=variant.id,
            color=variant.color,
            size=variant.size,
            stock=variant.stock,
        )
