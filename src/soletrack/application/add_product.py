"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from soletrack.application.clock import Clock, local_now
from soletrack.domain.model.product import Product, VariantSpec
from soletrack.domain.model.shop import ShopStore
from soletrack.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, store: ShopStore, clock: Clock = local_now) -> None:
        self._store = store
        self._clock = clock

    def handle(
        self,
        name: str,
        brand: str,
        retailer_price: str,
        wholesale_price: str = "0",
        image_url: str = "",
        description: str = "",
        variants: list[VariantSpec] | None = None,
    ) -> Product:
        """Add a new product to the catalog. Its id is the creation time in ms."""
        product = Product.create(
            product_id=self._store.next_product_id(self._clock()),
            name=name,
            brand=brand,
            retailer_price=Money.of(retailer_price),
            wholesale_price=Money.of(wholesale_price or "0"),
            image_url=image_url,
            description=description,
            variants=variants,
        )
        self._store.add_product(product)
        logger.info("Added product %s '%s' with %d variant(s)", product.id, product.name, len(product.variants))
        return product
