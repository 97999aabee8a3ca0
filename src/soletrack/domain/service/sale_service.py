"""Domain service: Sell.

Selling touches two things at once: the variant's stock in the catalog
and the ledger. Both happen inside one store transaction, under the
store lock, after every check has passed:

  Phase 1 — validate: quantity, product, variant, stock. Nothing changes.
  Phase 2 — mutate: decrement stock, append the record.

So either both effects are visible to observers, or neither is.
"""

from __future__ import annotations

import logging
from datetime import datetime

from soletrack.domain.exceptions import NotFoundError, StockInsufficientError
from soletrack.domain.model.sale import SaleRecord
from soletrack.domain.model.shop import ShopStore
from soletrack.domain.model.value_objects import Quantity

logger = logging.getLogger(__name__)


class SaleService:

    def __init__(self, store: ShopStore) -> None:
        self._store = store

    def sell(
        self,
        product_id: str,
        variant_id: str,
        quantity: int,
        now: datetime,
    ) -> SaleRecord:
        qty = Quantity(quantity)

        with self._store.transaction():
            # Phase 1: validate
            product = self._store.require_product(product_id)
            variant = product.variant_by_id(variant_id)
            if variant is None:
                raise NotFoundError(
                    f"Variant '{variant_id}' no longer exists on '{product.name}'"
                )
            if qty.value > variant.stock:
                raise StockInsufficientError(
                    f"Insufficient stock for {product.name} {variant.color} / {variant.size} "
                    f"(need {qty.value}, have {variant.stock})"
                )

            record = SaleRecord.for_product(
                sale_id=self._store.next_sale_id(now),
                product=product,
                variant=variant,
                quantity=qty,
                timestamp=now,
            )

            # Phase 2: mutate
            index = product.index_of(variant.id)
            self._store.set_stock(product.id, index, variant.stock - qty.value)
            self._store.append_sale(record)

        logger.info(
            "Sold %d x %s (%s / %s) for %s",
            qty.value, product.name, variant.color, variant.size, record.total_price,
        )
        return record
