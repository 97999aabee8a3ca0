"""Application service: Sell use case (point-of-sale counter).

The variant is addressed by its stable id. Callers that only know color
and size (the CLI) have it resolved here first; an ambiguous or missing
match refuses the sale rather than recording it without a stock change.
"""

from __future__ import annotations

from soletrack.application.clock import Clock, local_now
from soletrack.application.dto import SaleDTO
from soletrack.domain.exceptions import NotFoundError, ValidationError
from soletrack.domain.model.shop import ShopStore
from soletrack.domain.service.sale_service import SaleService


class SellHandler:

    def __init__(self, store: ShopStore, clock: Clock = local_now) -> None:
        self._store = store
        self._clock = clock

    def handle(
        self,
        product_id: str,
        quantity: int,
        variant_id: str | None = None,
        color: str | None = None,
        size: str | None = None,
    ) -> SaleDTO:
        if variant_id is None:
            variant_id = self._resolve_variant(product_id, color, size)

        record = SaleService(self._store).sell(
            product_id=product_id,
            variant_id=variant_id,
            quantity=quantity,
            now=self._clock(),
        )
        return SaleDTO.of(record, self._store.settings.currency_symbol)

    def _resolve_variant(self, product_id: str, color: str | None, size: str | None) -> str:
        if not color or not size:
            raise ValidationError("Specify a variant id, or both color and size")
        product = self._store.require_product(product_id)
        matches = [v for v in product.variants if v.matches(color, size)]
        if not matches:
            raise NotFoundError(f"No {color} / {size} variant on '{product.name}'")
        if len(matches) > 1:
            raise ValidationError(
                f"{len(matches)} variants of '{product.name}' are {color} / {size}; "
                f"sell by variant id instead"
            )
        return matches[0].id
