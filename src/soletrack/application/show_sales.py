"""Application service: ledger queries."""

from __future__ import annotations

from soletrack.application.dto import SaleDTO
from soletrack.domain.exceptions import NotFoundError
from soletrack.domain.model.shop import ShopStore


class ListSalesHandler:

    def __init__(self, store: ShopStore) -> None:
        self._store = store

    def handle(self, limit: int | None = None) -> list[SaleDTO]:
        """Most recent sales first."""
        symbol = self._store.settings.currency_symbol
        sales = list(reversed(self._store.sales()))
        if limit is not None:
            sales = sales[:limit]
        return [SaleDTO.of(s, symbol) for s in sales]


class ShowSaleHandler:

    def __init__(self, store: ShopStore) -> None:
        self._store = store

    def handle(self, sale_id: str) -> SaleDTO:
        sale = self._store.get_sale(sale_id)
        if sale is None:
            raise NotFoundError(f"Sale '{sale_id}' not found")
        return SaleDTO.of(sale, self._store.settings.currency_symbol)
