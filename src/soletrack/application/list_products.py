"""Application service: List / search products (query)."""

from __future__ import annotations

from soletrack.application.dto import ProductDTO
from soletrack.domain.exceptions import NotFoundError
from soletrack.domain.model.shop import ShopStore
from soletrack.domain.service.catalog_search import search_products


class ListProductsHandler:

    def __init__(self, store: ShopStore) -> None:
        self._store = store

    def handle(self, search: str = "") -> list[ProductDTO]:
        symbol = self._store.settings.currency_symbol
        return [ProductDTO.of(p, symbol) for p in search_products(self._store.products(), search)]


class ShowProductHandler:

    def __init__(self, store: ShopStore) -> None:
        self._store = store

    def handle(self, product_id: str) -> ProductDTO:
        product = self._store.get_product(product_id)
        if product is None:
            raise NotFoundError(f"Product '{product_id}' not found")
        return ProductDTO.of(product, self._store.settings.currency_symbol)
