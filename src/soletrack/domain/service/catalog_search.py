"""Domain service: finding products by text or by a camera detection."""

from __future__ import annotations

from collections.abc import Iterable

from soletrack.domain.gateway.recognition import Detection
from soletrack.domain.model.product import Product


def search_products(products: Iterable[Product], term: str) -> list[Product]:
    """Case-insensitive substring match on name or brand. Blank term matches all."""
    if not term.strip():
        return list(products)
    return [p for p in products if p.matches_search(term)]


def match_detection(products: Iterable[Product], detection: Detection) -> Product | None:
    """First catalog product the detection plausibly refers to.

    A product matches when its name mentions the detected brand or color,
    or the detected brand mentions the product's brand.
    """
    brand = detection.brand.strip().lower()
    color = detection.color.strip().lower()
    for product in products:
        name = product.name.lower()
        product_brand = product.brand.strip().lower()
        if brand and brand in name:
            return product
        if product_brand and product_brand in brand:
            return product
        if color and color in name:
            return product
    return None
