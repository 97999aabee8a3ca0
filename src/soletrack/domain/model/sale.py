"""SaleRecord — an immutable entry in the sales ledger.

Everything a receipt or report needs is copied into the record at sale
time. Later edits to the product (price, name, stock) or its deletion
never reach back into history.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from soletrack.domain.model.product import Product, Variant
from soletrack.domain.model.value_objects import Money, Quantity

AI_PRODUCT_ID = "ai-detected"
AI_SALE_PREFIX = "AI-"


@dataclass(frozen=True)
class VariantSnapshot:
    """Copy of a variant's color, size and stock at sale time."""

    color: str
    size: str
    stock: int = 0

    @staticmethod
    def of(variant: Variant) -> VariantSnapshot:
        return VariantSnapshot(color=variant.color, size=variant.size, stock=variant.stock)


@dataclass(frozen=True)
class SaleRecord:
    id: str
    product_id: str
    product_name: str
    variant: VariantSnapshot
    quantity: Quantity
    total_price: Money
    timestamp: datetime

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def for_product(
        sale_id: str,
        product: Product,
        variant: Variant,
        quantity: Quantity,
        timestamp: datetime,
    ) -> SaleRecord:
        """Snapshot a catalog sale. Price is locked at the current retail price."""
        return SaleRecord(
            id=sale_id,
            product_id=product.id,
            product_name=product.name,
            variant=VariantSnapshot.of(variant),
            quantity=quantity,
            total_price=product.retailer_price * quantity.value,
            timestamp=timestamp,
        )

    @staticmethod
    def for_detection(
        sale_id: str,
        brand: str,
        color: str,
        size: str,
        retailer_price: Money,
        timestamp: datetime,
    ) -> SaleRecord:
        """Record a sale straight from an image detection.

        The item may not exist in the catalog, so no product is referenced
        and no stock is touched.
        """
        return SaleRecord(
            id=sale_id,
            product_id=AI_PRODUCT_ID,
            product_name=f"{brand} {color}".strip(),
            variant=VariantSnapshot(color=color, size=size, stock=0),
            quantity=Quantity(1),
            total_price=retailer_price,
            timestamp=timestamp,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def unit_price(self) -> Money:
        return self.total_price / self.quantity.value

    @property
    def bill_number(self) -> str:
        return self.id[-6:]

    @property
    def is_ai_sale(self) -> bool:
        return self.product_id == AI_PRODUCT_ID
