"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is pre-formatted
with the shop's currency symbol.
"""

from __future__ import annotations

from dataclasses import dataclass

from soletrack.domain.model.product import Product
from soletrack.domain.model.sale import SaleRecord


@dataclass(frozen=True)
class VariantLineDTO:
    index: int
    id: str
    color: str
    size: str
    stock: int


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    brand: str
    wholesale_price: str
    retailer_price: str
    description: str
    total_stock: int
    variants: list[VariantLineDTO]

    @staticmethod
    def of(product: Product, symbol: str) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            brand=product.brand,
            wholesale_price=product.wholesale_price.format(symbol),
            retailer_price=product.retailer_price.format(symbol),
            description=product.description,
            total_stock=product.total_stock,
            variants=[
                VariantLineDTO(index=i, id=v.id, color=v.color, size=v.size, stock=v.stock)
                for i, v in enumerate(product.variants)
            ],
        )


@dataclass(frozen=True)
class SaleDTO:
    id: str
    bill_number: str
    product_name: str
    color: str
    size: str
    quantity: int
    unit_price: str
    total_price: str
    sold_at: str

    @staticmethod
    def of(sale: SaleRecord, symbol: str) -> SaleDTO:
        return SaleDTO(
            id=sale.id,
            bill_number=sale.bill_number,
            product_name=sale.product_name,
            color=sale.variant.color,
            size=sale.variant.size,
            quantity=sale.quantity.value,
            unit_price=sale.unit_price.format(symbol),
            total_price=sale.total_price.format(symbol),
            sold_at=sale.timestamp.strftime("%Y-%m-%d %H:%M %Z"),
        )
