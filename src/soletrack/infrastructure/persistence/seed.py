"""Demo catalog used the first time the shop starts with no stored data."""

from __future__ import annotations

from soletrack.domain.model.product import Product, Variant
from soletrack.domain.model.value_objects import Money


def demo_catalog() -> list[Product]:
    return [
        Product(
            id="1",
            name="Air Max Pulse",
            brand="Nike",
            wholesale_price=Money.of("8500"),
            retailer_price=Money.of("12500"),
            description="Iconic street style meets high-performance comfort.",
            variants=[
                Variant(color="Red/Black", size="42", stock=12),
                Variant(color="Red/Black", size="43", stock=8),
                Variant(color="White/Cyan", size="42", stock=5),
            ],
        ),
        Product(
            id="2",
            name="UltraBoost 22",
            brand="Adidas",
            wholesale_price=Money.of("11000"),
            retailer_price=Money.of("15990"),
            description="Responsive cushioning for the ultimate running experience.",
            variants=[
                Variant(color="Black", size="41", stock=15),
                Variant(color="Grey", size="42", stock=10),
            ],
        ),
        Product(
            id="3",
            name="Cloudflow 4",
            brand="On",
            wholesale_price=Money.of("9500"),
            retailer_price=Money.of("13500"),
            description="Lightweight performance with superior grip.",
            variants=[
                Variant(color="Navy", size="44", stock=7),
                Variant(color="Orange", size="42", stock=4),
            ],
        ),
    ]
