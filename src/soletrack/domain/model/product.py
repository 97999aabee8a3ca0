"""Product aggregate and its size/color variants.

Products live independently of sales. They have their own lifecycle:
stock changes, variants are added, products are deleted from the catalog.
Sales never hold a reference to a Product; they copy what they need.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from soletrack.domain.exceptions import NotFoundError, ValidationError
from soletrack.domain.model.value_objects import Money

DEFAULT_IMAGE_URL = (
    "https://images.unsplash.com/photo-1542291026-7eec264c27ff"
    "?auto=format&fit=crop&q=80&w=600"
)
DEFAULT_VARIANT_COLOR = "Standard"
DEFAULT_VARIANT_SIZE = "One Size"


def new_variant_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass
class Variant:
    """A specific color + size of a product with its own stock count.

    ``id`` is assigned once at creation and never reused, so a variant can
    be addressed unambiguously even if two entries share color and size.
    """

    color: str
    size: str
    stock: int
    id: str = field(default_factory=new_variant_id)

    def matches(self, color: str, size: str) -> bool:
        return (
            self.color.strip().lower() == color.strip().lower()
            and self.size.strip().lower() == size.strip().lower()
        )


@dataclass(frozen=True)
class VariantSpec:
    """Input: one variant row of the catalog-entry form."""

    color: str
    size: str
    stock: int = 0

    @property
    def is_blank(self) -> bool:
        return not self.color.strip() or not self.size.strip()


@dataclass
class Product:
    """A shoe model in the catalog.

    Aggregate root for its variants. Use ``Product.create()`` for new
    products; ``__init__`` stays simple so persisted products can be
    reconstituted without re-validating.
    """

    id: str
    name: str
    brand: str
    wholesale_price: Money
    retailer_price: Money
    image_url: str = DEFAULT_IMAGE_URL
    description: str = ""
    variants: list[Variant] = field(default_factory=list)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        product_id: str,
        name: str,
        brand: str,
        retailer_price: Money,
        wholesale_price: Money | None = None,
        image_url: str = "",
        description: str = "",
        variants: list[VariantSpec] | None = None,
    ) -> Product:
        """Create a product the way the catalog-entry form does.

        Blank variant rows are dropped. A product with no usable rows gets
        a single "Standard / One Size" variant with one unit in stock.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not brand or not brand.strip():
            raise ValidationError("Brand is required")
        if retailer_price.is_zero:
            raise ValidationError("Retail price must be greater than zero")

        rows = [spec for spec in variants or [] if not spec.is_blank]
        product = Product(
            id=product_id,
            name=name.strip(),
            brand=brand.strip(),
            wholesale_price=wholesale_price or Money.zero(),
            retailer_price=retailer_price,
            image_url=image_url.strip() or DEFAULT_IMAGE_URL,
            description=description.strip(),
        )
        if not rows:
            product.add_variant(DEFAULT_VARIANT_COLOR, DEFAULT_VARIANT_SIZE, 1)
        for spec in rows:
            product.add_variant(spec.color, spec.size, spec.stock)
        return product

    # --- Stock mutation -------------------------------------------------------

    def set_stock(self, variant_index: int, new_stock: int) -> Variant:
        """Replace the stock count of the variant at ``variant_index``.

        No lower bound is enforced here; the sale path guards against
        overselling.
        """
        if not isinstance(new_stock, int) or isinstance(new_stock, bool):
            raise ValidationError(
                f"Stock must be an integer, got {type(new_stock).__name__}"
            )
        if not 0 <= variant_index < len(self.variants):
            raise NotFoundError(
                f"Variant #{variant_index} not found on product '{self.name}'"
            )
        variant = self.variants[variant_index]
        variant.stock = new_stock
        return variant

    def add_variant(self, color: str, size: str, stock: int = 0) -> Variant:
        """Append a new variant.

        Rejects a second entry with the same color and size.
        """
        if not color or not color.strip():
            raise ValidationError("Variant color is required")
        if not size or not size.strip():
            raise ValidationError("Variant size is required")
        if not isinstance(stock, int) or isinstance(stock, bool) or stock < 0:
            raise ValidationError("Variant stock must be a non-negative integer")
        if self.find_variant(color, size) is not None:
            raise ValidationError(
                f"Variant {color.strip()} / {size.strip()} already exists on '{self.name}'"
            )
        variant = Variant(color=color.strip(), size=size.strip(), stock=stock)
        self.variants.append(variant)
        return variant

    # --- Lookups --------------------------------------------------------------

    def variant_by_id(self, variant_id: str) -> Variant | None:
        for variant in self.variants:
            if variant.id == variant_id:
                return variant
        return None

    def find_variant(self, color: str, size: str) -> Variant | None:
        for variant in self.variants:
            if variant.matches(color, size):
                return variant
        return None

    def index_of(self, variant_id: str) -> int:
        for i, variant in enumerate(self.variants):
            if variant.id == variant_id:
                return i
        raise NotFoundError(f"Variant '{variant_id}' not found on product '{self.name}'")

    # --- Computed properties --------------------------------------------------

    @property
    def total_stock(self) -> int:
        return sum(v.stock for v in self.variants)

    @property
    def margin(self) -> Money:
        if self.retailer_price < self.wholesale_price:
            return Money.zero()
        return self.retailer_price - self.wholesale_price

    def variants_by_color(self) -> dict[str, list[Variant]]:
        """Group variants by color, each group ordered by numeric size."""
        groups: dict[str, list[Variant]] = {}
        for variant in self.variants:
            groups.setdefault(variant.color, []).append(variant)
        for group in groups.values():
            group.sort(key=lambda v: _size_key(v.size))
        return groups

    def matches_search(self, term: str) -> bool:
        needle = term.strip().lower()
        return needle in self.name.lower() or needle in self.brand.lower()


def _size_key(size: str) -> tuple[int, float, str]:
    try:
        return (0, float(size), size)
    except ValueError:
        return (1, 0.0, size)
