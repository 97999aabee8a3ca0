"""Conversion between domain objects and JSON-ready dicts.

Shared by the JSON store files and the export/import snapshot so both
use the same field layout. Decimals are written as strings and
timestamps as ISO 8601 so a write-then-read is lossless.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation

from soletrack.domain.exceptions import DomainException
from soletrack.domain.model.product import Product, Variant, new_variant_id
from soletrack.domain.model.sale import SaleRecord, VariantSnapshot
from soletrack.domain.model.settings import CompanyInfo, Currency, Settings
from soletrack.domain.model.value_objects import Money, Quantity

# Anything a malformed document can make the decoders raise.
DECODE_ERRORS = (
    KeyError, TypeError, ValueError, AttributeError, InvalidOperation, DomainException,
)


# --- Products -----------------------------------------------------------------


def product_to_raw(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "brand": product.brand,
        "wholesale_price": str(product.wholesale_price.amount),
        "retailer_price": str(product.retailer_price.amount),
        "image_url": product.image_url,
        "description": product.description,
        "variants": [
            {"id": v.id, "color": v.color, "size": v.size, "stock": v.stock}
            for v in product.variants
        ],
    }


def product_from_raw(raw: dict) -> Product:
    variants = [
        Variant(
            color=_as_str(v["color"]),
            size=_as_key(v["size"]),
            stock=_as_count(v["stock"]),
            # Older files have no variant ids; mint one on first load.
            id=_as_str(v.get("id") or new_variant_id()),
        )
        for v in _as_list(raw.get("variants", []))
    ]
    variant_ids = [v.id for v in variants]
    if len(set(variant_ids)) != len(variant_ids):
        raise ValueError(f"Product {raw['id']!r} has duplicate variant ids")

    return Product(
        id=_as_key(raw["id"]),
        name=_as_str(raw["name"]),
        brand=_as_str(raw["brand"]),
        wholesale_price=Money(Decimal(str(raw.get("wholesale_price", "0")))),
        retailer_price=Money(Decimal(str(raw["retailer_price"]))),
        image_url=_as_str(raw.get("image_url", "")),
        description=_as_str(raw.get("description", "")),
        variants=variants,
    )


# --- Sales --------------------------------------------------------------------


def sale_to_raw(sale: SaleRecord) -> dict:
    return {
        "id": sale.id,
        "product_id": sale.product_id,
        "product_name": sale.product_name,
        "variant": {
            "color": sale.variant.color,
            "size": sale.variant.size,
            "stock": sale.variant.stock,
        },
        "quantity": sale.quantity.value,
        "total_price": str(sale.total_price.amount),
        "timestamp": sale.timestamp.isoformat(),
    }


def sale_from_raw(raw: dict) -> SaleRecord:
    variant = raw["variant"]
    return SaleRecord(
        id=_as_key(raw["id"]),
        product_id=_as_key(raw["product_id"]),
        product_name=_as_str(raw["product_name"]),
        variant=VariantSnapshot(
            color=_as_str(variant["color"]),
            size=_as_key(variant["size"]),
            stock=_as_count(variant.get("stock", 0)),
        ),
        quantity=Quantity(_as_int(raw["quantity"])),
        total_price=Money(Decimal(str(raw["total_price"]))),
        timestamp=_parse_timestamp(raw["timestamp"]),
    )


# --- Settings -----------------------------------------------------------------


def settings_to_raw(settings: Settings) -> dict:
    company = settings.company
    return {
        "ai_recognition_enabled": settings.ai_recognition_enabled,
        "currency": settings.currency.value,
        "company": {
            "name": company.name,
            "address": company.address,
            "phone": company.phone,
            "logo": company.logo,
        },
    }


def settings_from_raw(raw: dict) -> Settings:
    defaults = Settings()
    company = raw.get("company") or {}
    enabled = raw.get("ai_recognition_enabled", defaults.ai_recognition_enabled)
    if not isinstance(enabled, bool):
        raise TypeError("ai_recognition_enabled must be a boolean")
    logo = company.get("logo")
    return Settings(
        ai_recognition_enabled=enabled,
        currency=Currency(raw.get("currency", defaults.currency.value)),
        company=CompanyInfo(
            name=_as_str(company.get("name", defaults.company.name)),
            address=_as_str(company.get("address", defaults.company.address)),
            phone=_as_str(company.get("phone", defaults.company.phone)),
            logo=None if logo is None else _as_str(logo),
        ),
    )


# --- Helpers ------------------------------------------------------------------


def _as_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {value!r}")
    return value


def _as_count(value: object) -> int:
    count = _as_int(value)
    if count < 0:
        raise ValueError(f"Stock cannot be negative, got {count}")
    return count


def _as_str(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got {value!r}")
    return value


def _as_key(value: object) -> str:
    # Ids and sizes were numbers in some older files.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return _as_str(value)


def _as_list(value: object) -> list:
    if not isinstance(value, list):
        raise TypeError(f"Expected a list, got {value!r}")
    return value


def _parse_timestamp(value: object) -> datetime:
    # Legacy records carry epoch milliseconds; they and naive ISO strings
    # are read as shop-local time.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000).astimezone()
    parsed = datetime.fromisoformat(_as_str(value))
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed
