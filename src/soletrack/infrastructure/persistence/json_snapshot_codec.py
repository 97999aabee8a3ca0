"""JSON implementation of the export/import snapshot document."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from soletrack.domain.exceptions import ImportFormatError
from soletrack.domain.gateway.snapshot import Snapshot, SnapshotCodec
from soletrack.infrastructure.persistence.codec import (
    DECODE_ERRORS,
    product_from_raw,
    product_to_raw,
    sale_from_raw,
    sale_to_raw,
    settings_from_raw,
    settings_to_raw,
)

SNAPSHOT_VERSION = 1


class JsonSnapshotCodec(SnapshotCodec):

    def dumps(self, snapshot: Snapshot) -> str:
        document = {
            "version": SNAPSHOT_VERSION,
            "exported_at": snapshot.exported_at.isoformat(),
            "products": [product_to_raw(p) for p in snapshot.products],
            "sales": [sale_to_raw(s) for s in snapshot.sales],
            "settings": settings_to_raw(snapshot.settings),
        }
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"

    def loads(self, text: str) -> Snapshot:
        try:
            document = json.loads(text)
        except ValueError as exc:
            raise ImportFormatError(f"Snapshot is not valid JSON: {exc}") from exc

        if not isinstance(document, dict):
            raise ImportFormatError("Snapshot must be a JSON object")
        version = document.get("version", SNAPSHOT_VERSION)
        if version != SNAPSHOT_VERSION:
            raise ImportFormatError(f"Unsupported snapshot version {version!r}")
        for key in ("products", "sales", "settings"):
            if key not in document:
                raise ImportFormatError(f"Snapshot is missing '{key}'")
        if not isinstance(document["products"], list) or not isinstance(document["sales"], list):
            raise ImportFormatError("Snapshot 'products' and 'sales' must be lists")

        try:
            products = [product_from_raw(p) for p in document["products"]]
            sales = [sale_from_raw(s) for s in document["sales"]]
            settings = settings_from_raw(document["settings"])
            exported_at = (
                datetime.fromisoformat(document["exported_at"])
                if document.get("exported_at")
                else datetime.now(timezone.utc)
            )
        except DECODE_ERRORS as exc:
            raise ImportFormatError(f"Malformed snapshot: {exc}") from exc

        product_ids = [p.id for p in products]
        if len(set(product_ids)) != len(product_ids):
            raise ImportFormatError("Snapshot contains duplicate product ids")
        sale_ids = [s.id for s in sales]
        if len(set(sale_ids)) != len(sale_ids):
            raise ImportFormatError("Snapshot contains duplicate sale ids")

        return Snapshot(products=products, sales=sales, settings=settings, exported_at=exported_at)
