"""JSON-file-backed implementation of PersistenceGateway.

One file per blob inside a data directory. A missing file means
"nothing stored yet"; the caller falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from soletrack.domain.exceptions import PersistenceError
from soletrack.domain.gateway.persistence import PersistenceGateway
from soletrack.domain.model.product import Product
from soletrack.domain.model.sale import SaleRecord
from soletrack.domain.model.settings import Settings
from soletrack.infrastructure.persistence.codec import (
    DECODE_ERRORS,
    product_from_raw,
    product_to_raw,
    sale_from_raw,
    sale_to_raw,
    settings_from_raw,
    settings_to_raw,
)

logger = logging.getLogger(__name__)

CATALOG_FILE = "products.json"
LEDGER_FILE = "sales.json"
SETTINGS_FILE = "settings.json"


class JsonPersistenceGateway(PersistenceGateway):

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    # --- PersistenceGateway interface -----------------------------------------

    def load_catalog(self) -> list[Product] | None:
        raw = self._load_raw(CATALOG_FILE)
        if raw is None:
            return None
        return self._decode(CATALOG_FILE, lambda: [product_from_raw(p) for p in raw])

    def save_catalog(self, products: list[Product]) -> None:
        self._persist_raw(CATALOG_FILE, [product_to_raw(p) for p in products])

    def load_ledger(self) -> list[SaleRecord] | None:
        raw = self._load_raw(LEDGER_FILE)
        if raw is None:
            return None
        return self._decode(LEDGER_FILE, lambda: [sale_from_raw(s) for s in raw])

    def save_ledger(self, sales: list[SaleRecord]) -> None:
        self._persist_raw(LEDGER_FILE, [sale_to_raw(s) for s in sales])

    def load_settings(self) -> Settings | None:
        raw = self._load_raw(SETTINGS_FILE)
        if raw is None:
            return None
        return self._decode(SETTINGS_FILE, lambda: settings_from_raw(raw))

    def save_settings(self, settings: Settings) -> None:
        self._persist_raw(SETTINGS_FILE, settings_to_raw(settings))

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self, name: str):
        path = self._data_dir / name
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Could not read {path}: {exc}") from exc

    def _persist_raw(self, name: str, payload) -> None:
        path = self._data_dir / name
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            tmp.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
            tmp.replace(path)
        except OSError as exc:
            raise PersistenceError(f"Could not write {path}: {exc}") from exc
        logger.debug("Wrote %s", path)

    def _decode(self, name: str, build):
        try:
            return build()
        except DECODE_ERRORS as exc:
            raise PersistenceError(f"Corrupt {name} in {self._data_dir}: {exc}") from exc
