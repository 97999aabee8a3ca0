"""Application services: full-state export and import.

Import is destructive: it replaces catalog, ledger and settings at once.
The document is parsed completely before anything is touched, and the
caller must confirm explicitly.
"""

from __future__ import annotations

import logging

from soletrack.application.clock import Clock, local_now
from soletrack.domain.exceptions import ValidationError
from soletrack.domain.gateway.snapshot import Snapshot, SnapshotCodec
from soletrack.domain.model.shop import ShopStore

logger = logging.getLogger(__name__)


class ExportSnapshotHandler:

    def __init__(self, store: ShopStore, codec: SnapshotCodec, clock: Clock = local_now) -> None:
        self._store = store
        self._codec = codec
        self._clock = clock

    def handle(self) -> str:
        snapshot = Snapshot(
            products=self._store.products(),
            sales=self._store.sales(),
            settings=self._store.settings,
            exported_at=self._clock(),
        )
        return self._codec.dumps(snapshot)


class ImportSnapshotHandler:

    def __init__(self, store: ShopStore, codec: SnapshotCodec) -> None:
        self._store = store
        self._codec = codec

    def handle(self, text: str, confirmed: bool = False) -> Snapshot:
        snapshot = self._codec.loads(text)
        if not confirmed:
            raise ValidationError(
                "Import replaces all products, sales and settings; confirmation required"
            )
        self._store.replace_all(snapshot.products, snapshot.sales, snapshot.settings)
        logger.info(
            "Imported snapshot from %s: %d products, %d sales",
            snapshot.exported_at.isoformat(), len(snapshot.products), len(snapshot.sales),
        )
        return snapshot
