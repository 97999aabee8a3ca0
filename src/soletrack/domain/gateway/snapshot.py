"""Full-state snapshot contract used by export and import."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from soletrack.domain.model.product import Product
from soletrack.domain.model.sale import SaleRecord
from soletrack.domain.model.settings import Settings


@dataclass(frozen=True)
class Snapshot:
    products: list[Product]
    sales: list[SaleRecord]
    settings: Settings
    exported_at: datetime


class SnapshotCodec(ABC):

    @abstractmethod
    def dumps(self, snapshot: Snapshot) -> str:
        """Serialize a snapshot to a single text document."""

    @abstractmethod
    def loads(self, text: str) -> Snapshot:
        """Parse a document produced by ``dumps``.

        Raises ImportFormatError on anything malformed.
        """
