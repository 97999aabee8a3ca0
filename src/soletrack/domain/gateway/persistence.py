"""Abstract persistence gateway.

Defined in the domain layer so the domain never depends on
infrastructure. Catalog, ledger and settings are three independently
stored blobs, each rewritten wholesale when it changes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from soletrack.domain.model.product import Product
from soletrack.domain.model.sale import SaleRecord
from soletrack.domain.model.settings import Settings


class PersistenceGateway(ABC):

    @abstractmethod
    def load_catalog(self) -> list[Product] | None:
        """Return the stored catalog, or None if nothing was ever stored."""

    @abstractmethod
    def save_catalog(self, products: list[Product]) -> None:
        """Replace the stored catalog."""

    @abstractmethod
    def load_ledger(self) -> list[SaleRecord] | None:
        """Return the stored sales ledger, or None if nothing was ever stored."""

    @abstractmethod
    def save_ledger(self, sales: list[SaleRecord]) -> None:
        """Replace the stored sales ledger."""

    @abstractmethod
    def load_settings(self) -> Settings | None:
        """Return the stored settings, or None if nothing was ever stored."""

    @abstractmethod
    def save_settings(self, settings: Settings) -> None:
        """Replace the stored settings."""
