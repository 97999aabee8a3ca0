"""In-memory fakes for testing.

These implement the same abstract interfaces as the real gateways but
keep everything in memory. No file I/O, no network, no hardware.
"""

from __future__ import annotations

from datetime import datetime, timezone

from soletrack.domain.exceptions import PrintError, RecognitionError
from soletrack.domain.gateway.persistence import PersistenceGateway
from soletrack.domain.gateway.printer import PrinterDevice
from soletrack.domain.gateway.recognition import Detection, RecognitionGateway
from soletrack.domain.model.product import Product, Variant
from soletrack.domain.model.sale import SaleRecord
from soletrack.domain.model.settings import Settings
from soletrack.domain.model.shop import ShopStore
from soletrack.domain.model.value_objects import Money

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def fixed_clock(now: datetime = NOW):
    return lambda: now


def air_max(stock: int = 12) -> Product:
    return Product(
        id="1",
        name="Air Max Pulse",
        brand="Nike",
        wholesale_price=Money.of("8500"),
        retailer_price=Money.of("12500"),
        variants=[
            Variant(color="Red/Black", size="42", stock=stock, id="v-rb42"),
            Variant(color="Red/Black", size="43", stock=8, id="v-rb43"),
        ],
    )


def ultraboost() -> Product:
    return Product(
        id="2",
        name="UltraBoost 22",
        brand="Adidas",
        wholesale_price=Money.of("11000"),
        retailer_price=Money.of("15990"),
        variants=[Variant(color="Black", size="41", stock=15, id="v-b41")],
    )


def detection(**overrides) -> Detection:
    fields = dict(
        color="Red",
        size="42",
        wholesale_price=Money.of("8000"),
        retailer_price=Money.of("12000"),
        brand="Nike",
        confidence=0.9,
        notes="",
    )
    fields.update(overrides)
    return Detection(**fields)


class FakePersistenceGateway(PersistenceGateway):

    def __init__(
        self,
        products: list[Product] | None = None,
        sales: list[SaleRecord] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.products = products
        self.sales = sales
        self.settings = settings
        self.writes: list[str] = []

    def load_catalog(self) -> list[Product] | None:
        return None if self.products is None else list(self.products)

    def save_catalog(self, products: list[Product]) -> None:
        self.products = list(products)
        self.writes.append("catalog")

    def load_ledger(self) -> list[SaleRecord] | None:
        return None if self.sales is None else list(self.sales)

    def save_ledger(self, sales: list[SaleRecord]) -> None:
        self.sales = list(sales)
        self.writes.append("ledger")

    def load_settings(self) -> Settings | None:
        return self.settings

    def save_settings(self, settings: Settings) -> None:
        self.settings = settings
        self.writes.append("settings")


class FakeRecognitionGateway(RecognitionGateway):

    def __init__(self, result: Detection | None = None, fail: bool = False, on_detect=None) -> None:
        self._result = result or detection()
        self._fail = fail
        self._on_detect = on_detect
        self.calls = 0

    def detect(self, image: bytes) -> Detection:
        self.calls += 1
        if self._on_detect is not None:
            self._on_detect()
        if self._fail:
            raise RecognitionError("service unavailable")
        return self._result


class FakePrinterDevice(PrinterDevice):

    def __init__(self, fail: bool = False) -> None:
        self._fail = fail
        self.is_open = False
        self.opened = 0
        self.closed = 0
        self.jobs: list[list[str]] = []

    def open(self) -> str:
        self.is_open = True
        self.opened += 1
        return "fake printer"

    def print_lines(self, lines: list[str]) -> None:
        if self._fail:
            raise PrintError("paper jam")
        self.jobs.append(list(lines))

    def close(self) -> None:
        self.is_open = False
        self.closed += 1


def make_store(*products: Product, sales: list[SaleRecord] | None = None) -> ShopStore:
    return ShopStore(products=list(products) if products else [air_max()], sales=sales)
