"""Application services around the image-recognition gateway.

A capture view owns a ScanSession. Every scan takes a token from it;
closing the view or starting another scan invalidates older tokens, and
a result that comes back with a stale token is dropped instead of
being applied to whatever the view now shows.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum

from soletrack.application.clock import Clock, local_now
from soletrack.application.dto import SaleDTO
from soletrack.domain.exceptions import ValidationError
from soletrack.domain.gateway.recognition import Detection, RecognitionGateway
from soletrack.domain.model.product import Product
from soletrack.domain.model.sale import AI_SALE_PREFIX, SaleRecord
from soletrack.domain.model.shop import ShopStore
from soletrack.domain.service.catalog_search import match_detection

logger = logging.getLogger(__name__)

NOT_DETECTED_MESSAGE = "Shoe not clearly detected. Try again."


class ScanStatus(Enum):
    MATCH = "MATCH"
    NO_MATCH = "NO_MATCH"
    DISCARDED = "DISCARDED"


@dataclass(frozen=True)
class ScanResult:
    status: ScanStatus
    detection: Detection | None = None
    message: str = ""


class ScanSession:

    def __init__(self) -> None:
        self._generation = 0
        self._lock = threading.Lock()

    def begin(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def cancel(self) -> None:
        with self._lock:
            self._generation += 1

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._generation


class ScanHandler:
    """Run one detection and classify it as match, no-match or stale.

    Gateway failures propagate as RecognitionError so the caller can
    offer a retry.
    """

    def __init__(self, gateway: RecognitionGateway, session: ScanSession | None = None) -> None:
        self._gateway = gateway
        self._session = session or ScanSession()

    @property
    def session(self) -> ScanSession:
        return self._session

    def handle(self, image: bytes) -> ScanResult:
        if not image:
            raise ValidationError("No image captured")

        token = self._session.begin()
        detection = self._gateway.detect(image)

        if not self._session.is_current(token):
            logger.debug("Discarding stale detection for scan #%d", token)
            return ScanResult(status=ScanStatus.DISCARDED)
        if not detection.is_match:
            return ScanResult(
                status=ScanStatus.NO_MATCH,
                detection=detection,
                message=detection.notes or NOT_DETECTED_MESSAGE,
            )
        return ScanResult(status=ScanStatus.MATCH, detection=detection)


class AiBillingHandler:
    """Point-of-sale fast path: scan a shoe and bill it without the catalog."""

    def __init__(
        self,
        store: ShopStore,
        gateway: RecognitionGateway,
        session: ScanSession | None = None,
        clock: Clock = local_now,
    ) -> None:
        self._store = store
        self._scanner = ScanHandler(gateway, session)
        self._clock = clock

    def scan(self, image: bytes) -> ScanResult:
        if not self._store.settings.ai_recognition_enabled:
            raise ValidationError("AI billing is disabled in settings")
        return self._scanner.handle(image)

    def complete(self, detection: Detection) -> SaleDTO:
        """Record the detected shoe as a one-unit sale. Stock is not touched."""
        if not self._store.settings.ai_recognition_enabled:
            raise ValidationError("AI billing is disabled in settings")
        if not detection.is_match:
            raise ValidationError("Cannot bill an item that was not detected")

        now = self._clock()
        record = SaleRecord.for_detection(
            sale_id=self._store.next_sale_id(now, prefix=AI_SALE_PREFIX),
            brand=detection.brand,
            color=detection.color,
            size=detection.size,
            retailer_price=detection.retailer_price,
            timestamp=now,
        )
        self._store.append_sale(record)
        logger.info("Recorded AI sale %s: %s for %s", record.id, record.product_name, record.total_price)
        return SaleDTO.of(record, self._store.settings.currency_symbol)


@dataclass(frozen=True)
class CameraSearchResult:
    scan: ScanResult
    product: Product | None = None

    @property
    def message(self) -> str:
        if self.product is not None or self.scan.status == ScanStatus.DISCARDED:
            return ""
        if self.scan.status == ScanStatus.NO_MATCH or self.scan.detection is None:
            return "Could not identify shoe. Try a clearer angle."
        d = self.scan.detection
        return f"Identified as {d.brand} {d.color}, but not found in your inventory."


class CameraSearchHandler:
    """Identify a shoe on camera and find it in the catalog."""

    def __init__(
        self,
        store: ShopStore,
        gateway: RecognitionGateway,
        session: ScanSession | None = None,
    ) -> None:
        self._store = store
        self._scanner = ScanHandler(gateway, session)

    def handle(self, image: bytes) -> CameraSearchResult:
        scan = self._scanner.handle(image)
        if scan.status != ScanStatus.MATCH or scan.detection is None:
            return CameraSearchResult(scan=scan)
        return CameraSearchResult(
            scan=scan,
            product=match_detection(self._store.products(), scan.detection),
        )
