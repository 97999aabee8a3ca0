"""Tests for scanning, AI billing and camera search."""

import pytest

from soletrack.application.recognize import (
    NOT_DETECTED_MESSAGE,
    AiBillingHandler,
    CameraSearchHandler,
    ScanHandler,
    ScanSession,
    ScanStatus,
)
from soletrack.domain.exceptions import RecognitionError, ValidationError
from soletrack.domain.model.settings import Settings
from soletrack.domain.model.value_objects import Money
from tests.fakes import FakeRecognitionGateway, detection, fixed_clock, make_store

IMAGE = b"\xff\xd8jpeg"


class TestScan:

    def test_match(self):
        result = ScanHandler(FakeRecognitionGateway()).handle(IMAGE)
        assert result.status == ScanStatus.MATCH
        assert result.detection.brand == "Nike"

    @pytest.mark.parametrize("overrides", [{"confidence": 0.1}, {"brand": "None detected"}])
    def test_no_match(self, overrides):
        result = ScanHandler(FakeRecognitionGateway(detection(**overrides))).handle(IMAGE)
        assert result.status == ScanStatus.NO_MATCH
        assert result.message == NOT_DETECTED_MESSAGE

    def test_no_match_prefers_model_notes(self):
        gateway = FakeRecognitionGateway(detection(confidence=0.0, notes="Too dark"))
        assert ScanHandler(gateway).handle(IMAGE).message == "Too dark"

    def test_empty_image(self):
        gateway = FakeRecognitionGateway()
        with pytest.raises(ValidationError):
            ScanHandler(gateway).handle(b"")
        assert gateway.calls == 0

    def test_result_after_cancel_is_discarded(self):
        session = ScanSession()
        gateway = FakeRecognitionGateway(on_detect=session.cancel)
        result = ScanHandler(gateway, session).handle(IMAGE)
        assert result.status == ScanStatus.DISCARDED
        assert result.detection is None

    def test_gateway_failure_propagates(self):
        with pytest.raises(RecognitionError):
            ScanHandler(FakeRecognitionGateway(fail=True)).handle(IMAGE)


class TestAiBilling:

    def test_complete_records_sale_without_touching_stock(self):
        store = make_store()
        handler = AiBillingHandler(store, FakeRecognitionGateway(), clock=fixed_clock())
        scan = handler.scan(IMAGE)
        sale = handler.complete(scan.detection)

        assert sale.id.startswith("AI-")
        assert sale.product_name == "Nike Red"
        assert sale.quantity == 1
        assert store.sales()[0].total_price == Money.of("12000")
        assert store.sales()[0].is_ai_sale
        assert store.require_product("1").total_stock == 20

    def test_disabled_in_settings(self):
        store = make_store()
        store.update_settings(Settings(ai_recognition_enabled=False))
        gateway = FakeRecognitionGateway()
        handler = AiBillingHandler(store, gateway, clock=fixed_clock())
        with pytest.raises(ValidationError, match="disabled"):
            handler.scan(IMAGE)
        with pytest.raises(ValidationError, match="disabled"):
            handler.complete(detection())
        assert gateway.calls == 0
        assert store.sales() == []

    def test_cannot_bill_empty_detection(self):
        store = make_store()
        handler = AiBillingHandler(store, FakeRecognitionGateway(), clock=fixed_clock())
        with pytest.raises(ValidationError):
            handler.complete(detection(confidence=0.05))
        assert store.sales() == []


class TestCameraSearch:

    def test_found_in_catalog(self):
        result = CameraSearchHandler(make_store(), FakeRecognitionGateway()).handle(IMAGE)
        assert result.product.id == "1"
        assert result.message == ""

    def test_identified_but_not_stocked(self):
        gateway = FakeRecognitionGateway(detection(brand="Asics", color="Green"))
        result = CameraSearchHandler(make_store(), gateway).handle(IMAGE)
        assert result.product is None
        assert result.message == "Identified as Asics Green, but not found in your inventory."

    def test_not_identified(self):
        gateway = FakeRecognitionGateway(detection(confidence=0.0))
        result = CameraSearchHandler(make_store(), gateway).handle(IMAGE)
        assert result.message.startswith("Could not identify shoe")
