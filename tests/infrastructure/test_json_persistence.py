"""Tests for the JSON file store and the store/persistence wiring."""

import json

import pytest

from soletrack.application.sell import SellHandler
from soletrack.domain.exceptions import PersistenceError
from soletrack.domain.model.settings import Currency, Settings
from soletrack.infrastructure.persistence.json_persistence_gateway import JsonPersistenceGateway
from soletrack.infrastructure.persistence.seed import demo_catalog
from soletrack.infrastructure.persistence.store_sync import open_store
from tests.fakes import FakePersistenceGateway, air_max, fixed_clock


class TestJsonPersistenceGateway:

    def test_nothing_stored(self, tmp_path):
        gateway = JsonPersistenceGateway(tmp_path / "missing")
        assert gateway.load_catalog() is None
        assert gateway.load_ledger() is None
        assert gateway.load_settings() is None

    def test_write_then_read(self, tmp_path):
        gateway = JsonPersistenceGateway(tmp_path)
        gateway.save_catalog([air_max()])
        gateway.save_settings(Settings(currency=Currency.USD, ai_recognition_enabled=False))

        assert gateway.load_catalog() == [air_max()]
        assert gateway.load_settings() == Settings(currency=Currency.USD, ai_recognition_enabled=False)
        assert not list(tmp_path.glob("*.tmp"))

    def test_corrupt_file(self, tmp_path):
        (tmp_path / "products.json").write_text("{nope", encoding="utf-8")
        with pytest.raises(PersistenceError):
            JsonPersistenceGateway(tmp_path).load_catalog()

    def test_wrong_shape(self, tmp_path):
        (tmp_path / "sales.json").write_text(json.dumps([{"id": "1"}]), encoding="utf-8")
        with pytest.raises(PersistenceError, match="Corrupt"):
            JsonPersistenceGateway(tmp_path).load_ledger()

    def test_duplicate_variant_ids(self, tmp_path):
        raw = [{
            "id": "1", "name": "Shoe", "brand": "B", "retailer_price": "100",
            "variants": [
                {"id": "v1", "color": "Red", "size": "42", "stock": 1},
                {"id": "v1", "color": "Red", "size": "43", "stock": 1},
            ],
        }]
        (tmp_path / "products.json").write_text(json.dumps(raw), encoding="utf-8")
        with pytest.raises(PersistenceError, match="duplicate variant ids"):
            JsonPersistenceGateway(tmp_path).load_catalog()

    def test_legacy_records(self, tmp_path):
        (tmp_path / "products.json").write_text(json.dumps([{
            "id": 7, "name": "Old", "brand": "B", "retailer_price": 100,
            "variants": [{"color": "Red", "size": 42, "stock": 3}],
        }]), encoding="utf-8")
        (tmp_path / "sales.json").write_text(json.dumps([{
            "id": "1760875200000", "product_id": "7", "product_name": "Old",
            "variant": {"color": "Red", "size": "42"}, "quantity": 1,
            "total_price": "100", "timestamp": 1760875200000,
        }]), encoding="utf-8")
        gateway = JsonPersistenceGateway(tmp_path)

        [product] = gateway.load_catalog()
        assert product.id == "7"
        assert product.variants[0].size == "42"
        assert product.variants[0].id
        [sale] = gateway.load_ledger()
        assert sale.timestamp.year == 2025


class TestOpenStore:

    def test_defaults_when_nothing_stored(self):
        store = open_store(FakePersistenceGateway(), default_catalog=demo_catalog)
        assert [p.name for p in store.products()] == ["Air Max Pulse", "UltraBoost 22", "Cloudflow 4"]
        assert store.sales() == []
        assert store.settings == Settings()

    def test_stored_empty_catalog_is_not_replaced(self):
        store = open_store(FakePersistenceGateway(products=[]), default_catalog=demo_catalog)
        assert store.products() == []

    def test_sale_writes_catalog_and_ledger(self):
        gateway = FakePersistenceGateway(products=[air_max()])
        store = open_store(gateway)
        SellHandler(store, fixed_clock()).handle("1", 2, variant_id="v-rb42")

        assert gateway.writes == ["catalog", "ledger"]
        assert gateway.products[0].variants[0].stock == 10
        assert len(gateway.sales) == 1

    def test_survives_restart(self, tmp_path):
        store = open_store(JsonPersistenceGateway(tmp_path), default_catalog=demo_catalog)
        product = store.products()[0]
        SellHandler(store, fixed_clock()).handle(product.id, 1, variant_id=product.variants[0].id)

        reopened = open_store(JsonPersistenceGateway(tmp_path), default_catalog=list)
        assert reopened.products() == store.products()
        assert reopened.sales() == store.sales()
