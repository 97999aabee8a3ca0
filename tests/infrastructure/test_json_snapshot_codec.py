"""Tests for the export/import document format."""

import json

import pytest

from soletrack.domain.exceptions import ImportFormatError
from soletrack.domain.gateway.snapshot import Snapshot
from soletrack.domain.model.settings import Settings
from soletrack.infrastructure.persistence.json_snapshot_codec import SNAPSHOT_VERSION, JsonSnapshotCodec
from tests.fakes import NOW, air_max, ultraboost


def _document(**overrides):
    text = JsonSnapshotCodec().dumps(
        Snapshot(products=[air_max(), ultraboost()], sales=[], settings=Settings(), exported_at=NOW)
    )
    document = json.loads(text)
    document.update(overrides)
    return document


class TestJsonSnapshotCodec:

    def test_document_layout(self):
        document = _document()
        assert document["version"] == SNAPSHOT_VERSION
        assert document["exported_at"] == NOW.isoformat()
        assert [p["id"] for p in document["products"]] == ["1", "2"]
        assert document["products"][0]["retailer_price"] == "12500"
        assert document["settings"]["currency"] == "INR"

    def test_loads_exported_at(self):
        snapshot = JsonSnapshotCodec().loads(json.dumps(_document()))
        assert snapshot.exported_at == NOW

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"version": 2}, "version"),
            ({"products": {}}, "lists"),
            ({"sales": [{"id": "x"}]}, "Malformed"),
            ({"settings": {"currency": "JPY"}}, "Malformed"),
        ],
    )
    def test_rejects(self, overrides, message):
        with pytest.raises(ImportFormatError, match=message):
            JsonSnapshotCodec().loads(json.dumps(_document(**overrides)))

    def test_missing_section(self):
        document = _document()
        del document["settings"]
        with pytest.raises(ImportFormatError, match="missing 'settings'"):
            JsonSnapshotCodec().loads(json.dumps(document))

    def test_duplicate_product_ids(self):
        document = _document()
        document["products"][1]["id"] = "1"
        with pytest.raises(ImportFormatError, match="duplicate product"):
            JsonSnapshotCodec().loads(json.dumps(document))

    def test_boolean_stock_rejected(self):
        document = _document()
        document["products"][0]["variants"][0]["stock"] = True
        with pytest.raises(ImportFormatError):
            JsonSnapshotCodec().loads(json.dumps(document))

    @pytest.mark.parametrize(
        "field, value",
        [("name", 5), ("brand", None), ("id", ["1"]), ("description", 3)],
    )
    def test_product_fields_must_be_text(self, field, value):
        document = _document()
        document["products"][0][field] = value
        with pytest.raises(ImportFormatError, match="Malformed"):
            JsonSnapshotCodec().loads(json.dumps(document))

    @pytest.mark.parametrize(
        "field, value",
        [("stock", -4), ("stock", "12"), ("color", None), ("size", 42.5)],
    )
    def test_variant_fields_checked(self, field, value):
        document = _document()
        document["products"][0]["variants"][0][field] = value
        with pytest.raises(ImportFormatError, match="Malformed"):
            JsonSnapshotCodec().loads(json.dumps(document))

    def test_sale_product_name_must_be_text(self):
        sale = {
            "id": "s1", "product_id": "1", "product_name": 7,
            "variant": {"color": "Red", "size": "42"}, "quantity": 1,
            "total_price": "100", "timestamp": NOW.isoformat(),
        }
        with pytest.raises(ImportFormatError, match="Malformed"):
            JsonSnapshotCodec().loads(json.dumps(_document(sales=[sale])))

    def test_duplicate_variant_ids(self):
        document = _document()
        document["products"][0]["variants"][1]["id"] = "v-rb42"
        with pytest.raises(ImportFormatError, match="duplicate variant ids"):
            JsonSnapshotCodec().loads(json.dumps(document))
