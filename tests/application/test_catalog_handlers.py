"""Tests for the catalog use cases: add, list, show, delete, stock edits."""

import pytest

from soletrack.application.add_product import AddProductHandler
from soletrack.application.add_variant import AddVariantHandler
from soletrack.application.delete_product import DeleteProductHandler
from soletrack.application.list_products import ListProductsHandler, ShowProductHandler
from soletrack.application.set_stock import SetStockHandler
from soletrack.domain.exceptions import NotFoundError, ValidationError
from soletrack.domain.model.product import VariantSpec
from soletrack.domain.model.shop import ShopStore
from tests.fakes import NOW, fixed_clock, make_store, ultraboost


class TestAddProduct:

    def test_adds_with_timestamp_id(self):
        store = ShopStore()
        product = AddProductHandler(store, fixed_clock()).handle(
            name="Gel-Kayano 30",
            brand="Asics",
            retailer_price="14999",
            wholesale_price="9000",
            variants=[VariantSpec("Blue", "42", 4), VariantSpec("", "43", 9)],
        )
        assert product.id == str(int(NOW.timestamp() * 1000))
        assert store.products() == [product]
        assert [(v.color, v.size, v.stock) for v in product.variants] == [("Blue", "42", 4)]

    def test_default_variant_when_none_given(self):
        product = AddProductHandler(ShopStore(), fixed_clock()).handle(
            name="Slide", brand="Puma", retailer_price="999",
        )
        assert [(v.color, v.size, v.stock) for v in product.variants] == [("Standard", "One Size", 1)]

    def test_missing_brand_adds_nothing(self):
        store = ShopStore()
        with pytest.raises(ValidationError, match="Brand"):
            AddProductHandler(store, fixed_clock()).handle(name="X", brand=" ", retailer_price="10")
        assert store.products() == []

    def test_bad_price(self):
        with pytest.raises(ValidationError):
            AddProductHandler(ShopStore(), fixed_clock()).handle(name="X", brand="Y", retailer_price="abc")


class TestQueries:

    def test_list_with_search(self):
        store = make_store()
        store.add_product(ultraboost())
        results = ListProductsHandler(store).handle(search="ultra")
        assert [p.name for p in results] == ["UltraBoost 22"]
        assert results[0].retailer_price == "₹15,990.00"

    def test_show_lists_variants_with_index(self):
        dto = ShowProductHandler(make_store()).handle("1")
        assert dto.total_stock == 20
        assert [(v.index, v.id) for v in dto.variants] == [(0, "v-rb42"), (1, "v-rb43")]

    def test_show_unknown(self):
        with pytest.raises(NotFoundError):
            ShowProductHandler(make_store()).handle("404")

    def test_delete_keeps_ledger(self):
        store = make_store()
        assert DeleteProductHandler(store).handle("1") == "Air Max Pulse"
        assert store.products() == []


class TestStockEdits:

    def test_set_stock(self):
        store = make_store()
        assert SetStockHandler(store).handle("1", 1, 3) == 3
        assert store.require_product("1").variants[1].stock == 3

    def test_adjust(self):
        store = make_store()
        assert SetStockHandler(store).adjust("1", 0, -2) == 10
        assert SetStockHandler(store).adjust("1", 0, 5) == 15

    def test_adjust_unknown_index(self):
        with pytest.raises(NotFoundError):
            SetStockHandler(make_store()).adjust("1", 9, 1)

    def test_add_variant_returns_line(self):
        store = make_store()
        line = AddVariantHandler(store).handle("1", "White", "44")
        assert (line.index, line.color, line.size, line.stock) == (2, "White", "44", 10)

    def test_duplicate_variant_rejected(self):
        with pytest.raises(ValidationError, match="already exists"):
            AddVariantHandler(make_store()).handle("1", "red/black", "42", 1)

    def test_stock_never_set_below_zero(self):
        store = make_store()
        with pytest.raises(ValidationError, match="below zero"):
            SetStockHandler(store).adjust("1", 1, -9)
        with pytest.raises(ValidationError, match="below zero"):
            SetStockHandler(store).handle("1", 0, -1)
        assert [v.stock for v in store.require_product("1").variants] == [12, 8]
