"""Unit tests for the shared ProductCatalog subscription behaviour."""

from stockflow.domain.model.product import Product
from tests.fakes import FakeProductCatalog, make_product


class _Recorder:

    def __init__(self) -> None:
        self.snapshots: list[list[Product]] = []

    def __call__(self, products: list[Product]) -> None:
        self.snapshots.append(products)

    @property
    def last_ids(self) -> list[str]:
        return [p.id for p in self.snapshots[-1]]


class TestSubscribe:

    def test_initial_snapshot_delivered_immediately(self):
        catalog = FakeProductCatalog([make_product("A"), make_product("B")])
        rec = _Recorder()
        catalog.subscribe(rec)
        assert len(rec.snapshots) == 1
        assert rec.last_ids == ["A", "B"]

    def test_writes_republish_full_set(self):
        catalog = FakeProductCatalog([make_product("A", stock=10)])
        rec = _Recorder()
        catalog.subscribe(rec)

        catalog.create(make_product("B"))
        catalog.update("A", {"stock": 3})

        assert len(rec.snapshots) == 3
        assert rec.last_ids == ["A", "B"]
        assert rec.snapshots[-1][0].stock == 3

    def test_unsubscribe_stops_delivery(self):
        catalog = FakeProductCatalog([make_product("A")])
        rec = _Recorder()
        unsubscribe = catalog.subscribe(rec)
        unsubscribe()
        unsubscribe()  # second call is harmless

        catalog.update("A", {"stock": 1})

        assert len(rec.snapshots) == 1

    def test_unavailable_store_degrades_to_empty(self):
        catalog = FakeProductCatalog([make_product("A")])
        catalog.unavailable = True
        rec = _Recorder()
        catalog.subscribe(rec)
        assert rec.snapshots == [[]]

    def test_unavailable_store_keeps_last_good_snapshot(self):
        catalog = FakeProductCatalog([make_product("A")])
        rec = _Recorder()
        catalog.subscribe(rec)

        catalog.unavailable = True
        catalog.refresh()

        assert rec.last_ids == ["A"]


class TestFindByBarcode:

    def test_found_in_snapshot(self):
        catalog = FakeProductCatalog([make_product("123")])
        assert catalog.find_by_barcode("123").id == "123"

    def test_whitespace_ignored(self):
        catalog = FakeProductCatalog([make_product("123")])
        assert catalog.find_by_barcode(" 123\n") is not None

    def test_missing_returns_none(self):
        catalog = FakeProductCatalog([make_product("123")])
        assert catalog.find_by_barcode("999") is None

    def test_answers_from_snapshot_without_store_round_trip(self):
        catalog = FakeProductCatalog([make_product("123")])
        catalog.snapshot()
        catalog.unavailable = True
        assert catalog.find_by_barcode("123") is not None
