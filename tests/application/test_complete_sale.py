"""Tests for the CompleteSale use case.

Runs the whole add → commit flow against the in-memory catalog.
"""

import pytest

from stockflow.application.add_to_cart import AddToCartHandler
from stockflow.application.complete_sale import CompleteSaleHandler
from stockflow.domain.exceptions import EmptyCartError, InsufficientStockError
from stockflow.domain.model.cart import Cart
from tests.fakes import FakeProductCatalog, make_product


class TestCompleteSale:

    def test_full_scenario(self):
        catalog = FakeProductCatalog(
            [make_product("A", stock=10, mrp="100", low_inventory_factor=5)]
        )
        add = AddToCartHandler(catalog)
        cart = Cart()

        add.handle(cart, "A", 3)
        with pytest.raises(InsufficientStockError):
            add.handle(cart, "A", 8)
        add.handle(cart, "A", 7)

        receipt = CompleteSaleHandler(catalog).handle(cart)

        assert receipt.total == "₹1000.00"
        assert receipt.fully_applied
        assert receipt.outcomes[0].remaining_stock == 0
        assert cart.is_empty
        assert catalog.stock_of("A") == 0

    def test_empty_cart(self):
        with pytest.raises(EmptyCartError):
            CompleteSaleHandler(FakeProductCatalog()).handle(Cart())

    def test_partial_failure_reported_per_line(self):
        catalog = FakeProductCatalog([make_product("A"), make_product("B")])
        catalog.failing_updates.add("B")
        add = AddToCartHandler(catalog)
        cart = Cart()
        add.handle(cart, "A")
        add.handle(cart, "B")

        receipt = CompleteSaleHandler(catalog).handle(cart)

        assert not receipt.fully_applied
        assert [(o.product_id, o.applied) for o in receipt.outcomes] == [
            ("A", True),
            ("B", False),
        ]
        assert receipt.outcomes[1].remaining_stock is None
        assert cart.is_empty
