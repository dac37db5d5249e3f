"""Application service: Seed Catalog use case.

Fills an empty catalog with a handful of demo products so a fresh
install has something to sell.
"""

from __future__ import annotations

import logging

from stockflow.domain.model.product import Product
from stockflow.domain.model.value_objects import Money
from stockflow.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


def demo_products() -> list[Product]:
    return [
        Product.create(
            barcode="8901030974328",
            name="Parle-G Gold Biscuits",
            description="A larger pack of the classic Parle-G biscuits, known for their glucose content.",
            mrp=Money.of("100"),
            cost_price_code="PGG-10",
            stock=50,
            low_inventory_factor=10,
        ),
        Product.create(
            barcode="8901233020977",
            name="Cadbury Dairy Milk Silk",
            description="A smooth and creamy milk chocolate bar from Cadbury.",
            mrp=Money.of("150"),
            cost_price_code="CDS-15",
            stock=8,
            low_inventory_factor=15,
        ),
        Product.create(
            barcode="8901725164016",
            name="Tata Tea Gold",
            description="A blend of Assam CTC and long-leaf teas.",
            mrp=Money.of("500"),
            cost_price_code="TTG-50",
            stock=25,
            low_inventory_factor=5,
        ),
        Product.create(
            barcode="8901030724831",
            name="Maggi 2-Minute Noodles",
            description="Instant noodles that are quick and easy to prepare.",
            mrp=Money.of("12"),
            cost_price_code="MG-1",
            stock=120,
            low_inventory_factor=24,
        ),
    ]


class SeedCatalogHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self) -> int:
        """Insert the demo products if the catalog is empty.

        Returns the number of products inserted (0 when the catalog
        already had data).
        """
        if self._catalog.list_all():
            return 0

        products = demo_products()
        for product in products:
            self._catalog.create(product)
        logger.info("Seeded catalog with %d demo products", len(products))
        return len(products)
