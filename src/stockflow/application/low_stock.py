"""Application service: Low Stock report and live monitor.

The monitor subscribes to the catalog and re-classifies the whole
snapshot on every change, remembering which products newly crossed
their reorder threshold since the previous snapshot.
"""

from __future__ import annotations

import logging

from stockflow.application.dto import LowStockLineDTO, low_stock_to_dto
from stockflow.domain.model.product import Product
from stockflow.domain.repository.product_catalog import ProductCatalog, Unsubscribe
from stockflow.domain.service.low_stock_classifier import LowStockEntry, classify

logger = logging.getLogger(__name__)


class LowStockMonitor:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog
        self._entries: list[LowStockEntry] = []
        self._alerts: list[LowStockEntry] = []
        self._unsubscribe: Unsubscribe | None = None
        self._started = False

    def start(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self._catalog.subscribe(self._on_change)

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __enter__(self) -> LowStockMonitor:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def entries(self) -> list[LowStockLineDTO]:
        return [low_stock_to_dto(e) for e in self._entries]

    def drain_alerts(self) -> list[LowStockLineDTO]:
        """Products that became low or out of stock since the last drain."""
        alerts = [low_stock_to_dto(e) for e in self._alerts]
        self._alerts = []
        return alerts

    def _on_change(self, products: list[Product]) -> None:
        previous = {e.product.id: e.status for e in self._entries}
        self._entries = classify(products)

        # First snapshot is the baseline, not news.
        if not self._started:
            self._started = True
            return

        for entry in self._entries:
            if previous.get(entry.product.id) != entry.status:
                logger.info(
                    "%s is now %s (stock %d)",
                    entry.product.name,
                    entry.status.value,
                    entry.product.stock,
                )
                self._alerts.append(entry)


class ShowLowStockHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self) -> list[LowStockLineDTO]:
        with LowStockMonitor(self._catalog) as monitor:
            return monitor.entries
