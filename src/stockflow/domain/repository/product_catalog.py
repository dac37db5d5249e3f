"""Abstract Product Catalog.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete catalogs (JSON file, in-memory, a hosted
document store) implement the four storage methods; the subscription
machinery and barcode lookup are shared here.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

from stockflow.domain.exceptions import AdapterUnavailableError
from stockflow.domain.model.product import Product

logger = logging.getLogger(__name__)

Subscriber = Callable[[list[Product]], None]
Unsubscribe = Callable[[], None]


class ProductCatalog(ABC):
    """Store of Product records keyed by id.

    Implementations must call ``refresh()`` after every successful write
    so subscribers see the new product list.
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []
        self._snapshot: list[Product] = []
        self._has_snapshot = False

    # --- Storage --------------------------------------------------------------

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Read a product straight from the store, or None if absent."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Read every product straight from the store."""

    @abstractmethod
    def create(self, product: Product) -> None:
        """Insert a new product.

        Raises DuplicateProductError if the id is already taken.
        """

    @abstractmethod
    def update(self, product_id: str, fields: dict[str, Any]) -> Product:
        """Merge *fields* into an existing product and return it.

        Raises EntityNotFoundError if no product has that id.
        """

    # --- Live snapshot --------------------------------------------------------

    def subscribe(self, on_change: Subscriber) -> Unsubscribe:
        """Deliver the full product list now and after every change.

        Returns a callable that cancels the subscription.
        """
        self._subscribers.append(on_change)
        on_change(list(self.snapshot(reload=True)))

        def unsubscribe() -> None:
            if on_change in self._subscribers:
                self._subscribers.remove(on_change)

        return unsubscribe

    def snapshot(self, reload: bool = False) -> list[Product]:
        """Last known product list, loading it once if never loaded.

        When the store cannot be read the previous snapshot (empty on
        first load) is kept, so callers always get a usable list.
        """
        if reload or not self._has_snapshot:
            try:
                self._snapshot = self.list_all()
                self._has_snapshot = True
            except AdapterUnavailableError as exc:
                logger.warning(
                    "Catalog unavailable, serving last snapshot (%d products): %s",
                    len(self._snapshot),
                    exc,
                )
        return self._snapshot

    def refresh(self) -> None:
        """Reload the snapshot and push it to every subscriber."""
        products = self.snapshot(reload=True)
        for subscriber in list(self._subscribers):
            subscriber(list(products))

    def find_by_barcode(self, barcode: str) -> Product | None:
        """Look a barcode up in the last snapshot (no store round trip)."""
        code = barcode.strip()
        for product in self.snapshot():
            if product.barcode == code:
                return product
        return None
