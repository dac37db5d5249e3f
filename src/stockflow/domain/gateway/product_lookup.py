"""Abstract product-details lookup used to prefill new products."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDetails:
    """Best-effort details for a barcode; both fields may be empty."""

    name: str = ""
    description: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.name and not self.description


class ProductLookup(ABC):

    @abstractmethod
    def lookup(self, barcode: str) -> ProductDetails:
        """Return whatever is known about *barcode*.

        Unknown barcodes give empty details.  Raises
        AdapterUnavailableError when the service cannot be reached.
        """
