"""Application service: Complete Sale use case."""

from __future__ import annotations

from stockflow.application.dto import SaleReceiptDTO, receipt_to_dto
from stockflow.domain.model.cart import Cart
from stockflow.domain.repository.product_catalog import ProductCatalog
from stockflow.domain.service.sale_commit_service import SaleCommitService


class CompleteSaleHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self, cart: Cart) -> SaleReceiptDTO:
        """Commit the cart; the cart is empty afterwards.

        The receipt lists each line's outcome so the caller can see
        which stock decrements actually landed.
        """
        svc = SaleCommitService(self._catalog)
        receipt = svc.commit(cart)
        return receipt_to_dto(receipt)
