"""Product aggregate.

Products live independently of sales. They have their own lifecycle:
they are added to the catalog, edited, and their stock goes down as
sales are committed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from stockflow.domain.exceptions import ValidationError
from stockflow.domain.model.value_objects import Money

# Fields that may change after creation.  ``id`` and ``barcode`` are the
# catalog key and stay fixed for the life of the product.
UPDATABLE_FIELDS = frozenset(
    {
        "ean",
        "name",
        "description",
        "mrp",
        "cost_price_code",
        "stock",
        "low_inventory_factor",
    }
)


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products — it enforces every field
    rule.  The ``__init__`` stays plain so catalogs can reconstitute
    stored records without re-validating them.
    """

    id: str
    barcode: str
    name: str
    mrp: Money
    stock: int
    low_inventory_factor: int = 0
    description: str = ""
    cost_price_code: str = ""
    ean: str = ""

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        barcode: str,
        name: str,
        mrp: Money,
        stock: int,
        low_inventory_factor: int = 0,
        description: str = "",
        cost_price_code: str = "",
        ean: str | None = None,
    ) -> Product:
        """Create a new product; its id is the barcode."""
        if not barcode or not barcode.strip():
            raise ValidationError("Barcode is required")
        barcode = barcode.strip()

        product = Product(
            id=barcode,
            barcode=barcode,
            name=_require_name(name),
            mrp=_require_money("MRP", mrp),
            stock=_require_non_negative_int("Stock", stock),
            low_inventory_factor=_require_non_negative_int(
                "Low inventory threshold", low_inventory_factor
            ),
            description=(description or "").strip(),
            cost_price_code=(cost_price_code or "").strip(),
            ean=(ean or "").strip() or barcode,
        )
        return product

    # --- Mutation -------------------------------------------------------------

    def apply_changes(self, fields: dict[str, Any]) -> None:
        """Merge a partial update into this product.

        Every value is validated before anything is assigned, so a bad
        field leaves the product untouched.
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Cannot update field(s): {', '.join(sorted(unknown))}"
            )

        validated: dict[str, Any] = {}
        for key, value in fields.items():
            if key == "name":
                validated[key] = _require_name(value)
            elif key == "mrp":
                validated[key] = _require_money("MRP", value)
            elif key == "stock":
                validated[key] = _require_non_negative_int("Stock", value)
            elif key == "low_inventory_factor":
                validated[key] = _require_non_negative_int(
                    "Low inventory threshold", value
                )
            else:
                validated[key] = (value or "").strip()

        for key, value in validated.items():
            setattr(self, key, value)


# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------


def _require_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Product name is required")
    return name.strip()


def _require_money(label: str, value: Money) -> Money:
    if not isinstance(value, Money):
        raise ValidationError(f"{label} must be a Money amount")
    return value


def _require_non_negative_int(label: str, value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{label} must be an integer")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative")
    return value
