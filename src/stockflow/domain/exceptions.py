"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InsufficientStockError(ValidationError):
    """Adding to the cart (or selling) would exceed the stock on hand."""


class EmptyCartError(ValidationError):
    """A sale was committed with nothing in the cart."""


class DuplicateProductError(ValidationError):
    """A product with the same id / barcode is already in the catalog."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AdapterUnavailableError(DomainException):
    """The catalog store or the lookup service could not be reached."""
