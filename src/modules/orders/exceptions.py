"""Order domain exceptions.

Raised by the Service Layer when an order request is rejected.
Every placement failure derives from ``OrderPlacementError``: all are
recoverable, user-facing validation errors, distinguished by type and
payload.  The API layer (Views) translates them into client-error
responses.
"""

from __future__ import annotations

from typing import List, Sequence

from modules.core.exceptions import AppError


def _bracketed(values: Sequence[str]) -> str:
    return ", ".join(f"[{value}]" for value in values)


class OrderNotFound(AppError):
    """The requested order does not exist."""


class OrderPlacementError(AppError):
    """Base class for every gate of the order placement workflow."""


class CustomerNotFound(OrderPlacementError):
    """The customer referenced by the order does not exist."""

    def __init__(self, message: str = "Customer does not exist.") -> None:
        super().__init__(message)


class NoProductsFound(OrderPlacementError):
    """Not a single requested product id matched the catalog."""

    def __init__(self, message: str = "No products were found.") -> None:
        super().__init__(message)


class ProductsNotFound(OrderPlacementError):
    """Some requested product ids are unknown to the catalog."""

    def __init__(self, missing_ids: Sequence[str]) -> None:
        self.missing_ids: List[str] = list(missing_ids)
        super().__init__(
            f"The following products were not found {_bracketed(self.missing_ids)}"
        )


class ProductsSoldOut(OrderPlacementError):
    """Some requested products have no stock left."""

    def __init__(self, product_ids: Sequence[str]) -> None:
        self.product_ids: List[str] = list(product_ids)
        super().__init__(
            f"The following products are sold out {_bracketed(self.product_ids)}"
        )


class InsufficientStock(OrderPlacementError):
    """Requested quantity exceeds the available stock.

    ``entries`` are ``"<id>: <available quantity>"`` strings.
    """

    def __init__(self, entries: Sequence[str]) -> None:
        self.entries: List[str] = list(entries)
        super().__init__(
            f"The following products are out of stock {_bracketed(self.entries)}"
        )
