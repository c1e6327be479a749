"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers),
the Service layer and the Order repository.  DTOs are immutable
(``frozen=True``).

- ``PlaceOrderDTO``: input for order placement.
- ``ResolvedLineItemDTO``: a validated, priced line item.
- ``CreateOrderData``: what the service hands to ``IOrderRepository.create``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List

from pydantic import BaseModel, ConfigDict, field_validator

from modules.products.dtos import ProductQuantityDTO


class PlaceOrderDTO(BaseModel):
    """Immutable DTO for order placement requests.

    ``items`` must contain at least one entry.  Items are taken at face
    value: the same product id may appear more than once.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: str
    items: List[ProductQuantityDTO]

    @field_validator("items")
    @classmethod
    def items_must_not_be_empty(
        cls, v: List[ProductQuantityDTO]
    ) -> List[ProductQuantityDTO]:
        if not v:
            raise ValueError("Order must have at least one item.")
        return v


class ResolvedLineItemDTO(BaseModel):
    """A requested line item priced from the catalog snapshot."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    quantity: int
    unit_price: Decimal


class CreateOrderData(BaseModel):
    """Input for ``IOrderRepository.create``.

    ``customer`` is the full customer entity returned by the directory,
    not just its id.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    customer: Any
    items: List[ResolvedLineItemDTO]
