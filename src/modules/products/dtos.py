"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``ProductQuantityDTO``: the ``{id, quantity}`` pair used for batch
  look-ups, order line requests and stock write-backs.
- ``CreateProductDTO``: input for product creation.
"""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator


class ProductQuantityDTO(BaseModel):
    """A product id paired with a quantity.

    The meaning of ``quantity`` depends on the caller: a requested amount
    in an order request, an absolute stock level in a write-back.
    UUID-shaped ids are stored in canonical form (lowercase, hyphenated)
    so they compare equal to ``str(product.id)``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    quantity: int

    @field_validator("id")
    @classmethod
    def canonical_uuid(cls, v: str) -> str:
        try:
            return str(UUID(v))
        except ValueError:
            return v


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-empty string.
    - ``price`` is not negative.
    - ``quantity`` is not negative.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    quantity: int = 0

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Quantity cannot be negative.")
        return v
