"""Product repository interface.

The order workflow consumes two operations: a batch look-up by id and
a bulk stock write-back.  ``find_by_name`` and ``create`` back the
product registration use case.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, ProductQuantityDTO
    from modules.products.models import Product


class IProductRepository(ABC):
    """Repository contract for the Product catalog."""

    @abstractmethod
    async def find_all_by_id(
        self, products: Sequence[ProductQuantityDTO]
    ) -> List[Product]:
        """Return the catalog products whose id matches any requested id.

        Only matches are returned, each at most once; order is unspecified.
        """

    @abstractmethod
    async def update_quantity(self, products: Sequence[ProductQuantityDTO]) -> None:
        """Overwrite the stored quantity of each listed product."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Product]:
        """Retrieve a product by its (unique) name."""

    @abstractmethod
    async def create(self, dto: CreateProductDTO) -> Product:
        """Persist a new product and return it with its identity assigned."""
