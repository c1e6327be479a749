"""Product service layer (Use Cases).

Business rules enforced here:
- Product name must be unique.
- Price and quantity cannot be negative (validated by DTO).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.products.exceptions import ProductAlreadyExists

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product after enforcing name uniqueness.

        Raises:
            ProductAlreadyExists: if the name is already taken.
        """
        log = logger.bind(name=dto.name)

        if await self._repo.find_by_name(dto.name):
            log.warning("product.duplicate_name")
            raise ProductAlreadyExists("A product with this name already exists.")

        product = await self._repo.create(dto)
        log.info("product.created", product_id=str(product.id))
        return product
