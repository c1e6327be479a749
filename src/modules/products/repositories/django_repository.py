"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's async QuerySet API.
Malformed ids never raise: they simply do not match any product, so
the Service Layer reports them as missing.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence
from uuid import UUID

import structlog
from django.utils import timezone

from modules.products.dtos import CreateProductDTO, ProductQuantityDTO
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def _valid_uuids(ids: Iterable[str]) -> List[UUID]:
    parsed = []
    for value in ids:
        try:
            parsed.append(UUID(str(value)))
        except ValueError:
            continue
    return parsed


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    async def find_all_by_id(
        self, products: Sequence[ProductQuantityDTO]
    ) -> List[Product]:
        ids = _valid_uuids(p.id for p in products)
        if not ids:
            return []
        return [p async for p in Product.objects.filter(id__in=ids)]

    async def update_quantity(self, products: Sequence[ProductQuantityDTO]) -> None:
        """Write back absolute stock levels in a single bulk UPDATE.

        When the same id is listed more than once the last entry wins.
        Unknown ids are skipped.
        """
        new_quantities = {}
        for item in products:
            for uid in _valid_uuids([item.id]):
                new_quantities[uid] = item.quantity
        if not new_quantities:
            return

        stored = await Product.objects.ain_bulk(list(new_quantities))
        now = timezone.now()
        for uid, product in stored.items():
            product.quantity = new_quantities[uid]
            product.updated_at = now

        await Product.objects.abulk_update(
            list(stored.values()), ["quantity", "updated_at"]
        )
        logger.info("product.quantities_updated", product_count=len(stored))

    async def find_by_name(self, name: str) -> Optional[Product]:
        return await Product.objects.filter(name=name.strip()).afirst()

    async def create(self, dto: CreateProductDTO) -> Product:
        product = await Product.objects.acreate(
            name=dto.name,
            price=dto.price,
            quantity=dto.quantity,
        )
        logger.info("product.saved", product_id=str(product.id))
        return product
