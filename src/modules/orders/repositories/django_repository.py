"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository``.  Creation writes the order row and its
items inside ``transaction.atomic()``; Django does not support
transactions from async code, so the atomic block runs in a worker
thread through ``sync_to_async``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

import structlog
from asgiref.sync import sync_to_async
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.orders.dtos import CreateOrderData
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


def _with_relations():
    return Order.objects.select_related("customer").prefetch_related("items")


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create (aggregate root + children)
    # ------------------------------------------------------------------

    async def create(self, data: CreateOrderData) -> Order:
        return await sync_to_async(self._create)(data)

    @transaction.atomic
    def _create(self, data: CreateOrderData) -> Order:
        order = Order(customer=data.customer)
        order.save()

        total = Decimal("0.00")
        for line in data.items:
            item = OrderItem(
                order=order,
                product_id=line.product_id,
                quantity=line.quantity,
                unit_price=line.unit_price,
            )
            item.save()
            total += item.subtotal

        order.total_amount = total
        order.save(update_fields=["total_amount"])

        logger.info(
            "order.created", order_id=str(order.id), item_count=len(data.items)
        )
        return _with_relations().get(id=order.id)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def find_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with its customer and items eager-loaded.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return await _with_relations().filter(id=id).afirst()
        except (ValueError, ValidationError):
            return None
