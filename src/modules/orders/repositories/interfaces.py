"""Order repository interface.

Extends ``IRepository[Order]`` with atomic creation of the Order
aggregate (order + line items).  The Service Layer depends exclusively
on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.dtos import CreateOrderData
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    async def create(self, data: CreateOrderData) -> Order:
        """Create an order with its items atomically and assign its identity."""
