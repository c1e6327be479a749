"""Customer repository interface.

The order workflow only needs ``find_by_id``; ``find_by_email`` and
``create`` back the customer registration use case.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by e-mail address."""

    @abstractmethod
    async def create(self, dto: CreateCustomerDTO) -> Customer:
        """Persist a new customer and return it with its identity assigned."""
