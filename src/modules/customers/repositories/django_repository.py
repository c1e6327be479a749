"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's async QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions. The Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.core.exceptions import ValidationError

from modules.customers.dtos import CreateCustomerDTO
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    async def find_by_id(self, id: str) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            return await Customer.objects.filter(id=id).afirst()
        except (ValueError, ValidationError):
            return None

    async def find_by_email(self, email: str) -> Optional[Customer]:
        return await Customer.objects.filter(email=email.strip().lower()).afirst()

    async def create(self, dto: CreateCustomerDTO) -> Customer:
        customer = await Customer.objects.acreate(name=dto.name, email=dto.email)
        logger.info("customer.saved", customer_id=str(customer.id))
        return customer
