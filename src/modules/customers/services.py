"""Customer service layer (Use Cases).

Business rules enforced here:
- E-mail must be unique.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.customers.exceptions import CustomerAlreadyExists

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    async def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer after enforcing e-mail uniqueness.

        Raises:
            CustomerAlreadyExists: if the e-mail is already taken.
        """
        log = logger.bind(email=dto.email)

        if await self._repo.find_by_email(dto.email):
            log.warning("customer.duplicate_email")
            raise CustomerAlreadyExists("This e-mail is already assigned.")

        customer = await self._repo.create(dto)
        log.info("customer.created", customer_id=str(customer.id))
        return customer
