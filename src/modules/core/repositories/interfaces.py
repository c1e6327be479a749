"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Every method is a coroutine: services ``await`` their collaborators so
the same contract can be satisfied by the async ORM or by in-memory
fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``, ``Order``).
    """

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""
