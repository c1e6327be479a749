"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import AppError


class ProductAlreadyExists(AppError):
    """A product with the same name already exists in the catalog."""
