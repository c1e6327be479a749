"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import AppError


class CustomerAlreadyExists(AppError):
    """A customer with the same e-mail already exists."""
