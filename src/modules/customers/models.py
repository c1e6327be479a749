"""Customer model.

Business rules implemented:
- E-mail must be unique in the system (enforced at service layer and
  by a UNIQUE index).
- E-mail is normalised to lowercase on save to prevent visual duplicates.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root.

    The order workflow only cares whether a customer exists; ``name`` and
    ``email`` are carried for the create/read endpoints.
    """

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]

    def save(self, *args, **kwargs) -> None:
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.name
