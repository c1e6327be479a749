"""Customer DTOs for the Service Layer.

Framework-agnostic, immutable (``frozen=True``) Pydantic v2 models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()
