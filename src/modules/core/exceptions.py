"""Shared exception root for recoverable, user-facing domain errors.

Services raise subclasses of ``AppError``; the API layer (Views)
catches them and translates them into client-error responses.
"""

from __future__ import annotations


class AppError(Exception):
    """A business rule rejected the request; the process is unaffected."""
