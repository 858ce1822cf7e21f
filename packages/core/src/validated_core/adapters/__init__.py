"""Adapters connecting Validated values to third-party validation libraries."""

from __future__ import annotations

from .pydantic import messages_from_error, validate_model, validate_value

__all__ = [
    "messages_from_error",
    "validate_model",
    "validate_value",
]
