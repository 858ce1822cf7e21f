"""Primitives: message sequences and the exception hierarchy."""

from __future__ import annotations

from .exceptions import (
    ArityError,
    EmptyMessagesError,
    SealedTypeError,
    ValidatedCoreError,
)
from .messages import NonEmptyMessages

__all__ = [
    "ArityError",
    "EmptyMessagesError",
    "NonEmptyMessages",
    "SealedTypeError",
    "ValidatedCoreError",
]
