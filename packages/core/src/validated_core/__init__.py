"""validated-core — accumulating validation for plain Python values.

A :class:`Validated` is either ``Valid`` with a value or ``Invalid`` with
one or more messages. Independent validations are combined with
:func:`accum`, which collects every failure instead of stopping at the
first. Pydantic integration lives in :mod:`validated_core.adapters`.
"""

from __future__ import annotations

# ── Combinators ──────────────────────────────────────────────────
from .accumulate import accum, accum_bind, sequence, traverse
from .functions import curry, identity

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    ArityError,
    EmptyMessagesError,
    NonEmptyMessages,
    SealedTypeError,
    ValidatedCoreError,
)

# ── Settings ─────────────────────────────────────────────────────
from .settings import Settings

# ── Validated ────────────────────────────────────────────────────
from .validated import (
    Invalid,
    Valid,
    Validated,
    from_optional,
    invalid,
    valid,
    validate,
)

__all__: list[str] = [
    # Validated
    "Validated",
    "Valid",
    "Invalid",
    "valid",
    "invalid",
    "from_optional",
    "validate",
    # Combinators
    "accum",
    "accum_bind",
    "sequence",
    "traverse",
    "curry",
    "identity",
    # Settings
    "Settings",
    # Primitives
    "NonEmptyMessages",
    "ValidatedCoreError",
    "EmptyMessagesError",
    "ArityError",
    "SealedTypeError",
]
