"""Exceptions for programming errors in validated-core.

Validation failures are never raised; they travel inside
:class:`~validated_core.validated.Invalid`. The classes below signal misuse
of the API itself.
"""

from __future__ import annotations


class ValidatedCoreError(Exception):
    """Root exception for the validated-core package."""


class EmptyMessagesError(ValidatedCoreError, ValueError):
    """Raised when an empty message sequence is used to build an ``Invalid``."""

    def __init__(self) -> None:
        super().__init__("An Invalid requires at least one failure message")


class ArityError(ValidatedCoreError, TypeError):
    """Raised when a combinator receives an unsupported number of inputs.

    Usage: ``accum`` and ``accum_bind`` raise this when called with fewer
    than two or more than five validated values.
    """

    def __init__(
        self,
        operation: str,
        received: int,
        minimum: int,
        maximum: int | None = None,
    ) -> None:
        self.operation = operation
        self.received = received
        self.minimum = minimum
        self.maximum = maximum

        if maximum is None:
            expected = f"at least {minimum}"
        else:
            expected = f"between {minimum} and {maximum}"
        super().__init__(
            f"{operation}() takes {expected} inputs, {received} given"
        )


class SealedTypeError(ValidatedCoreError, TypeError):
    """Raised when code outside the package tries to subclass ``Validated``."""

    def __init__(self, class_name: str) -> None:
        self.class_name = class_name
        super().__init__(
            f"Cannot subclass Validated with {class_name!r}: "
            "only Valid and Invalid are allowed"
        )
