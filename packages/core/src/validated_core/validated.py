"""Validated — a value that either passed validation or carries its failures."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .primitives.exceptions import SealedTypeError
from .primitives.messages import NonEmptyMessages

if TYPE_CHECKING:
    from collections.abc import Callable

A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")


class Validated(ABC, Generic[A]):
    """A validated value in one of exactly two states.

    ``Valid`` holds the value, ``Invalid`` holds a non-empty sequence of
    failure messages. State is observed through :meth:`fold`, which calls
    the branch matching the variant:

    * :meth:`map` transforms the value of a ``Valid``.
    * :meth:`flat_map` runs a validation that depends on the value; it
      stops at the first failure.
    * :meth:`apply` combines two independent validations and collects the
      messages of both when both fail.

    Only :class:`Valid` and :class:`Invalid` may subclass this type.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise SealedTypeError(cls.__qualname__)

    @abstractmethod
    def fold(
        self,
        on_invalid: Callable[[NonEmptyMessages], T],
        on_valid: Callable[[A], T],
    ) -> T:
        """Call *on_invalid* with the messages or *on_valid* with the value."""

    @abstractmethod
    def map(self, f: Callable[[A], B]) -> Validated[B]:
        """Transform the value if valid; failures pass through untouched."""

    @abstractmethod
    def flat_map(self, f: Callable[[A], Validated[B]]) -> Validated[B]:
        """Validate further based on the value; *f* is skipped on failure."""

    @abstractmethod
    def apply(self, wrapped_fn: Validated[Callable[[A], B]]) -> Validated[B]:
        """Apply a validated function to this validated value.

        When both sides are invalid the result holds the function side's
        messages followed by this value's messages.
        """

    def or_else(self, default: A) -> A:
        """Return the value if valid, otherwise *default*."""
        return self.fold(lambda _messages: default, lambda value: value)

    @property
    def is_valid(self) -> bool:
        return self.fold(lambda _messages: False, lambda _value: True)

    @property
    def is_invalid(self) -> bool:
        return not self.is_valid


@dataclass(frozen=True)
class Valid(Validated[A]):
    """The successful state of a :class:`Validated`."""

    value: A

    def fold(
        self,
        on_invalid: Callable[[NonEmptyMessages], T],
        on_valid: Callable[[A], T],
    ) -> T:
        return on_valid(self.value)

    def map(self, f: Callable[[A], B]) -> Validated[B]:
        return Valid(f(self.value))

    def flat_map(self, f: Callable[[A], Validated[B]]) -> Validated[B]:
        return f(self.value)

    def apply(self, wrapped_fn: Validated[Callable[[A], B]]) -> Validated[B]:
        return wrapped_fn.fold(Invalid, lambda fn: Valid(fn(self.value)))


@dataclass(frozen=True)
class Invalid(Validated[A]):
    """The failed state of a :class:`Validated`.

    Accepts a :class:`NonEmptyMessages`, a single message string, or any
    non-empty iterable of strings. The messages are copied on construction.
    """

    messages: NonEmptyMessages

    def __post_init__(self) -> None:
        messages: object = self.messages
        if isinstance(messages, NonEmptyMessages):
            return
        if isinstance(messages, str):
            normalized = NonEmptyMessages.of(messages)
        elif isinstance(messages, Iterable) and not isinstance(
            messages, (bytes, bytearray)
        ):
            normalized = NonEmptyMessages.from_iterable(messages)
        else:
            raise TypeError(
                f"Invalid messages must be strings, got {type(messages).__name__}"
            )
        object.__setattr__(self, "messages", normalized)

    def fold(
        self,
        on_invalid: Callable[[NonEmptyMessages], T],
        on_valid: Callable[[A], T],
    ) -> T:
        return on_invalid(self.messages)

    def map(self, f: Callable[[A], B]) -> Validated[B]:
        return Invalid(self.messages)

    def flat_map(self, f: Callable[[A], Validated[B]]) -> Validated[B]:
        return Invalid(self.messages)

    def apply(self, wrapped_fn: Validated[Callable[[A], B]]) -> Validated[B]:
        return wrapped_fn.fold(
            lambda fn_messages: Invalid(fn_messages + self.messages),
            lambda _fn: Invalid(self.messages),
        )


# ── Constructors ─────────────────────────────────────────────────


def valid(value: A) -> Validated[A]:
    """Wrap *value* as valid."""
    return Valid(value)


def invalid(message: str, *more: str) -> Validated[Any]:
    """Create an ``Invalid`` holding *message* (and any further messages)."""
    return Invalid(NonEmptyMessages.of(message, *more))


def from_optional(value: A | None, message: str) -> Validated[A]:
    """``Valid`` unless *value* is ``None``, in which case fail with *message*."""
    if value is None:
        return invalid(message)
    return valid(value)


def validate(value: A, predicate: Callable[[A], bool], message: str) -> Validated[A]:
    """Check *value* against *predicate*, failing with *message* if it does not hold.

    Usage::

        age = validate(35, lambda v: 0 <= v < 150, "The age must be in range [0,150)")
    """
    return valid(value) if predicate(value) else invalid(message)
