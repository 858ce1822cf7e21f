"""NonEmptyMessages — ordered failure messages with at least one entry."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import overload

from .exceptions import EmptyMessagesError


@dataclass(frozen=True)
class NonEmptyMessages(Sequence[str]):
    """Immutable sequence of validation messages that can never be empty.

    The first message is stored apart from the rest, so an empty instance
    cannot be represented. Order is preserved and duplicates are kept.

    Usage::

        messages = NonEmptyMessages.of("name is required")
        merged = messages + NonEmptyMessages.of("age must be positive")
    """

    head: str
    tail: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        tail: object = self.tail
        if isinstance(tail, (str, bytes, bytearray)):
            raise TypeError(
                "NonEmptyMessages tail must be a sequence of strings, "
                f"got a single {type(tail).__name__}"
            )
        if not isinstance(tail, tuple):
            object.__setattr__(self, "tail", tuple(self.tail))
        for message in self:
            if not isinstance(message, str):
                raise TypeError(
                    f"Validation messages must be strings, got {type(message).__name__}"
                )

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def of(cls, first: str, *rest: str) -> NonEmptyMessages:
        return cls(first, rest)

    @classmethod
    def from_iterable(cls, messages: Iterable[str]) -> NonEmptyMessages:
        """Build from any iterable, raising ``EmptyMessagesError`` if it is empty."""
        items = tuple(messages)
        if not items:
            raise EmptyMessagesError()
        return cls(items[0], items[1:])

    # ── Sequence protocol ────────────────────────────────────────

    def __len__(self) -> int:
        return 1 + len(self.tail)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[str, ...]: ...

    def __getitem__(self, index: int | slice) -> str | tuple[str, ...]:
        return self.to_tuple()[index]

    def __iter__(self) -> Iterator[str]:
        yield self.head
        yield from self.tail

    # ── Combining ────────────────────────────────────────────────

    def __add__(self, other: object) -> NonEmptyMessages:
        """Concatenate into a new sequence; neither operand is modified."""
        if not isinstance(other, NonEmptyMessages):
            return NotImplemented
        return NonEmptyMessages(self.head, (*self.tail, other.head, *other.tail))

    def to_tuple(self) -> tuple[str, ...]:
        return (self.head, *self.tail)

    def to_list(self) -> list[str]:
        """Return a fresh list of the messages."""
        return list(self)

    def __repr__(self) -> str:
        return f"NonEmptyMessages({self.to_list()!r})"
