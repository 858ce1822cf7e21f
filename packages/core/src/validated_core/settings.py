"""Settings — an immutable key/value store whose lookups return Validated values."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

from .validated import Validated, from_optional, invalid, valid

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

logger = logging.getLogger("validated.settings")

A = TypeVar("A")


class Settings:
    """Immutable settings lookup.

    Every read returns a :class:`~validated_core.validated.Validated`, so a
    missing key or a value of the wrong type is reported as a message
    instead of an exception. Updates return a new instance.

    Usage::

        settings = Settings.empty().with_value("age", 35)
        age = settings.get_as_int("age")
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: Mapping[str, Any] = MappingProxyType(dict(values or {}))

    @classmethod
    def empty(cls) -> Settings:
        return cls()

    def with_value(self, key: str, value: Any) -> Settings:
        """Return a copy of these settings with *key* set to *value*."""
        return Settings({**self._values, key: value})

    def get(self, key: str) -> Validated[Any]:
        """Look up *key*; a missing key or a stored ``None`` is invalid."""
        value = self._values.get(key)
        if value is None:
            logger.debug("Settings lookup for missing key %r", key)
        return from_optional(
            value, f"The settings do not contain any value with key '{key}'"
        )

    def get_as(self, key: str, type_: type[A]) -> Validated[A]:
        """Look up *key* and require the value to be an instance of *type_*."""
        return self.get(key).flat_map(lambda value: _cast(key, value, type_))

    def get_as_str(self, key: str) -> Validated[str]:
        return self.get_as(key, str)

    def get_as_int(self, key: str) -> Validated[int]:
        return self.get_as(key, int)

    def keys(self) -> Iterator[str]:
        return iter(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Settings({dict(self._values)!r})"


def _cast(key: str, value: Any, type_: type[A]) -> Validated[A]:
    # bool is an int subclass but never a valid int setting
    if isinstance(value, type_) and not (type_ is int and isinstance(value, bool)):
        return valid(value)
    logger.debug(
        "Settings value for %r has type %s, expected %s",
        key,
        type(value).__name__,
        type_.__name__,
    )
    return invalid(
        f"Expected a value of type {type_.__name__} for key '{key}', "
        f"got {type(value).__name__}"
    )
