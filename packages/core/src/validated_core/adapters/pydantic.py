"""Pydantic adapter — turns pydantic validation into Validated values."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..primitives.messages import NonEmptyMessages
from ..validated import Invalid, Validated, invalid, valid

logger = logging.getLogger("validated.adapters.pydantic")

M = TypeVar("M", bound=BaseModel)

_ADAPTER_CACHE_MAX_SIZE = 256


def messages_from_error(exc: PydanticValidationError) -> NonEmptyMessages:
    """Render each pydantic error as ``"<dotted loc>: <msg>"``, in report order.

    Errors without a location (plain type validation) keep the bare message.
    """
    messages: list[str] = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()))
        msg = error.get("msg", "validation error")
        messages.append(f"{loc}: {msg}" if loc else msg)
    return NonEmptyMessages.from_iterable(messages or [str(exc)])


def _failure(
    subject: str, exc: PydanticValidationError, message: str | None
) -> Validated[Any]:
    logger.debug("%s failed validation with %d error(s)", subject, exc.error_count())
    if message is not None:
        return invalid(message)
    return Invalid(messages_from_error(exc))


def validate_model(
    model_cls: type[M], data: Any, message: str | None = None
) -> Validated[M]:
    """Validate *data* into *model_cls*.

    If *message* is given it replaces pydantic's messages on failure.

    Usage::

        contact = validate_model(ContactForm, {"email": "ola@example.com"})
    """
    try:
        model = model_cls.model_validate(data)
    except PydanticValidationError as exc:
        return _failure(model_cls.__name__, exc, message)
    return valid(model)


@lru_cache(maxsize=_ADAPTER_CACHE_MAX_SIZE)
def _cached_adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def _adapter_for(type_: Any) -> TypeAdapter[Any]:
    if isinstance(type_, TypeAdapter):
        return type_
    try:
        hash(type_)
    except TypeError:
        # unhashable metadata, e.g. Annotated[int, {"k": "v"}]
        return TypeAdapter(type_)
    return _cached_adapter(type_)


def validate_value(type_: Any, value: Any, message: str | None = None) -> Validated[Any]:
    """Validate *value* against an arbitrary type via ``pydantic.TypeAdapter``.

    *type_* may also be a ``TypeAdapter`` the caller reuses. Adapters built
    here are cached per type.
    """
    adapter = _adapter_for(type_)
    try:
        result = adapter.validate_python(value)
    except PydanticValidationError as exc:
        return _failure(str(type_), exc, message)
    return valid(result)
