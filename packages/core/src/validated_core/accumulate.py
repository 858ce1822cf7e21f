"""Accumulating combinators — merge failures instead of stopping at the first.

``accum`` builds a value from up to five independent validations. Every
input is inspected; if any failed, the result carries the messages of all
failing inputs in argument order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar, overload

from .functions import curry, identity
from .primitives.exceptions import ArityError
from .primitives.messages import NonEmptyMessages
from .validated import Invalid, Validated, valid

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

logger = logging.getLogger("validated.accumulate")

MIN_ARITY = 2
MAX_ARITY = 5

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
T = TypeVar("T")


def _split_inputs(
    operation: str, args: tuple[Any, ...]
) -> tuple[Sequence[Validated[Any]], Callable[..., Any]]:
    if not args:
        raise ArityError(operation, 0, MIN_ARITY, MAX_ARITY)
    *inputs, f = args
    if not MIN_ARITY <= len(inputs) <= MAX_ARITY:
        raise ArityError(operation, len(inputs), MIN_ARITY, MAX_ARITY)
    for position, candidate in enumerate(inputs):
        if not isinstance(candidate, Validated):
            raise TypeError(
                f"{operation}() argument {position} must be Validated, "
                f"got {type(candidate).__name__}"
            )
    if not callable(f):
        raise TypeError(f"{operation}() last argument must be callable")
    return inputs, f


def _combine(
    operation: str, inputs: Sequence[Validated[Any]], f: Callable[..., Any]
) -> Validated[Any]:
    result = inputs[0].map(curry(f, len(inputs)))
    for validated in inputs[1:]:
        result = validated.apply(result)

    failures = result.fold(len, lambda _value: 0)
    if failures:
        logger.debug(
            "%s over %d inputs collected %d failure message(s)",
            operation,
            len(inputs),
            failures,
        )
    return result


@overload
def accum(
    va: Validated[A], vb: Validated[B], f: Callable[[A, B], T], /
) -> Validated[T]: ...


@overload
def accum(
    va: Validated[A],
    vb: Validated[B],
    vc: Validated[C],
    f: Callable[[A, B, C], T],
    /,
) -> Validated[T]: ...


@overload
def accum(
    va: Validated[A],
    vb: Validated[B],
    vc: Validated[C],
    vd: Validated[D],
    f: Callable[[A, B, C, D], T],
    /,
) -> Validated[T]: ...


@overload
def accum(
    va: Validated[A],
    vb: Validated[B],
    vc: Validated[C],
    vd: Validated[D],
    ve: Validated[E],
    f: Callable[[A, B, C, D, E], T],
    /,
) -> Validated[T]: ...


def accum(*args: Any) -> Validated[Any]:
    """Combine two to five validations with *f*, the last argument.

    Succeeds with ``f(a, b, ...)`` only when every input is valid. Otherwise
    the result is ``Invalid`` with the messages of every failing input,
    left to right. *f* is not called unless all inputs are valid.

    Usage::

        user = accum(username, age, User)
    """
    inputs, f = _split_inputs("accum", args)
    return _combine("accum", inputs, f)


@overload
def accum_bind(
    va: Validated[A], vb: Validated[B], f: Callable[[A, B], Validated[T]], /
) -> Validated[T]: ...


@overload
def accum_bind(
    va: Validated[A],
    vb: Validated[B],
    vc: Validated[C],
    f: Callable[[A, B, C], Validated[T]],
    /,
) -> Validated[T]: ...


@overload
def accum_bind(
    va: Validated[A],
    vb: Validated[B],
    vc: Validated[C],
    vd: Validated[D],
    f: Callable[[A, B, C, D], Validated[T]],
    /,
) -> Validated[T]: ...


@overload
def accum_bind(
    va: Validated[A],
    vb: Validated[B],
    vc: Validated[C],
    vd: Validated[D],
    ve: Validated[E],
    f: Callable[[A, B, C, D, E], Validated[T]],
    /,
) -> Validated[T]: ...


def accum_bind(*args: Any) -> Validated[Any]:
    """Like :func:`accum`, but *f* itself returns a ``Validated``.

    Input failures accumulate exactly as in ``accum``. When every input is
    valid, the result of *f* is returned as is.
    """
    inputs, f = _split_inputs("accum_bind", args)
    return _combine("accum_bind", inputs, f).flat_map(identity)


def sequence(validations: Iterable[Validated[A]]) -> Validated[list[A]]:
    """Turn many validations into one validated list.

    All values are kept in input order when every validation passed;
    otherwise every message is collected in input order. An empty input
    yields ``Valid([])``. Runs in a single pass over *validations*.
    """
    values: list[A] = []
    messages: list[str] = []
    count = 0
    for validated in validations:
        validated.fold(messages.extend, values.append)
        count += 1

    if not messages:
        return valid(values)
    logger.debug(
        "sequence over %d inputs collected %d failure message(s)",
        count,
        len(messages),
    )
    return Invalid(NonEmptyMessages.from_iterable(messages))


def traverse(
    items: Iterable[A], f: Callable[[A], Validated[B]]
) -> Validated[list[B]]:
    """Validate each item with *f* and collect the results like :func:`sequence`."""
    return sequence(f(item) for item in items)
