"""Small function helpers used by the combinators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from .primitives.exceptions import ArityError

if TYPE_CHECKING:
    from collections.abc import Callable

A = TypeVar("A")


def identity(value: A) -> A:
    return value


def curry(f: Callable[..., Any], arity: int) -> Callable[[Any], Any]:
    """Turn an *arity*-argument callable into a chain of one-argument callables.

    ``curry(f, 3)(a)(b)(c)`` is ``f(a, b, c)``. Nothing is evaluated until
    the last argument arrives, and each partial application is independent.
    """
    if arity < 1:
        raise ArityError("curry", arity, minimum=1)

    def collect(args: tuple[Any, ...]) -> Any:
        if len(args) == arity:
            return f(*args)
        return lambda arg: collect((*args, arg))

    return lambda arg: collect((arg,))
