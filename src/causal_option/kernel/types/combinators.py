"""Free-function forms of the option combinators.

Each one accepts any :class:`~causal_option.kernel.types.option.Option` and
short-circuits on ``Nothing`` without calling the user's function::

    from causal_option.kernel.types import combinators as opt

    port = opt.process(opt.from_nullable(env.get("PORT")), int)
    opt.map(port, lambda p: p + 1)
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from causal_option.kernel.types.option import (
    Option,
    Some,
    is_none,
    is_some,
    none,
    wrap,
    wrap_fn,
)

T = TypeVar("T")
U = TypeVar("U")


def map(opt: Option[T], fn: Callable[[T], U], *, annotate: bool = False) -> Option[U]:  # noqa: A001
    """Apply an infallible *fn* to the value of *opt*.

    When *opt* is empty, *fn* is not called and the result carries the same
    cause (wrapped in ``SkippedTransformError`` when *annotate* is set).
    Exceptions raised by *fn* propagate.
    """
    return opt.map(fn, annotate=annotate)


def process(opt: Option[T], fn: Callable[[T], U], *, annotate: bool = False) -> Option[U]:
    """Apply a fallible *fn*; an exception it raises becomes the new cause."""
    return opt.process(fn, annotate=annotate)


def flatten(opt: Option[Option[T]]) -> Option[T]:
    """Collapse ``Option[Option[T]]``: the outer cause if empty, else the inner option."""
    return opt.flatten()


def from_nullable(value: T | None, *causes: Exception | None) -> Option[T]:
    if value is None:
        return none(*causes)
    return Some(value)


__all__ = [
    "flatten",
    "from_nullable",
    "is_none",
    "is_some",
    "map",
    "none",
    "process",
    "wrap",
    "wrap_fn",
]
