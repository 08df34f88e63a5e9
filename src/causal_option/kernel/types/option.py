"""Option[T] — Some and Nothing variants, where Nothing always knows why.

``Some(value)`` holds a present value and has no cause. ``Nothing(cause)``
holds no value and a non-null cause; built without one it carries
:data:`~causal_option.kernel.errors.ERR_EMPTY_OPTION`.

Both variants are frozen: every combinator returns a new option (or the
same empty one) and never mutates its input.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Iterator, NoReturn, TypeVar, get_args

from causal_option.kernel.errors import (
    ERR_EMPTY_OPTION,
    SkippedTransformError,
    UnwrapError,
    join_causes,
)
from causal_option.kernel.types.display import describe
from causal_option.observability.logging import callable_name

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """Common base of :class:`Some` and :class:`Nothing`.

    Usable as a type annotation (``Option[int]``), including as a pydantic
    model field when pydantic is installed.
    """

    __slots__ = ()

    @property
    def cause(self) -> BaseException | None:
        raise NotImplementedError

    def ok(self) -> T | None:
        """Return the value, or ``None`` when empty. Never raises."""
        raise NotImplementedError

    def is_some(self) -> bool:
        return self.cause is None

    def is_none(self) -> bool:
        return not self.is_some()

    def unwrap(self) -> T:
        raise NotImplementedError

    def unwrap_or(self, default: T) -> T:
        raise NotImplementedError

    def map(self, fn: Callable[[T], U], *, annotate: bool = False) -> "Option[U]":
        raise NotImplementedError

    def process(self, fn: Callable[[T], U], *, annotate: bool = False) -> "Option[U]":
        raise NotImplementedError

    def flatten(self) -> "Option[Any]":
        raise NotImplementedError

    def __str__(self) -> str:
        return describe(self)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: Any,
    ) -> Any:
        from pydantic_core import core_schema

        args = get_args(source_type)
        inner = handler.generate_schema(args[0]) if args else core_schema.any_schema()

        def _validate(value: Any, validate_inner: Callable[[Any], Any]) -> Option[Any]:
            if isinstance(value, Some):
                return Some(validate_inner(value.value))
            if isinstance(value, Nothing):
                return value
            if value is None or (isinstance(value, (dict, list)) and not value):
                return Nothing()
            return Some(validate_inner(value))

        return core_schema.no_info_wrap_validator_function(
            _validate,
            inner,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda opt: opt.ok()),
        )


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Some(Option[T]):
    """Option with a value. The value is trusted as-is; nothing is validated."""

    value: T

    @property
    def cause(self) -> None:
        return None

    def ok(self) -> T:
        return self.value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def map(self, fn: Callable[[T], U], *, annotate: bool = False) -> "Some[U]":  # noqa: ARG002
        return Some(fn(self.value))

    def process(self, fn: Callable[[T], U], *, annotate: bool = False) -> Option[U]:  # noqa: ARG002
        value = self.value
        return wrap_fn(lambda: fn(value))()

    def flatten(self) -> Option[Any]:
        if not isinstance(self.value, Option):
            raise TypeError(f"flatten() expects Some(Option), got Some({type(self.value).__name__})")
        return self.value

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Nothing(Option[T]):
    """Empty option together with the reason it is empty."""

    cause: BaseException = ERR_EMPTY_OPTION  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.cause is None:
            object.__setattr__(self, "cause", ERR_EMPTY_OPTION)

    def ok(self) -> None:
        return None

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError("called unwrap() on Nothing", cause=self.cause)

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[T], U], *, annotate: bool = False) -> "Nothing[U]":
        return self._skip(fn, annotate)

    def process(self, fn: Callable[[T], U], *, annotate: bool = False) -> "Nothing[U]":
        return self._skip(fn, annotate)

    def flatten(self) -> "Nothing[Any]":
        return self

    def _skip(self, fn: Callable[..., Any], annotate: bool) -> "Nothing[Any]":
        if annotate:
            return Nothing(SkippedTransformError(callable_name(fn), self.cause))
        return self

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __repr__(self) -> str:
        return f"Nothing(cause={self.cause!r})"


def none(*causes: Exception | None) -> Nothing[Any]:
    """Build an empty option.

    With no causes the cause is ``ERR_EMPTY_OPTION``; with several they are
    joined so that each one still matches the result's cause.
    """
    return Nothing(join_causes(*causes) or ERR_EMPTY_OPTION)


def wrap(value: T, *errs: Exception | None) -> Option[T]:
    """Bridge a ``(value, error)`` pair into an option.

    Any non-``None`` error makes the result empty, and *value* is dropped.
    """
    cause = join_causes(*errs)
    if cause is not None:
        return Nothing(cause)
    return Some(value)


def wrap_fn(fn: Callable[[], T]) -> Callable[[], Option[T]]:
    """Adapt a fallible zero-argument callable into one that returns an option.

    An :class:`Exception` raised by *fn* becomes the cause of the result.
    """

    def _wrapped() -> Option[T]:
        try:
            value = fn()
        except Exception as exc:  # noqa: BLE001 - becomes the absence cause
            return wrap(None, exc)  # type: ignore[arg-type]
        return wrap(value)

    return _wrapped


def is_some(opt: Option[Any]) -> bool:
    return opt.cause is None


def is_none(opt: Option[Any]) -> bool:
    return not is_some(opt)


__all__ = [
    "Nothing",
    "Option",
    "Some",
    "is_none",
    "is_some",
    "none",
    "wrap",
    "wrap_fn",
]
