"""Option errors — absence causes and the helpers that join and match them."""

from __future__ import annotations

from typing import Any

from causal_option.kernel.errors.base import BaseError


class OptionError(BaseError):
    """Raised (or carried as a cause) by the option kernel."""

    default_code = "option_error"


class EmptyOptionError(OptionError):
    """An option is empty and nobody said why.

    Use the shared :data:`ERR_EMPTY_OPTION` instance rather than creating new
    ones, so that identity checks via :func:`matches` work.
    """

    default_code = "empty_option"


ERR_EMPTY_OPTION = EmptyOptionError("nil value in Option")


class SkippedTransformError(OptionError):
    """A transform was not executed because its input was already empty.

    The upstream cause is chained as ``__cause__`` and stays matchable.
    """

    default_code = "transform_skipped"

    def __init__(self, transform: str, upstream: BaseException, **kwargs: Any) -> None:
        super().__init__(
            f"{transform} not executed, upstream cause: {upstream}",
            detail={"transform": transform},
            cause=upstream,
            **kwargs,
        )
        self.transform = transform


class UnwrapError(OptionError):
    """``unwrap()`` was called on an empty option."""

    default_code = "unwrap_on_nothing"


class JoinedCause(ExceptionGroup):
    """Several absence causes combined into one.

    ``str()`` lists each member message on its own line.
    """

    def __str__(self) -> str:
        return "\n".join(str(exc) for exc in self.exceptions)

    def derive(self, excs: Any) -> "JoinedCause":
        return JoinedCause(self.message, excs)


def join_causes(*causes: Exception | None) -> Exception | None:
    """Combine *causes* into a single exception.

    ``None`` entries are dropped. Returns ``None`` when nothing is left, the
    cause itself when exactly one remains, otherwise a :class:`JoinedCause`.
    """
    present = [c for c in causes if c is not None]
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return JoinedCause("joined option causes", present)


def matches(cause: BaseException | None, target: BaseException | type[BaseException]) -> bool:
    """Return True if *cause*, or anything it wraps, is *target*.

    *target* is either an exception instance (compared by identity) or an
    exception class (compared with ``isinstance``). The ``__cause__`` chain is
    followed and exception groups are searched member by member.
    """
    seen: set[int] = set()
    pending: list[BaseException] = [cause] if cause is not None else []
    while pending:
        exc = pending.pop()
        if id(exc) in seen:
            continue
        seen.add(id(exc))
        if _is_target(exc, target):
            return True
        if exc.__cause__ is not None:
            pending.append(exc.__cause__)
        if isinstance(exc, BaseExceptionGroup):
            pending.extend(exc.exceptions)
    return False


def _is_target(exc: BaseException, target: BaseException | type[BaseException]) -> bool:
    if isinstance(target, type):
        return isinstance(exc, target)
    return exc is target


__all__ = [
    "ERR_EMPTY_OPTION",
    "EmptyOptionError",
    "JoinedCause",
    "OptionError",
    "SkippedTransformError",
    "UnwrapError",
    "join_causes",
    "matches",
]
