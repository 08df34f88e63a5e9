"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def callable_name(fn: Any) -> str:
    """Best-effort human-readable name for *fn* (used in log events and causes)."""
    module = getattr(fn, "__module__", None)
    qualname = getattr(fn, "__qualname__", None)
    if qualname is None:
        return repr(fn)
    return f"{module}.{qualname}" if module else qualname


def render_cause(
    logger: Any,           # noqa: ARG001
    method_name: str,      # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor that turns a ``cause`` exception into ``cause`` / ``cause_type`` strings."""
    cause = event_dict.get("cause")
    if isinstance(cause, BaseException):
        event_dict["cause"] = str(cause)
        event_dict["cause_type"] = type(cause).__name__
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["callable_name", "get_logger", "render_cause"]
