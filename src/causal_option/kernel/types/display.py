"""Human-readable rendering of options (for logs and debugging, not a wire format)."""

from __future__ import annotations

from typing import Any

NONE_MARKER = "none"


def describe(opt: Any) -> str:
    """Render *opt*: ``"none"`` when empty, otherwise ``str`` of the value.

    Never raises, including for an empty option whose cause was lost.
    """
    if opt.cause is not None or opt.is_none():
        return NONE_MARKER
    return str(opt.ok())


__all__ = ["NONE_MARKER", "describe"]
