"""Kernel – the option type, its combinators and its error hierarchy."""

from causal_option.kernel.errors import (
    ERR_EMPTY_OPTION,
    BaseError,
    EmptyOptionError,
    JoinedCause,
    OptionError,
    SerializationError,
    SkippedTransformError,
    UnwrapError,
    matches,
)
from causal_option.kernel.types import Nothing, Option, Some, none

__all__ = [
    "BaseError",
    "ERR_EMPTY_OPTION",
    "EmptyOptionError",
    "JoinedCause",
    "Nothing",
    "Option",
    "OptionError",
    "SerializationError",
    "Some",
    "SkippedTransformError",
    "UnwrapError",
    "matches",
    "none",
]
